"""
Pagewright Kernel — Tree Normalizer

Trees produced outside the editor (a generative model, an uploaded file)
are untrusted. normalize_tree repairs them into a tree the engine can work
with:

  - the root is forced to id "root" with no parent
  - missing, non-string or duplicate ids are replaced with fresh ones
  - missing children default to empty; non-object children are dropped
  - non-object data and style bags become empty
  - parent pointers are rebuilt from containment

Kinds are passed through untouched. Unknown kinds surface as placeholders
at generation time.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pagewright.kernel.ids import IdFactory, new_id
from pagewright.kernel.types import ROOT_ID, Library, Node, NodeKind, Style


class MalformedTree(ValueError):
    """The input cannot be read as a tree at all."""


def normalize_tree(raw: Any, *, id_factory: IdFactory = new_id) -> Node:
    if not isinstance(raw, Mapping):
        raise MalformedTree(f"expected an object at the tree root, got {type(raw).__name__}")
    seen: set[str] = {ROOT_ID}
    return _normalize(raw, None, seen, id_factory)


def _normalize(raw: Mapping[str, Any], parent_id: str | None, seen: set[str], id_factory: IdFactory) -> Node:
    if parent_id is None:
        node_id = ROOT_ID
    else:
        node_id = raw.get("id")
        if not isinstance(node_id, str) or not node_id or node_id in seen:
            node_id = id_factory()
            while node_id in seen:
                node_id = id_factory()
        seen.add(node_id)

    kind = raw.get("kind") or raw.get("type") or NodeKind.CONTAINER
    data = raw.get("data", raw.get("props"))
    style = raw.get("style")
    events = raw.get("events")
    on_click = raw.get("onClick")
    if on_click is None and isinstance(events, Mapping):
        on_click = events.get("onClick")

    raw_children = raw.get("children")
    if not isinstance(raw_children, list):
        raw_children = []

    return Node(
        id=node_id,
        kind=str(kind),
        name=str(raw.get("name") or ""),
        library=str(raw.get("library") or Library.RADIX),
        data=dict(data) if isinstance(data, Mapping) else {},
        style=Style.from_dict(style if isinstance(style, Mapping) else None),
        content=_text_or_none(raw.get("content")),
        icon=_text_or_none(raw.get("iconName") or raw.get("icon")),
        href=_text_or_none(raw.get("href")),
        on_click=_text_or_none(on_click),
        children=tuple(
            _normalize(child, node_id, seen, id_factory) for child in raw_children if isinstance(child, Mapping)
        ),
        parent_id=parent_id,
    )


def _text_or_none(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def tree_to_json(tree: Node, indent: int | None = 2) -> str:
    return json.dumps(tree.to_dict(), indent=indent, ensure_ascii=False)


def tree_from_json(text: str, *, id_factory: IdFactory = new_id) -> Node:
    """Parse and normalize. Invalid JSON raises MalformedTree."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedTree(f"invalid JSON: {e}") from e
    return normalize_tree(raw, id_factory=id_factory)
