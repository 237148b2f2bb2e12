"""
Pagewright Kernel — Tree Edit Engine

Pure functions: (tree, ...) → tree
No side effects. No IO. Deterministic given the same id factory.

Every edit rebuilds only the path from the root to the edited node; sibling
subtrees are shared with the input by reference. When an edit cannot apply
(unknown id, root protection, cycle) the input tree object itself is
returned, so callers detect "no change" with `result is tree`.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Mapping
from dataclasses import replace
from typing import Any

from pagewright.kernel.factory import create_node
from pagewright.kernel.ids import IdFactory, new_id
from pagewright.kernel.types import (
    ROOT_ID,
    WRAPPER_KINDS,
    Node,
    NodeKind,
    coerce_style_changes,
)

# Keys update_node is allowed to merge onto a node
_MUTABLE_FIELDS = frozenset({"name", "kind", "library", "data", "content", "icon", "href", "on_click"})

_FIELD_ALIASES = {
    "type": "kind",
    "props": "data",
    "iconName": "icon",
    "onClick": "on_click",
}


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def iter_nodes(tree: Node) -> Iterator[Node]:
    """Depth-first, pre-order."""
    return tree.depth_first()


def node_ids(tree: Node) -> set[str]:
    return {n.id for n in tree.depth_first()}


def find_node(tree: Node, node_id: str) -> Node | None:
    for node in tree.depth_first():
        if node.id == node_id:
            return node
    return None


def find_parent(tree: Node, node_id: str) -> Node | None:
    for node in tree.depth_first():
        for child in node.children:
            if child.id == node_id:
                return node
    return None


def index_of(tree: Node, node_id: str) -> int | None:
    """Position of the node within its parent's children, or None."""
    parent = find_parent(tree, node_id)
    if parent is None:
        return None
    for i, child in enumerate(parent.children):
        if child.id == node_id:
            return i
    return None


def contains(subtree: Node, node_id: str) -> bool:
    """True if node_id is the subtree root or any of its descendants."""
    return any(n.id == node_id for n in subtree.depth_first())


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _map_node(node: Node, node_id: str, fn: Callable[[Node], Node]) -> Node:
    """
    Apply fn to the node with node_id, rebuilding only its ancestors.
    Returns the very same object when nothing changed.
    """
    if node.id == node_id:
        return fn(node)
    new_children = []
    changed = False
    for child in node.children:
        mapped = _map_node(child, node_id, fn)
        if mapped is not child:
            changed = True
        new_children.append(mapped)
    if not changed:
        return node
    return replace(node, children=tuple(new_children))


def _with_parent(node: Node, parent_id: str) -> Node:
    if node.parent_id == parent_id:
        return node
    return replace(node, parent_id=parent_id)


def _splice(parent: Node, child: Node, index: int | None) -> Node:
    children = list(parent.children)
    if index is None:
        index = len(children)
    index = max(0, min(index, len(children)))
    children.insert(index, _with_parent(child, parent.id))
    return replace(parent, children=tuple(children))


def _detach(tree: Node, node_id: str) -> Node:
    parent = find_parent(tree, node_id)
    if parent is None:
        return tree
    return _map_node(
        tree,
        parent.id,
        lambda p: replace(p, children=tuple(c for c in p.children if c.id != node_id)),
    )


def clone_subtree(node: Node, parent_id: str | None, id_factory: IdFactory = new_id) -> Node:
    """Deep copy with fresh ids for every node in the subtree."""
    fresh_id = id_factory()
    return replace(
        node,
        id=fresh_id,
        parent_id=parent_id,
        data=copy.deepcopy(node.data),
        children=tuple(clone_subtree(c, fresh_id, id_factory) for c in node.children),
    )


# ---------------------------------------------------------------------------
# Edits
# ---------------------------------------------------------------------------


def insert(tree: Node, parent_id: str, new_node: Node, index: int | None = None) -> Node:
    """
    Insert new_node (with its subtree) under parent_id. Appends by default;
    index is clamped to [0, len(children)].
    """
    if find_node(tree, parent_id) is None:
        return tree
    existing = node_ids(tree)
    incoming = [n.id for n in new_node.depth_first()]
    if len(set(incoming)) != len(incoming) or existing.intersection(incoming):
        return tree
    return _map_node(tree, parent_id, lambda p: _splice(p, new_node, index))


def move(tree: Node, node_id: str, new_parent_id: str, index: int | None = None) -> Node:
    """
    Detach node_id and reinsert it under new_parent_id.

    index is a position in the destination's children as seen before the move.
    Moving a node later within the same parent shifts that index down by one
    to account for the slot it vacates.
    """
    if node_id == ROOT_ID or node_id == new_parent_id:
        return tree
    node = find_node(tree, node_id)
    if node is None or find_node(tree, new_parent_id) is None:
        return tree
    if contains(node, new_parent_id):
        return tree

    old_parent = find_parent(tree, node_id)
    old_index = index_of(tree, node_id)
    if old_parent is not None and old_parent.id == new_parent_id and index is not None:
        assert old_index is not None
        if old_index < index:
            index -= 1
        index = max(0, min(index, len(old_parent.children) - 1))
        if index == old_index:
            return tree
    elif old_parent is not None and old_parent.id == new_parent_id and index is None:
        if old_index == len(old_parent.children) - 1:
            return tree

    detached = _detach(tree, node_id)
    return _map_node(detached, new_parent_id, lambda p: _splice(p, node, index))


def duplicate(
    tree: Node,
    node_id: str,
    direction: str = "after",
    *,
    id_factory: IdFactory = new_id,
) -> Node:
    """Insert a fresh-id deep copy of node_id next to it (before or after)."""
    if node_id == ROOT_ID:
        return tree
    parent = find_parent(tree, node_id)
    if parent is None:
        return tree
    original = find_node(tree, node_id)
    assert original is not None
    clone = clone_subtree(original, parent.id, id_factory)
    position = index_of(tree, node_id)
    assert position is not None
    if direction != "before":
        position += 1
    return _map_node(tree, parent.id, lambda p: _splice(p, clone, position))


def wrap(
    tree: Node,
    node_id: str,
    wrapper_kind: str = NodeKind.CONTAINER,
    *,
    id_factory: IdFactory = new_id,
) -> Node:
    """
    Replace node_id in its parent with a fresh wrapper whose only child is
    the node. Wrappers are full width, column flow, 10px padding.
    """
    if node_id == ROOT_ID or wrapper_kind not in WRAPPER_KINDS:
        return tree
    parent = find_parent(tree, node_id)
    if parent is None:
        return tree
    target = find_node(tree, node_id)
    assert target is not None

    wrapper = create_node(wrapper_kind, parent.id, target.library, id_factory=id_factory)
    wrapper = replace(
        wrapper,
        style=replace(wrapper.style, width="100%", flex_direction="column", padding="10px"),
        children=(_with_parent(target, wrapper.id),),
    )

    def swap(p: Node) -> Node:
        return replace(p, children=tuple(wrapper if c.id == node_id else c for c in p.children))

    return _map_node(tree, parent.id, swap)


def remove(tree: Node, node_id: str) -> Node:
    if node_id == ROOT_ID:
        return tree
    return _detach(tree, node_id)


def update_node(tree: Node, node_id: str, changes: Mapping[str, Any]) -> Node:
    """
    Shallow-merge non-structural fields onto a node. id, children, parent_id
    and style are ignored here; style goes through update_style.
    """
    updates: dict[str, Any] = {}
    for key, value in changes.items():
        name = _FIELD_ALIASES.get(key, key)
        if name not in _MUTABLE_FIELDS:
            continue
        if name == "data":
            # anything but a mapping (or None, which clears) is ignored
            if value is None:
                updates[name] = {}
            elif isinstance(value, Mapping):
                updates[name] = dict(value)
        elif name in ("name", "kind", "library"):
            if value is not None:
                updates[name] = str(value)
        else:
            updates[name] = None if value is None else str(value)
    if not updates:
        return tree

    def merge(node: Node) -> Node:
        if all(getattr(node, k) == v for k, v in updates.items()):
            return node
        return replace(node, **updates)

    return _map_node(tree, node_id, merge)


def update_style(tree: Node, node_id: str, changes: Mapping[str, Any]) -> Node:
    """Shallow-merge style fields. Empty string or None clears a field."""
    coerced = coerce_style_changes(changes)
    if not coerced:
        return tree

    def merge(node: Node) -> Node:
        if all(getattr(node.style, k) == v for k, v in coerced.items()):
            return node
        return replace(node, style=replace(node.style, **coerced))

    return _map_node(tree, node_id, merge)
