"""
Pagewright Kernel — Shared Types

Data classes used across the tree engine, drop resolver, history and the
code generators. These are the contracts that bind the kernel together.

Both records are frozen. Every edit produces new values; untouched subtrees
are shared between snapshots by reference.

External JSON uses camelCase keys (backgroundColor, parentId, iconName);
from_dict accepts either spelling.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import Any

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ROOT_ID = "root"


class NodeKind(StrEnum):
    CONTAINER = "container"
    TEXT = "text"
    BUTTON = "button"
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    SWITCH = "switch"
    IMAGE = "image"
    ICON = "icon"
    DIVIDER = "divider"
    CARD = "card"
    TABLE = "table"
    FORM = "form"
    LIST = "list"
    TABS = "tabs"
    ACCORDION = "accordion"
    DROPDOWN = "dropdown"
    AVATAR_GROUP = "avatarGroup"
    INTERACTION = "interaction"


class Library(StrEnum):
    RADIX = "radix"
    SHADCN = "shadcn"
    PLAIN = "plain"


NODE_KINDS: frozenset[str] = frozenset(k.value for k in NodeKind)

# Kinds that never receive children through drop operations
LEAF_KINDS: frozenset[str] = frozenset(
    {
        NodeKind.TEXT,
        NodeKind.IMAGE,
        NodeKind.INPUT,
        NodeKind.ICON,
        NodeKind.SWITCH,
        NodeKind.CHECKBOX,
        NodeKind.DIVIDER,
        NodeKind.TEXTAREA,
        NodeKind.SELECT,
    }
)

WRAPPER_KINDS: frozenset[str] = frozenset({NodeKind.CONTAINER, NodeKind.CARD})


def accepts_children(kind: str) -> bool:
    """Leaf-only kinds reject drops inside them; everything else accepts."""
    return kind not in LEAF_KINDS


# ---------------------------------------------------------------------------
# Key spelling helpers
# ---------------------------------------------------------------------------

_CAMEL_BOUNDARY = re.compile(r"_([a-z])")
_SNAKE_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)


def to_snake(name: str) -> str:
    return _SNAKE_BOUNDARY.sub("_", name).lower()


# ---------------------------------------------------------------------------
# Style descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Style:
    """
    Presentation properties attached to every node.

    Every field is independently optional. None means "inherit the visual
    default", never zero.
    """

    # Colors
    background_color: str | None = None
    color: str | None = None

    # Box model
    padding: str | None = None
    padding_top: str | None = None
    padding_right: str | None = None
    padding_bottom: str | None = None
    padding_left: str | None = None
    margin: str | None = None
    margin_top: str | None = None
    margin_right: str | None = None
    margin_bottom: str | None = None
    margin_left: str | None = None

    # Sizing
    width: str | None = None
    height: str | None = None
    min_width: str | None = None
    max_width: str | None = None
    min_height: str | None = None

    # Borders
    border_width: str | None = None
    border_color: str | None = None
    border_style: str | None = None
    border_radius: str | None = None
    border_top: str | None = None
    border_right: str | None = None
    border_bottom: str | None = None
    border_left: str | None = None

    # Flex layout
    flex_direction: str | None = None
    justify_content: str | None = None
    align_items: str | None = None
    gap: str | None = None
    flex_grow: float | None = None

    # Effects and typography
    box_shadow: bool | None = None
    font_size: str | None = None
    font_weight: str | None = None
    text_align: str | None = None
    cursor: str | None = None

    # Positioning
    position: str | None = None
    top: str | None = None
    left: str | None = None
    right: str | None = None
    bottom: str | None = None
    z_index: str | None = None
    overflow: str | None = None

    def populated(self) -> Iterator[tuple[str, Any]]:
        """Yield (field_name, value) for every field that is set, in declaration order."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                yield f.name, value

    def to_dict(self) -> dict[str, Any]:
        return {to_camel(name): value for name, value in self.populated()}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> Style:
        return cls(**coerce_style_changes(d or {}))


STYLE_FIELDS: frozenset[str] = frozenset(f.name for f in fields(Style))


def coerce_style_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """
    Normalize a partial style mapping to Style field names and value types.

    Accepts snake_case or camelCase keys. Unknown keys are dropped.
    Empty strings become None (field cleared). Numbers for string fields are
    kept verbatim as their string form.
    """
    result: dict[str, Any] = {}
    for key, value in changes.items():
        name = key if key in STYLE_FIELDS else to_snake(key)
        if name not in STYLE_FIELDS:
            continue
        if value is None or value == "":
            result[name] = None
        elif name == "box_shadow":
            result[name] = bool(value)
        elif name == "flex_grow":
            try:
                result[name] = float(value) if not isinstance(value, bool) else None
            except (TypeError, ValueError):
                result[name] = None
        elif isinstance(value, bool):
            result[name] = str(value).lower()
        else:
            result[name] = str(value)
    return result


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Node:
    """
    One element of the design tree.

    `kind` is kept as a plain string so that trees coming from outside may
    carry kinds the generators do not know; those surface as placeholders at
    export time instead of being rejected on the way in.
    """

    id: str
    kind: str
    name: str = ""
    library: str = Library.RADIX
    data: dict[str, Any] = field(default_factory=dict)
    style: Style = field(default_factory=Style)
    content: str | None = None
    icon: str | None = None
    href: str | None = None
    on_click: str | None = None
    children: tuple[Node, ...] = ()
    parent_id: str | None = None

    @property
    def accepts_children(self) -> bool:
        return accepts_children(self.kind)

    def depth_first(self) -> Iterator[Node]:
        """Traverse the subtree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "kind": self.kind,
            "name": self.name,
            "library": self.library,
            "data": self.data,
            "style": self.style.to_dict(),
            "children": [c.to_dict() for c in self.children],
            "parentId": self.parent_id,
        }
        if self.content is not None:
            d["content"] = self.content
        if self.icon is not None:
            d["iconName"] = self.icon
        if self.href is not None:
            d["href"] = self.href
        if self.on_click is not None:
            d["onClick"] = self.on_click
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any], parent_id: str | None = None) -> Node:
        """
        Build a node tree from JSON. Expects well-formed input (ids and kinds
        present); see kernel.normalize for repairing untrusted trees.
        Parent pointers are derived from containment, not read from input.
        """
        node_id = str(d["id"])
        events = d.get("events") or {}
        return cls(
            id=node_id,
            kind=str(d.get("kind") or d.get("type") or ""),
            name=str(d.get("name") or ""),
            library=str(d.get("library") or Library.RADIX),
            data=dict(d.get("data") or d.get("props") or {}),
            style=Style.from_dict(d.get("style")),
            content=_optional_str(d.get("content")),
            icon=_optional_str(d.get("iconName") or d.get("icon")),
            href=_optional_str(d.get("href")),
            on_click=_optional_str(d.get("onClick") or events.get("onClick")),
            children=tuple(cls.from_dict(c, node_id) for c in d.get("children") or []),
            parent_id=parent_id,
        )


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


# ---------------------------------------------------------------------------
# Initial canvas
# ---------------------------------------------------------------------------


def initial_canvas() -> Node:
    """The empty page every session starts from."""
    return Node(
        id=ROOT_ID,
        kind=NodeKind.CONTAINER,
        name="Root Page",
        library=Library.RADIX,
        style=Style(
            width="100%",
            height="100%",
            padding="20px",
            background_color="#ffffff",
            flex_direction="column",
            align_items="flex-start",
            gap="20px",
            justify_content="flex-start",
            overflow="hidden",
            position="relative",
        ),
    )
