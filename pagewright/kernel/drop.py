"""
Pagewright Kernel — Drop Resolver

Turns a pointer position over a node into a drop position, and a drop
position plus payload into a single tree engine call.

    top     insert before the target, in the target's parent
    bottom  insert after the target, in the target's parent
    inside  append to the target's children

Nodes that accept children reserve a band of EDGE_THRESHOLD pixels at the
top and bottom edges for sibling drops; leaf nodes split at the midpoint.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from pagewright.kernel import tree as engine
from pagewright.kernel.factory import create_node
from pagewright.kernel.types import ROOT_ID, Library, Node, accepts_children

EDGE_THRESHOLD = 15.0

NodeFactory = Callable[[str, str | None, str], Node]


class DropPosition(StrEnum):
    TOP = "top"
    BOTTOM = "bottom"
    INSIDE = "inside"


@dataclass(frozen=True)
class Box:
    """Vertical extent of a rendered node, in the same space as the pointer."""

    top: float
    height: float


@dataclass(frozen=True)
class DragPayload:
    """
    What is being dragged. Either a palette item (kind set, node_id None)
    or an existing node (node_id set).
    """

    kind: str | None = None
    library: str = Library.RADIX
    node_id: str | None = None

    @property
    def is_existing(self) -> bool:
        return self.node_id is not None


def resolve_position(
    pointer_y: float,
    box: Box,
    accepts_children: bool,
    edge: float = EDGE_THRESHOLD,
) -> DropPosition:
    relative_y = pointer_y - box.top
    if accepts_children:
        if relative_y < edge:
            return DropPosition.TOP
        if relative_y > box.height - edge:
            return DropPosition.BOTTOM
        return DropPosition.INSIDE
    return DropPosition.TOP if relative_y < box.height / 2 else DropPosition.BOTTOM


def hover_position(
    tree: Node,
    target_id: str,
    pointer_y: float,
    box: Box,
    payload: DragPayload,
    edge: float = EDGE_THRESHOLD,
) -> DropPosition | None:
    """Highlight to show while dragging over target_id, or None for no highlight."""
    if payload.node_id == target_id:
        return None
    target = engine.find_node(tree, target_id)
    if target is None:
        return None
    return resolve_position(pointer_y, box, target.accepts_children, edge)


def apply_drop(
    tree: Node,
    target_id: str,
    position: str,
    payload: DragPayload,
    factory: NodeFactory = create_node,
) -> Node:
    """
    Perform the drop. Returns the input tree unchanged when the drop is a
    self-drop, targets an unknown node, or asks for a sibling of the root.
    """
    if payload.node_id == target_id:
        return tree
    target = engine.find_node(tree, target_id)
    if target is None:
        return tree

    position = DropPosition(position)
    if position is DropPosition.INSIDE and not accepts_children(target.kind):
        position = DropPosition.BOTTOM

    if position is DropPosition.INSIDE:
        parent_id = target.id
        index = None
    else:
        if target.id == ROOT_ID:
            return tree
        parent = engine.find_parent(tree, target.id)
        index = engine.index_of(tree, target.id)
        if parent is None or index is None:
            return tree
        parent_id = parent.id
        if position is DropPosition.BOTTOM:
            index += 1

    if payload.node_id is not None:
        return engine.move(tree, payload.node_id, parent_id, index)
    if not payload.kind:
        return tree
    node = factory(payload.kind, parent_id, payload.library)
    return engine.insert(tree, parent_id, node, index)
