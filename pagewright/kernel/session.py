"""
Pagewright Kernel — Editor Session

The one mutable object in the kernel. Holds the undo history and the
current selection, and is the only place edits get recorded.

Each method runs one engine call. If the returned tree is a different
object the result is recorded and the method returns True; otherwise
nothing is recorded and it returns False.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pagewright.kernel import tree as engine
from pagewright.kernel.drop import DragPayload, apply_drop
from pagewright.kernel.factory import create_node
from pagewright.kernel.history import History
from pagewright.kernel.ids import IdFactory, new_id
from pagewright.kernel.normalize import normalize_tree
from pagewright.kernel.types import Library, Node, NodeKind, initial_canvas


class EditorSession:
    def __init__(
        self,
        tree: Node | None = None,
        *,
        history_limit: int | None = None,
        id_factory: IdFactory = new_id,
    ) -> None:
        self.history = History(tree if tree is not None else initial_canvas(), limit=history_limit)
        self.selected_id: str | None = None
        self._id_factory = id_factory

    @property
    def tree(self) -> Node:
        return self.history.current

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # -- recording -----------------------------------------------------------

    def _commit(self, result: Node) -> bool:
        if result is self.tree:
            return False
        self.history.record(result)
        self._drop_stale_selection()
        return True

    def _drop_stale_selection(self) -> None:
        if self.selected_id is not None and engine.find_node(self.tree, self.selected_id) is None:
            self.selected_id = None

    def _apply(self, fn: Callable[[Node], Node]) -> bool:
        return self._commit(fn(self.tree))

    # -- selection -----------------------------------------------------------

    def select(self, node_id: str | None) -> bool:
        """Select a node (or clear with None). Unknown ids are ignored."""
        if node_id is not None and engine.find_node(self.tree, node_id) is None:
            return False
        self.selected_id = node_id
        return True

    # -- edits ---------------------------------------------------------------

    def insert_node(
        self,
        kind: str,
        parent_id: str,
        index: int | None = None,
        library: str = Library.RADIX,
    ) -> str | None:
        """Create a node of kind and insert it. Returns the new id, or None if nothing changed."""
        node = create_node(kind, parent_id, library, id_factory=self._id_factory)
        if self._apply(lambda t: engine.insert(t, parent_id, node, index)):
            return node.id
        return None

    def move(self, node_id: str, new_parent_id: str, index: int | None = None) -> bool:
        return self._apply(lambda t: engine.move(t, node_id, new_parent_id, index))

    def duplicate(self, node_id: str, direction: str = "after") -> bool:
        return self._apply(lambda t: engine.duplicate(t, node_id, direction, id_factory=self._id_factory))

    def wrap(self, node_id: str, wrapper_kind: str = NodeKind.CONTAINER) -> bool:
        return self._apply(lambda t: engine.wrap(t, node_id, wrapper_kind, id_factory=self._id_factory))

    def remove(self, node_id: str) -> bool:
        return self._apply(lambda t: engine.remove(t, node_id))

    def update_node(self, node_id: str, changes: Mapping[str, Any]) -> bool:
        return self._apply(lambda t: engine.update_node(t, node_id, changes))

    def update_style(self, node_id: str, changes: Mapping[str, Any]) -> bool:
        return self._apply(lambda t: engine.update_style(t, node_id, changes))

    def drop(self, target_id: str, position: str, payload: DragPayload) -> bool:
        def factory(kind: str, parent_id: str | None, library: str) -> Node:
            return create_node(kind, parent_id, library, id_factory=self._id_factory)

        return self._apply(lambda t: apply_drop(t, target_id, position, payload, factory))

    def apply_generated_tree(self, raw: Any) -> bool:
        """Replace the canvas with an externally produced tree, after normalization."""
        tree = normalize_tree(raw, id_factory=self._id_factory)
        # normalization always builds new objects; compare by value
        if tree == self.tree:
            return False
        return self._commit(tree)

    # -- history -------------------------------------------------------------

    def undo(self) -> bool:
        if not self.history.can_undo:
            return False
        self.history.undo()
        self._drop_stale_selection()
        return True

    def redo(self) -> bool:
        if not self.history.can_redo:
            return False
        self.history.redo()
        self._drop_stale_selection()
        return True
