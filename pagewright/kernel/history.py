"""
Pagewright Kernel — History

Linear undo/redo over whole-tree snapshots. Snapshots share unchanged
subtrees, so keeping every version is cheap.

    snapshots = [t0, t1, t2, t3]
                          ^ cursor

record() drops everything after the cursor, then appends.
"""

from __future__ import annotations

from pagewright.kernel.types import Node


class History:
    def __init__(self, initial: Node, limit: int | None = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError("history limit must be at least 1")
        self._snapshots: list[Node] = [initial]
        self._cursor = 0
        self._limit = limit

    @property
    def current(self) -> Node:
        return self._snapshots[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def __len__(self) -> int:
        return len(self._snapshots)

    def record(self, tree: Node) -> None:
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(tree)
        if self._limit is not None and len(self._snapshots) > self._limit:
            del self._snapshots[: len(self._snapshots) - self._limit]
        self._cursor = len(self._snapshots) - 1

    def undo(self) -> Node:
        if self.can_undo:
            self._cursor -= 1
        return self.current

    def redo(self) -> Node:
        if self.can_redo:
            self._cursor += 1
        return self.current
