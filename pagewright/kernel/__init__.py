"""
Pagewright Kernel — the pure document engine.

Components:
  tree       — (tree, ...) → tree  structural edits (pure, copy-on-write)
  drop       — pointer position → drop position → engine call
  history    — linear undo/redo over snapshots
  session    — EditorSession, the only place edits are recorded
  normalize  — repair of externally produced trees
"""

from pagewright.kernel.drop import Box, DragPayload, DropPosition, apply_drop, hover_position, resolve_position
from pagewright.kernel.factory import create_node
from pagewright.kernel.history import History
from pagewright.kernel.normalize import MalformedTree, normalize_tree, tree_from_json, tree_to_json
from pagewright.kernel.session import EditorSession
from pagewright.kernel.tree import (
    contains,
    duplicate,
    find_node,
    find_parent,
    index_of,
    insert,
    iter_nodes,
    move,
    node_ids,
    remove,
    update_node,
    update_style,
    wrap,
)
from pagewright.kernel.types import ROOT_ID, Library, Node, NodeKind, Style, initial_canvas

__all__ = [
    "ROOT_ID",
    "Node",
    "NodeKind",
    "Library",
    "Style",
    "initial_canvas",
    "create_node",
    "insert",
    "move",
    "duplicate",
    "wrap",
    "remove",
    "update_node",
    "update_style",
    "find_node",
    "find_parent",
    "index_of",
    "contains",
    "iter_nodes",
    "node_ids",
    "Box",
    "DragPayload",
    "DropPosition",
    "resolve_position",
    "hover_position",
    "apply_drop",
    "History",
    "EditorSession",
    "MalformedTree",
    "normalize_tree",
    "tree_to_json",
    "tree_from_json",
]
