"""Editor session routes — open, edit, drag-and-drop, history, export."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from backend.config import settings
from backend.models.session import (
    ApplyTreeRequest,
    CreateSessionRequest,
    DropRequest,
    DuplicateRequest,
    ExportResponse,
    HoverRequest,
    HoverResponse,
    InsertNodeRequest,
    MoveRequest,
    NodeChangesRequest,
    SelectionRequest,
    SessionResponse,
    StyleChangesRequest,
    WrapRequest,
)
from backend.services.session_store import SessionNotFound, session_store
from pagewright.codegen import GenerateOptions, UnknownTarget, generate
from pagewright.kernel import Box, EditorSession, MalformedTree, hover_position, normalize_tree

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _session(session_id: str) -> EditorSession:
    try:
        return session_store.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found.") from None


def _respond(session_id: str, session: EditorSession, applied: bool, node_id: str | None = None) -> SessionResponse:
    return SessionResponse.from_session(session_id, session, applied=applied, node_id=node_id)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


@router.post("", status_code=201)
async def create_session(req: CreateSessionRequest | None = None) -> SessionResponse:
    """Open a session on a blank canvas, or on a (repaired) tree supplied by the client."""
    tree = None
    if req is not None and req.tree is not None:
        try:
            tree = normalize_tree(req.tree)
        except MalformedTree as e:
            raise HTTPException(status_code=422, detail=str(e)) from None
    session_id, session = session_store.create(tree)
    return _respond(session_id, session, applied=False)


@router.get("/{session_id}", status_code=200)
async def get_session(session_id: str) -> SessionResponse:
    return _respond(session_id, _session(session_id), applied=False)


@router.delete("/{session_id}", status_code=200)
async def delete_session(session_id: str) -> dict[str, str]:
    try:
        session_store.delete(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found.") from None
    return {"message": "Session closed."}


# ---------------------------------------------------------------------------
# Node edits
# ---------------------------------------------------------------------------


@router.post("/{session_id}/nodes", status_code=200)
async def insert_node(session_id: str, req: InsertNodeRequest) -> SessionResponse:
    """Create a node from the palette and insert it. `applied` is false when the parent does not exist."""
    session = _session(session_id)
    node_id = session.insert_node(req.kind, req.parent_id, req.index, req.library)
    return _respond(session_id, session, applied=node_id is not None, node_id=node_id)


@router.patch("/{session_id}/nodes/{node_id}", status_code=200)
async def update_node(session_id: str, node_id: str, req: NodeChangesRequest) -> SessionResponse:
    session = _session(session_id)
    return _respond(session_id, session, applied=session.update_node(node_id, req.changes))


@router.patch("/{session_id}/nodes/{node_id}/style", status_code=200)
async def update_style(session_id: str, node_id: str, req: StyleChangesRequest) -> SessionResponse:
    session = _session(session_id)
    return _respond(session_id, session, applied=session.update_style(node_id, req.changes))


@router.delete("/{session_id}/nodes/{node_id}", status_code=200)
async def remove_node(session_id: str, node_id: str) -> SessionResponse:
    session = _session(session_id)
    return _respond(session_id, session, applied=session.remove(node_id))


@router.post("/{session_id}/nodes/{node_id}/move", status_code=200)
async def move_node(session_id: str, node_id: str, req: MoveRequest) -> SessionResponse:
    session = _session(session_id)
    return _respond(session_id, session, applied=session.move(node_id, req.parent_id, req.index))


@router.post("/{session_id}/nodes/{node_id}/duplicate", status_code=200)
async def duplicate_node(session_id: str, node_id: str, req: DuplicateRequest | None = None) -> SessionResponse:
    session = _session(session_id)
    direction = req.direction if req is not None else "after"
    return _respond(session_id, session, applied=session.duplicate(node_id, direction))


@router.post("/{session_id}/nodes/{node_id}/wrap", status_code=200)
async def wrap_node(session_id: str, node_id: str, req: WrapRequest | None = None) -> SessionResponse:
    session = _session(session_id)
    wrapper_kind = req.wrapper_kind if req is not None else "container"
    return _respond(session_id, session, applied=session.wrap(node_id, wrapper_kind))


# ---------------------------------------------------------------------------
# Drag and drop
# ---------------------------------------------------------------------------


@router.post("/{session_id}/drop/hover", status_code=200)
async def drop_hover(session_id: str, req: HoverRequest) -> HoverResponse:
    """Highlight for the current pointer position. Never changes the tree."""
    session = _session(session_id)
    position = hover_position(
        session.tree,
        req.target_id,
        req.pointer_y,
        Box(top=req.box_top, height=req.box_height),
        req.payload.to_payload(),
        edge=settings.DROP_EDGE,
    )
    return HoverResponse(position=position.value if position is not None else None)


@router.post("/{session_id}/drop", status_code=200)
async def drop(session_id: str, req: DropRequest) -> SessionResponse:
    session = _session(session_id)
    applied = session.drop(req.target_id, req.position, req.payload.to_payload())
    return _respond(session_id, session, applied=applied)


# ---------------------------------------------------------------------------
# History and selection
# ---------------------------------------------------------------------------


@router.post("/{session_id}/undo", status_code=200)
async def undo(session_id: str) -> SessionResponse:
    session = _session(session_id)
    return _respond(session_id, session, applied=session.undo())


@router.post("/{session_id}/redo", status_code=200)
async def redo(session_id: str) -> SessionResponse:
    session = _session(session_id)
    return _respond(session_id, session, applied=session.redo())


@router.put("/{session_id}/selection", status_code=200)
async def select(session_id: str, req: SelectionRequest) -> SessionResponse:
    """Select a node, or clear the selection with null. Unknown ids leave the selection unchanged."""
    session = _session(session_id)
    return _respond(session_id, session, applied=session.select(req.node_id))


# ---------------------------------------------------------------------------
# Generated trees and export
# ---------------------------------------------------------------------------


@router.put("/{session_id}/tree", status_code=200)
async def apply_tree(session_id: str, req: ApplyTreeRequest) -> SessionResponse:
    """Replace the canvas with a generated tree. The tree is repaired first and recorded as one step."""
    session = _session(session_id)
    try:
        applied = session.apply_generated_tree(req.tree)
    except MalformedTree as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    logger.info("sessions: applied generated tree to %s (changed=%s)", session_id, applied)
    return _respond(session_id, session, applied=applied)


@router.get("/{session_id}/export", status_code=200)
async def export(
    session_id: str,
    target: str | None = Query(default=None),
    component_name: str = Query(default="Page"),
    widget_name: str = Query(default="MyPage"),
    app_title: str = Query(default="Generated App"),
) -> ExportResponse:
    """Generate source for the session's current tree."""
    session = _session(session_id)
    try:
        options = GenerateOptions(component_name=component_name, widget_name=widget_name, app_title=app_title)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    try:
        result = generate(target or settings.DEFAULT_TARGET, session.tree, options)
    except UnknownTarget as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    return ExportResponse(**result.to_dict())
