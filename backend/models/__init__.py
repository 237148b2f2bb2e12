"""
Pydantic models for Pagewright.

All HTTP data shapes defined here. No imports from services or routes.
"""

from backend.models.session import (
    ApplyTreeRequest,
    CreateSessionRequest,
    DragPayloadModel,
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
    TargetResponse,
    WrapRequest,
)

__all__ = [
    # Session requests
    "CreateSessionRequest",
    "InsertNodeRequest",
    "NodeChangesRequest",
    "StyleChangesRequest",
    "MoveRequest",
    "DuplicateRequest",
    "WrapRequest",
    "DragPayloadModel",
    "HoverRequest",
    "DropRequest",
    "SelectionRequest",
    "ApplyTreeRequest",
    # Responses
    "SessionResponse",
    "HoverResponse",
    "ExportResponse",
    "TargetResponse",
]
