"""Editor session request/response models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from pagewright.kernel import DragPayload, EditorSession

LibraryName = Literal["radix", "shadcn", "plain"]
Position = Literal["top", "bottom", "inside"]


class CreateSessionRequest(BaseModel):
    """What the client sends to open a session. Without a tree the session starts on a blank canvas."""

    model_config = {"extra": "forbid"}

    tree: dict[str, Any] | None = None


class InsertNodeRequest(BaseModel):
    """Palette item → new node under parent_id."""

    model_config = {"extra": "forbid"}

    kind: str = Field(min_length=1, max_length=64)
    parent_id: str = "root"
    index: int | None = Field(default=None, ge=0)
    library: LibraryName = "radix"


class NodeChangesRequest(BaseModel):
    """Partial node update (properties panel). Keys may be snake_case or camelCase."""

    model_config = {"extra": "forbid"}

    changes: dict[str, Any]


class StyleChangesRequest(BaseModel):
    """Partial style update. An empty string or null clears the field."""

    model_config = {"extra": "forbid"}

    changes: dict[str, Any]


class MoveRequest(BaseModel):
    model_config = {"extra": "forbid"}

    parent_id: str
    index: int | None = Field(default=None, ge=0)


class DuplicateRequest(BaseModel):
    model_config = {"extra": "forbid"}

    direction: Literal["before", "after"] = "after"


class WrapRequest(BaseModel):
    model_config = {"extra": "forbid"}

    wrapper_kind: Literal["container", "card"] = "container"


class DragPayloadModel(BaseModel):
    """A palette item (kind) or an existing node (node_id) being dragged."""

    model_config = {"extra": "forbid"}

    kind: str | None = Field(default=None, min_length=1, max_length=64)
    library: LibraryName = "radix"
    node_id: str | None = None

    @model_validator(mode="after")
    def _one_source(self) -> DragPayloadModel:
        if (self.kind is None) == (self.node_id is None):
            raise ValueError("exactly one of kind or node_id is required")
        return self

    def to_payload(self) -> DragPayload:
        return DragPayload(kind=self.kind, library=self.library, node_id=self.node_id)


class HoverRequest(BaseModel):
    model_config = {"extra": "forbid"}

    target_id: str
    pointer_y: float
    box_top: float
    box_height: float = Field(ge=0)
    payload: DragPayloadModel


class HoverResponse(BaseModel):
    position: Position | None


class DropRequest(BaseModel):
    model_config = {"extra": "forbid"}

    target_id: str
    position: Position
    payload: DragPayloadModel


class SelectionRequest(BaseModel):
    model_config = {"extra": "forbid"}

    node_id: str | None = None


class ApplyTreeRequest(BaseModel):
    """An externally generated tree; repaired before it replaces the canvas."""

    model_config = {"extra": "forbid"}

    tree: dict[str, Any]


class SessionResponse(BaseModel):
    """Session state returned by every session endpoint."""

    id: str
    tree: dict[str, Any]
    selected_id: str | None
    can_undo: bool
    can_redo: bool
    applied: bool = False
    node_id: str | None = None  # set when an insert created a node

    @classmethod
    def from_session(
        cls,
        session_id: str,
        session: EditorSession,
        applied: bool = False,
        node_id: str | None = None,
    ) -> SessionResponse:
        return cls(
            id=session_id,
            tree=session.tree.to_dict(),
            selected_id=session.selected_id,
            can_undo=session.can_undo,
            can_redo=session.can_redo,
            applied=applied,
            node_id=node_id,
        )


class ExportResponse(BaseModel):
    target: str
    filename: str
    source: str


class TargetResponse(BaseModel):
    name: str
    filename: str
    aliases: list[str]
