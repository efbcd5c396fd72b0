"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class DividerOutSchema(BaseModel):
    """Committed divider."""

    id: str = Field(..., description="Divider id")
    position: float = Field(..., description="Offset along the divider's axis")
    orientation: str = Field(..., description="horizontal or vertical")


class GhostOutSchema(BaseModel):
    """Placement preview."""

    position: float
    orientation: str
    addable: bool
    visible: bool


class SnapshotSchema(BaseModel):
    """Read-only interaction snapshot."""

    state: str = Field(..., description="Current interaction state")
    horizontal_dividers: list[DividerOutSchema] = Field(default_factory=list)
    vertical_dividers: list[DividerOutSchema] = Field(default_factory=list)
    selected_divider: DividerOutSchema | None = None
    hovered_divider: DividerOutSchema | None = None
    ghost_divider: GhostOutSchema | None = None
    dragging: bool = False


class SessionSchema(BaseModel):
    """Session id with its latest snapshot."""

    session_id: str = Field(..., description="Session identifier")
    snapshot: SnapshotSchema
    effects: list[str] = Field(
        default_factory=list, description="Host effects requested by the last events"
    )


class DistanceSchema(BaseModel):
    """Clear space from a divider in one direction."""

    direction: str
    distance: float
    target_kind: str
    target_label: str


class DistancesSchema(BaseModel):
    """Both distance annotations for a divider."""

    divider_id: str
    distances: list[DistanceSchema]


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict] | None = Field(default=None, description="Additional details")
