"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from shelves.application.config.schemas import (
    EventSchema,
    LayoutSchema,
    SessionSettingsSchema,
    ShelfConfigSchema,
)


class CreateSessionRequest(BaseModel):
    """Request for opening an editing session."""

    shelf: ShelfConfigSchema = Field(..., description="Shelf enclosure configuration")
    layout: LayoutSchema = Field(
        default_factory=LayoutSchema, description="Saved dividers to restore"
    )
    settings: SessionSettingsSchema = Field(
        default_factory=SessionSettingsSchema, description="Interaction settings"
    )


class EventBatchRequest(BaseModel):
    """Events to process in order."""

    events: list[EventSchema] = Field(..., min_length=1, description="Events to send")
