"""Pydantic schemas for shelf configurations, layouts and event scripts.

An event script is a JSON document holding a shelf configuration, an
optional saved divider layout to restore, session settings, and the
sequence of events to replay. Event payloads use the same camelCase
field names the view layer sends (``positionY``, ``isOverPanel``, ...).
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from shelves.domain.interaction import DragReleasePolicy
from shelves.domain.value_objects import Orientation, Units

# Supported schema versions for event scripts
# Version 1.0: Shelf, layout and event replay
# Version 1.1: Session settings (drag threshold, release policy)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class ShelfConfigSchema(BaseModel):
    """Shelf enclosure dimensions.

    Attributes:
        width: Overall width.
        height: Overall height.
        depth: Overall depth.
        material_thickness: Panel thickness; must be below half of width and height.
        units: Unit system ("metric" or "imperial").
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    material_thickness: float = Field(..., gt=0, alias="materialThickness")
    units: Units = Units.IMPERIAL

    @model_validator(mode="after")
    def validate_thickness(self) -> "ShelfConfigSchema":
        if (
            self.material_thickness >= self.width / 2
            or self.material_thickness >= self.height / 2
        ):
            raise ValueError(
                "material_thickness must be less than half of width and height"
            )
        return self


class DividerSchema(BaseModel):
    """A committed divider.

    The orientation is accepted as ``orientation`` or, as the view layer
    sends it, ``type``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(..., min_length=1)
    position: float
    orientation: Orientation = Field(..., alias="type")


class LayoutSchema(BaseModel):
    """Saved divider layout to restore before replaying events."""

    model_config = ConfigDict(extra="forbid")

    dividers: list[DividerSchema] = Field(default_factory=list)

    @field_validator("dividers")
    @classmethod
    def validate_unique_ids(cls, v: list[DividerSchema]) -> list[DividerSchema]:
        seen: set[str] = set()
        for divider in v:
            if divider.id in seen:
                raise ValueError(f"Duplicate divider id: {divider.id}")
            seen.add(divider.id)
        return v


class SessionSettingsSchema(BaseModel):
    """Interaction machine settings."""

    model_config = ConfigDict(extra="forbid")

    drag_threshold_px: float = Field(default=5.0, ge=0)
    release_policy: DragReleasePolicy = DragReleasePolicy.DESELECT


# =============================================================================
# Events
# =============================================================================


class _EventModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class MouseMoveSchema(_EventModel):
    type: Literal["MOUSE_MOVE"]
    x: float
    y: float
    position_y: float = Field(..., alias="positionY")
    position_x: float = Field(..., alias="positionX")
    is_over_panel: bool = Field(default=False, alias="isOverPanel")


class ClickEmptySpaceSchema(_EventModel):
    type: Literal["CLICK_EMPTY_SPACE"]
    position_y: float = Field(..., alias="positionY")
    position_x: float = Field(..., alias="positionX")


class ClickDividerSchema(_EventModel):
    type: Literal["CLICK_DIVIDER"]
    divider: DividerSchema


class HoverDividerSchema(_EventModel):
    type: Literal["HOVER_DIVIDER"]
    divider: DividerSchema


class UnhoverSchema(_EventModel):
    type: Literal["UNHOVER"]


class MouseDownSchema(_EventModel):
    type: Literal["MOUSE_DOWN"]
    x: float
    y: float


class MouseUpSchema(_EventModel):
    type: Literal["MOUSE_UP"]


class ClickDeleteSchema(_EventModel):
    type: Literal["CLICK_DELETE"]


class ClickElsewhereSchema(_EventModel):
    type: Literal["CLICK_ELSEWHERE"]


class UpdateShelfConfigSchema(_EventModel):
    type: Literal["UPDATE_SHELF_CONFIG"]
    config: ShelfConfigSchema


class AddExistingDividerSchema(_EventModel):
    type: Literal["ADD_EXISTING_DIVIDER"]
    divider: DividerSchema


class ResetSchema(_EventModel):
    type: Literal["RESET"]


EventSchema = Annotated[
    Union[
        MouseMoveSchema,
        ClickEmptySpaceSchema,
        ClickDividerSchema,
        HoverDividerSchema,
        UnhoverSchema,
        MouseDownSchema,
        MouseUpSchema,
        ClickDeleteSchema,
        ClickElsewhereSchema,
        UpdateShelfConfigSchema,
        AddExistingDividerSchema,
        ResetSchema,
    ],
    Field(discriminator="type"),
]


class ScriptConfiguration(BaseModel):
    """Root model of an event script.

    Attributes:
        schema_version: Script format version.
        shelf: Shelf enclosure configuration.
        layout: Dividers to restore before replay.
        settings: Interaction machine settings.
        events: Events to replay, in order.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    shelf: ShelfConfigSchema
    layout: LayoutSchema = Field(default_factory=LayoutSchema)
    settings: SessionSettingsSchema = Field(default_factory=SessionSettingsSchema)
    events: list[EventSchema] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
