"""Conversion from validated schemas to domain objects."""

from __future__ import annotations

from shelves.application.config.schemas import (
    AddExistingDividerSchema,
    ClickDeleteSchema,
    ClickDividerSchema,
    ClickElsewhereSchema,
    ClickEmptySpaceSchema,
    DividerSchema,
    EventSchema,
    HoverDividerSchema,
    MouseDownSchema,
    MouseMoveSchema,
    MouseUpSchema,
    ResetSchema,
    ScriptConfiguration,
    SessionSettingsSchema,
    ShelfConfigSchema,
    UnhoverSchema,
    UpdateShelfConfigSchema,
)
from shelves.domain.interaction import (
    AddExistingDivider,
    ClickDelete,
    ClickDivider,
    ClickElsewhere,
    ClickEmptySpace,
    DividerEvent,
    HoverDivider,
    MachineSettings,
    MouseDown,
    MouseMove,
    MouseUp,
    Reset,
    Unhover,
    UpdateShelfConfig,
)
from shelves.domain.value_objects import Divider, ShelfConfig


def config_to_shelf(schema: ShelfConfigSchema) -> ShelfConfig:
    return ShelfConfig(
        width=schema.width,
        height=schema.height,
        depth=schema.depth,
        material_thickness=schema.material_thickness,
        units=schema.units,
    )


def config_to_divider(schema: DividerSchema) -> Divider:
    return Divider(id=schema.id, position=schema.position, orientation=schema.orientation)


def config_to_dividers(config: ScriptConfiguration) -> list[Divider]:
    """Saved layout of a script, in file order."""
    return [config_to_divider(d) for d in config.layout.dividers]


def config_to_settings(schema: SessionSettingsSchema) -> MachineSettings:
    return MachineSettings(
        drag_threshold_px=schema.drag_threshold_px,
        release_policy=schema.release_policy,
    )


def config_to_event(schema: EventSchema) -> DividerEvent:
    """Convert one validated event payload to a machine event."""
    match schema:
        case MouseMoveSchema():
            return MouseMove(
                x=schema.x,
                y=schema.y,
                position_y=schema.position_y,
                position_x=schema.position_x,
                is_over_panel=schema.is_over_panel,
            )
        case ClickEmptySpaceSchema():
            return ClickEmptySpace(
                position_y=schema.position_y, position_x=schema.position_x
            )
        case ClickDividerSchema():
            return ClickDivider(divider=config_to_divider(schema.divider))
        case HoverDividerSchema():
            return HoverDivider(divider=config_to_divider(schema.divider))
        case UnhoverSchema():
            return Unhover()
        case MouseDownSchema():
            return MouseDown(x=schema.x, y=schema.y)
        case MouseUpSchema():
            return MouseUp()
        case ClickDeleteSchema():
            return ClickDelete()
        case ClickElsewhereSchema():
            return ClickElsewhere()
        case UpdateShelfConfigSchema():
            return UpdateShelfConfig(config=config_to_shelf(schema.config))
        case AddExistingDividerSchema():
            return AddExistingDivider(divider=config_to_divider(schema.divider))
        case ResetSchema():
            return Reset()
    raise ValueError(f"Unsupported event schema: {type(schema).__name__}")


def config_to_events(config: ScriptConfiguration) -> list[DividerEvent]:
    return [config_to_event(event) for event in config.events]
