"""Divider interaction state machine: states, events, effects and the reducer."""

from __future__ import annotations

from .context import InteractionContext, InteractionState, MachineSnapshot
from .effects import (
    DisableCameraControls,
    DividerCommitted,
    DividerDeleted,
    DividerMoved,
    DividersCleared,
    Effect,
    EnableCameraControls,
)
from .events import (
    AddExistingDivider,
    ClickDelete,
    ClickDivider,
    ClickElsewhere,
    ClickEmptySpace,
    DividerEvent,
    HoverDivider,
    MouseDown,
    MouseMove,
    MouseUp,
    Reset,
    Unhover,
    UpdateShelfConfig,
)
from .machine import (
    DEFAULT_DRAG_THRESHOLD_PX,
    DragReleasePolicy,
    MachineSettings,
    TransitionResult,
    transition,
)

__all__ = [
    # State
    "InteractionContext",
    "InteractionState",
    "MachineSnapshot",
    # Events
    "AddExistingDivider",
    "ClickDelete",
    "ClickDivider",
    "ClickElsewhere",
    "ClickEmptySpace",
    "DividerEvent",
    "HoverDivider",
    "MouseDown",
    "MouseMove",
    "MouseUp",
    "Reset",
    "Unhover",
    "UpdateShelfConfig",
    # Effects
    "DisableCameraControls",
    "DividerCommitted",
    "DividerDeleted",
    "DividerMoved",
    "DividersCleared",
    "Effect",
    "EnableCameraControls",
    # Reducer
    "DEFAULT_DRAG_THRESHOLD_PX",
    "DragReleasePolicy",
    "MachineSettings",
    "TransitionResult",
    "transition",
]
