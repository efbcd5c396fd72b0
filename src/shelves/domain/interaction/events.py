"""Inbound events consumed by the divider interaction machine.

Positions are already translated into shelf-interior coordinates by the
view layer; ``x``/``y`` fields are screen pixels and only feed drag
threshold detection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from ..value_objects import Divider, ShelfConfig


@dataclass(frozen=True)
class MouseMove:
    type: ClassVar[str] = "MOUSE_MOVE"

    x: float
    y: float
    position_y: float
    position_x: float
    is_over_panel: bool = False


@dataclass(frozen=True)
class ClickEmptySpace:
    type: ClassVar[str] = "CLICK_EMPTY_SPACE"

    position_y: float
    position_x: float


@dataclass(frozen=True)
class ClickDivider:
    type: ClassVar[str] = "CLICK_DIVIDER"

    divider: Divider


@dataclass(frozen=True)
class HoverDivider:
    type: ClassVar[str] = "HOVER_DIVIDER"

    divider: Divider


@dataclass(frozen=True)
class Unhover:
    type: ClassVar[str] = "UNHOVER"


@dataclass(frozen=True)
class MouseDown:
    type: ClassVar[str] = "MOUSE_DOWN"

    x: float
    y: float


@dataclass(frozen=True)
class MouseUp:
    type: ClassVar[str] = "MOUSE_UP"


@dataclass(frozen=True)
class ClickDelete:
    type: ClassVar[str] = "CLICK_DELETE"


@dataclass(frozen=True)
class ClickElsewhere:
    type: ClassVar[str] = "CLICK_ELSEWHERE"


@dataclass(frozen=True)
class UpdateShelfConfig:
    type: ClassVar[str] = "UPDATE_SHELF_CONFIG"

    config: ShelfConfig


@dataclass(frozen=True)
class AddExistingDivider:
    """Restore a divider from a saved layout, keeping its id and position."""

    type: ClassVar[str] = "ADD_EXISTING_DIVIDER"

    divider: Divider


@dataclass(frozen=True)
class Reset:
    type: ClassVar[str] = "RESET"


DividerEvent = Union[
    MouseMove,
    ClickEmptySpace,
    ClickDivider,
    HoverDivider,
    Unhover,
    MouseDown,
    MouseUp,
    ClickDelete,
    ClickElsewhere,
    UpdateShelfConfig,
    AddExistingDivider,
    Reset,
]
