"""Side effects requested by transitions and carried out by the host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..value_objects import Divider


@dataclass(frozen=True)
class DisableCameraControls:
    """A drag started; viewport control must stop reacting to the pointer."""


@dataclass(frozen=True)
class EnableCameraControls:
    """A drag ended; viewport control may resume."""


@dataclass(frozen=True)
class DividerCommitted:
    """A divider was added, either from a ghost or restored from a layout."""

    divider: Divider
    restored: bool = False


@dataclass(frozen=True)
class DividerMoved:
    """A drag was released with the divider at a new position."""

    divider: Divider
    previous_position: float


@dataclass(frozen=True)
class DividerDeleted:
    divider: Divider


@dataclass(frozen=True)
class DividersCleared:
    """A reset removed every divider."""

    dividers: tuple[Divider, ...]


Effect = Union[
    DisableCameraControls,
    EnableCameraControls,
    DividerCommitted,
    DividerMoved,
    DividerDeleted,
    DividersCleared,
]
