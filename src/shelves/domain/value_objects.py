"""Value objects for the shelf divider domain.

Positions are expressed in shelf-interior coordinates:

- Horizontal dividers are positioned by their vertical offset from the
  interior floor, in ``[0, interior_height]``.
- Vertical dividers are positioned by their horizontal offset from the
  interior centerline, in ``[-interior_width / 2, interior_width / 2]``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum


class Units(str, Enum):
    """Unit system the shelf is designed in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Orientation(str, Enum):
    """Axis a divider partitions.

    Horizontal dividers partition the shelf by height; vertical dividers
    partition a compartment by width.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def other(self) -> "Orientation":
        """The perpendicular orientation."""
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


@dataclass(frozen=True)
class UnitTolerances:
    """Unit-dependent spacing rules for divider placement.

    Attributes:
        min_gap: Minimum distance between two same-orientation dividers.
        snap_increment: Increment divider positions are snapped to.
        min_section_size: Half the span a section needs before it can be split.
        near_distance: Pointer distance at which a divider counts as hovered.
    """

    min_gap: float
    snap_increment: float
    min_section_size: float
    near_distance: float

    @classmethod
    def for_units(cls, units: Units) -> "UnitTolerances":
        """Tolerances for the given unit system."""
        if units is Units.METRIC:
            return cls(
                min_gap=2.0, snap_increment=0.5, min_section_size=8.0, near_distance=3.0
            )
        return cls(
            min_gap=0.75, snap_increment=0.25, min_section_size=3.0, near_distance=1.5
        )


@dataclass(frozen=True)
class ShelfConfig:
    """Outer dimensions and material of the shelf enclosure.

    Supplied by the host and replaced wholesale whenever it changes.
    """

    width: float
    height: float
    depth: float
    material_thickness: float
    units: Units = Units.IMPERIAL

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")
        if self.material_thickness <= 0:
            raise ValueError("Material thickness must be positive")
        if (
            self.material_thickness >= self.width / 2
            or self.material_thickness >= self.height / 2
        ):
            raise ValueError(
                "Material thickness must be less than half of width and height"
            )
        if not isinstance(self.units, Units):
            object.__setattr__(self, "units", Units(self.units))

    @property
    def interior_width(self) -> float:
        """Width between the side panels."""
        return self.width - 2 * self.material_thickness

    @property
    def interior_height(self) -> float:
        """Height between the top and bottom panels."""
        return self.height - 2 * self.material_thickness

    @property
    def tolerances(self) -> UnitTolerances:
        return UnitTolerances.for_units(self.units)

    def axis_bounds(self, orientation: Orientation) -> tuple[float, float]:
        """Raw interior span along the axis a divider of this orientation moves on."""
        if orientation is Orientation.HORIZONTAL:
            return 0.0, self.interior_height
        half_width = self.interior_width / 2
        return -half_width, half_width

    def placement_bounds(self, orientation: Orientation) -> tuple[float, float]:
        """Legal divider centers: the axis bounds inset by half the thickness."""
        lower, upper = self.axis_bounds(orientation)
        inset = self.material_thickness / 2
        return lower + inset, upper - inset


@dataclass(frozen=True)
class Divider:
    """A committed partition inside the shelf.

    The id is assigned once and never reused; only the position changes,
    and only through the drag protocol.
    """

    id: str
    position: float
    orientation: Orientation

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Divider id must not be empty")
        if not isinstance(self.orientation, Orientation):
            object.__setattr__(self, "orientation", Orientation(self.orientation))

    def moved_to(self, position: float) -> "Divider":
        """Copy of this divider at a new position."""
        return replace(self, position=position)


@dataclass(frozen=True)
class GhostDivider:
    """Non-committed placement preview, recomputed on every pointer move."""

    position: float
    orientation: Orientation
    addable: bool
    visible: bool


@dataclass(frozen=True)
class PointerPosition:
    """Last reported pointer location.

    Attributes:
        x: Screen x in pixels (drag threshold detection only).
        y: Screen y in pixels (drag threshold detection only).
        position_x: Horizontal offset from the interior centerline.
        position_y: Vertical offset from the interior floor.
        is_over_panel: True when the pointer is over a structural panel.
    """

    x: float
    y: float
    position_x: float
    position_y: float
    is_over_panel: bool = False

    def position_along(self, orientation: Orientation) -> float:
        """Coordinate on the axis a divider of ``orientation`` moves along."""
        if orientation is Orientation.HORIZONTAL:
            return self.position_y
        return self.position_x


@dataclass(frozen=True)
class DragAnchor:
    """Pixel location of the pointer-down that may start a drag."""

    x: float
    y: float
    divider_position: float

    def distance_to(self, x: float, y: float) -> float:
        """Pixel distance from the anchor."""
        return math.hypot(x - self.x, y - self.y)
