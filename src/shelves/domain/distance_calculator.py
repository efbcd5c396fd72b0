"""Neighbor distance measurements for divider annotations.

For a reference divider, two clear-space measurements are produced, one
toward each end of its axis: above/below for horizontal dividers and
left/right for vertical ones. Each measurement targets either the nearest
same-orientation divider in that direction or the enclosure wall.

Clear space excludes material: between two dividers half of each divider's
thickness is subtracted, toward a wall only the reference divider's half
thickness is (the axis bounds already stop at the wall's inner face).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .value_objects import Divider, Orientation, ShelfConfig

__all__ = [
    "DistanceDirection",
    "DistanceMeasurement",
    "TargetKind",
    "calculate_divider_distances",
]


class DistanceDirection(str, Enum):
    """Direction of a measurement along the divider's axis."""

    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"


class TargetKind(str, Enum):
    """What bounds the measured clear space."""

    DIVIDER = "divider"
    WALL = "wall"


_WALL_LABELS = {
    DistanceDirection.ABOVE: "Top",
    DistanceDirection.BELOW: "Bottom",
    DistanceDirection.LEFT: "Left",
    DistanceDirection.RIGHT: "Right",
}


@dataclass(frozen=True)
class DistanceMeasurement:
    """Clear space from a divider to its nearest boundary in one direction.

    Attributes:
        direction: Which way the measurement points.
        distance: Clear space in shelf units.
        target_kind: Whether the boundary is a divider or the enclosure wall.
        target_label: "Divider N" (1-based, sorted, reference excluded) or a
            wall name ("Top", "Bottom", "Left", "Right").
    """

    direction: DistanceDirection
    distance: float
    target_kind: TargetKind
    target_label: str


def calculate_divider_distances(
    divider: Divider,
    dividers: Sequence[Divider],
    config: ShelfConfig,
) -> tuple[DistanceMeasurement, DistanceMeasurement]:
    """Compute the two nearest-gap measurements for a divider.

    Args:
        divider: Reference divider.
        dividers: Its peers; other orientations and the reference itself
            are ignored.
        config: Shelf configuration.

    Returns:
        ``(toward upper end, toward lower end)``: (above, below) for a
        horizontal divider, (right, left) for a vertical one.
    """
    if divider.orientation is Orientation.HORIZONTAL:
        upper_direction, lower_direction = DistanceDirection.ABOVE, DistanceDirection.BELOW
    else:
        upper_direction, lower_direction = DistanceDirection.RIGHT, DistanceDirection.LEFT

    thickness = config.material_thickness
    wall_lower, wall_upper = config.axis_bounds(divider.orientation)
    peers = sorted(
        (
            d
            for d in dividers
            if d.orientation is divider.orientation and d.id != divider.id
        ),
        key=lambda d: d.position,
    )
    reference = divider.position

    above = [(i, d) for i, d in enumerate(peers) if d.position > reference]
    if above:
        index, nearest = above[0]
        upper = DistanceMeasurement(
            direction=upper_direction,
            distance=nearest.position - reference - thickness,
            target_kind=TargetKind.DIVIDER,
            target_label=f"Divider {index + 1}",
        )
    else:
        upper = DistanceMeasurement(
            direction=upper_direction,
            distance=(wall_upper - thickness / 2) - reference,
            target_kind=TargetKind.WALL,
            target_label=_WALL_LABELS[upper_direction],
        )

    below = [(i, d) for i, d in enumerate(peers) if d.position < reference]
    if below:
        index, nearest = below[-1]
        lower = DistanceMeasurement(
            direction=lower_direction,
            distance=reference - nearest.position - thickness,
            target_kind=TargetKind.DIVIDER,
            target_label=f"Divider {index + 1}",
        )
    else:
        lower = DistanceMeasurement(
            direction=lower_direction,
            distance=reference - (wall_lower + thickness / 2),
            target_kind=TargetKind.WALL,
            target_label=_WALL_LABELS[lower_direction],
        )

    return upper, lower
