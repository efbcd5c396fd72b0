"""Speculative placement detection for new dividers.

This module decides, for a pointer position inside the shelf, whether a new
divider could be placed there and in which orientation. It never mutates
the divider collections it is given.

Algorithm:
1. Reject pointers over a structural panel or outside the interior.
2. Prefer vertical placement when the pointer is far from the centerline
   (more than ``ORIENTATION_THRESHOLD`` of the half interior width),
   horizontal placement otherwise. Fall back to the other orientation
   if the preferred one yields no candidate.
3. Find the section enclosing the pointer along the chosen axis.
4. The ghost is addable when the section is at least twice the minimum
   section size and the pointer is at least ``min_gap`` away from any
   bounding divider (walls do not count, the constraint solver keeps
   dividers off them).

The ghost follows the raw pointer coordinate rather than snapping to the
section midpoint, so the preview glides with the cursor until commit.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .value_objects import (
    Divider,
    GhostDivider,
    Orientation,
    PointerPosition,
    ShelfConfig,
)

__all__ = [
    "ORIENTATION_THRESHOLD",
    "Section",
    "detect_ghost_divider",
    "find_section",
    "preferred_orientation",
]

ORIENTATION_THRESHOLD = 0.4


@dataclass(frozen=True)
class Section:
    """Contiguous span between two adjacent same-orientation dividers or walls.

    Attributes:
        lower: Lower bound of the span.
        upper: Upper bound of the span.
        lower_is_wall: True when the lower bound is the enclosure wall.
        upper_is_wall: True when the upper bound is the enclosure wall.
    """

    lower: float
    upper: float
    lower_is_wall: bool
    upper_is_wall: bool

    @property
    def span(self) -> float:
        return self.upper - self.lower


def find_section(
    position: float,
    dividers: Sequence[Divider],
    config: ShelfConfig,
    orientation: Orientation,
) -> Section | None:
    """Find the section enclosing ``position`` along an orientation's axis.

    Sections are half-open ``[lower, upper)``, except the last one which also
    includes the far wall.

    Args:
        position: Coordinate along the axis.
        dividers: Dividers of ``orientation``, in any order.
        config: Shelf configuration supplying the interior bounds.
        orientation: Axis to search.

    Returns:
        The enclosing section, or None when ``position`` is outside the interior.
    """
    wall_lower, wall_upper = config.axis_bounds(orientation)
    if position < wall_lower or position > wall_upper:
        return None

    positions = sorted(d.position for d in dividers if d.orientation is orientation)
    for index in range(len(positions) + 1):
        is_first = index == 0
        is_last = index == len(positions)
        lower = wall_lower if is_first else positions[index - 1]
        upper = wall_upper if is_last else positions[index]

        if lower <= position < upper or (is_last and position <= upper):
            return Section(
                lower=lower,
                upper=upper,
                lower_is_wall=is_first,
                upper_is_wall=is_last,
            )

    return None


def preferred_orientation(position_x: float, config: ShelfConfig) -> Orientation:
    """Orientation to try first for a pointer at ``position_x``."""
    half_width = config.interior_width / 2
    if half_width > 0 and abs(position_x) / half_width > ORIENTATION_THRESHOLD:
        return Orientation.VERTICAL
    return Orientation.HORIZONTAL


def detect_ghost_divider(
    pointer: PointerPosition | None,
    horizontal_dividers: Sequence[Divider],
    vertical_dividers: Sequence[Divider],
    config: ShelfConfig | None,
) -> GhostDivider | None:
    """Decide whether and where a new divider could be previewed.

    Args:
        pointer: Pointer position in shelf-interior coordinates.
        horizontal_dividers: Current horizontal dividers.
        vertical_dividers: Current vertical dividers.
        config: Shelf configuration.

    Returns:
        A ghost divider, or None when the pointer is missing, over a panel,
        or outside the interior.

    Example:
        >>> config = ShelfConfig(width=36, height=72, depth=12, material_thickness=0.75)
        >>> pointer = PointerPosition(x=0, y=0, position_x=0, position_y=36)
        >>> ghost = detect_ghost_divider(pointer, [], [], config)
        >>> ghost.orientation, ghost.addable
        (<Orientation.HORIZONTAL: 'horizontal'>, True)
    """
    if pointer is None or config is None or pointer.is_over_panel:
        return None
    if not _inside_interior(pointer, config):
        return None

    dividers_by_orientation = {
        Orientation.HORIZONTAL: horizontal_dividers,
        Orientation.VERTICAL: vertical_dividers,
    }
    primary = preferred_orientation(pointer.position_x, config)
    for orientation in (primary, primary.other):
        ghost = _detect_for_orientation(
            pointer.position_along(orientation),
            dividers_by_orientation[orientation],
            config,
            orientation,
        )
        if ghost is not None:
            return ghost
    return None


def _inside_interior(pointer: PointerPosition, config: ShelfConfig) -> bool:
    x_lower, x_upper = config.axis_bounds(Orientation.VERTICAL)
    y_lower, y_upper = config.axis_bounds(Orientation.HORIZONTAL)
    return (
        x_lower <= pointer.position_x <= x_upper
        and y_lower <= pointer.position_y <= y_upper
    )


def _detect_for_orientation(
    position: float,
    dividers: Sequence[Divider],
    config: ShelfConfig,
    orientation: Orientation,
) -> GhostDivider | None:
    section = find_section(position, dividers, config, orientation)
    if section is None:
        return None

    tolerances = config.tolerances
    section_size_ok = section.span >= tolerances.min_section_size * 2
    too_close_to_lower = (
        not section.lower_is_wall and position - section.lower < tolerances.min_gap
    )
    too_close_to_upper = (
        not section.upper_is_wall and section.upper - position < tolerances.min_gap
    )
    addable = section_size_ok and not too_close_to_lower and not too_close_to_upper

    return GhostDivider(
        position=position,
        orientation=orientation,
        addable=addable,
        visible=addable,
    )
