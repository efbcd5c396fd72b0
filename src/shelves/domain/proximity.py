"""Pointer hit-testing against existing dividers."""

from __future__ import annotations

from collections.abc import Iterable

from .value_objects import Divider, Orientation, ShelfConfig


def find_divider_near(
    position_x: float,
    position_y: float,
    dividers: Iterable[Divider],
    config: ShelfConfig,
) -> Divider | None:
    """Return the divider closest to the pointer, if within ``near_distance``.

    Horizontal dividers are compared on the y axis, vertical ones on the
    x axis. Ties go to the divider listed first.
    """
    near_distance = config.tolerances.near_distance
    best: Divider | None = None
    best_offset = near_distance
    for divider in dividers:
        if divider.orientation is Orientation.HORIZONTAL:
            offset = abs(position_y - divider.position)
        else:
            offset = abs(position_x - divider.position)
        if offset <= near_distance and (best is None or offset < best_offset):
            best = divider
            best_offset = offset
    return best
