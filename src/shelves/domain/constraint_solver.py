"""Position constraint solving for divider placement and dragging.

Given a desired divider position, this module returns a corrected position
that respects the enclosure walls, keeps ``min_gap`` clearance from every
same-orientation neighbor, and lands on the unit's snapping increment.

It runs on every pointer move while dragging and once when a ghost divider
is committed.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .value_objects import Divider, Orientation, ShelfConfig

__all__ = [
    "calculate_constrained_position",
    "is_legal_position",
    "snap_to_increment",
]

# Float slack for gap and bound comparisons after snapping arithmetic.
_EPSILON = 1e-9


def snap_to_increment(position: float, increment: float) -> float:
    """Snap a position to the nearest multiple of ``increment`` (ties round up)."""
    return math.floor(position / increment + 0.5) * increment


def calculate_constrained_position(
    position: float,
    orientation: Orientation,
    divider_id: str,
    dividers: Sequence[Divider],
    config: ShelfConfig,
) -> float:
    """Correct a desired divider position into a legal one.

    Steps:
    1. Clamp to the placement bounds (interior inset by half the thickness).
    2. Pick the free span the divider may occupy. Every neighbor blocks
       ``min_gap`` on both sides of itself. A divider that already exists in
       ``dividers`` stays in the span between the neighbors on either side of
       where it started, so dragging never tunnels through a neighbor. A new
       divider takes the free span nearest the desired position; on a tie
       the higher span wins.
    3. Clamp into that span and snap to the unit increment. A snap past a
       wall is re-clamped to the wall. A snap past a neighbor's gap edge
       steps back onto the grid inside the span, or onto the edge itself when
       the span holds no grid point.

    Args:
        position: Desired position along the orientation's axis.
        orientation: Orientation of the divider being placed or moved.
        divider_id: Id of that divider; it is excluded from neighbor checks.
        dividers: Dividers to check against. May contain both orientations.
        config: Shelf configuration.

    Returns:
        A position for which ``is_legal_position`` holds. When no legal spot
        exists, an existing divider keeps its current position and a new one
        gets the clamped desired position.

    Example:
        >>> config = ShelfConfig(91, 183, 30, 1.8, Units.METRIC)
        >>> dividers = [Divider("a", 30, Orientation.HORIZONTAL),
        ...             Divider("b", 60, Orientation.HORIZONTAL)]
        >>> calculate_constrained_position(61, Orientation.HORIZONTAL, "a", dividers, config)
        58.0
    """
    lower, upper = config.placement_bounds(orientation)
    tolerances = config.tolerances
    min_gap = tolerances.min_gap

    moving = next((d for d in dividers if d.id == divider_id), None)
    neighbors = sorted(
        d.position
        for d in dividers
        if d.orientation is orientation and d.id != divider_id
    )
    desired = _clamp(position, lower, upper)

    if moving is not None:
        span = _span_around(moving.position, desired, neighbors, lower, upper, min_gap)
        if span is None:
            return moving.position
    else:
        span = _nearest_span(desired, _free_spans(neighbors, lower, upper, min_gap))
        if span is None:
            return desired

    return _snap_within(desired, span, tolerances.snap_increment, lower, upper)


def is_legal_position(
    position: float,
    orientation: Orientation,
    divider_id: str,
    dividers: Sequence[Divider],
    config: ShelfConfig,
) -> bool:
    """Check a position against the placement bounds and neighbor gaps.

    Args:
        position: Candidate position.
        orientation: Orientation of the divider.
        divider_id: Id of the divider; it is excluded from neighbor checks.
        dividers: Dividers to check against.
        config: Shelf configuration.

    Returns:
        True when the position is inside the bounds and at least ``min_gap``
        from every other same-orientation divider.
    """
    lower, upper = config.placement_bounds(orientation)
    if position < lower - _EPSILON or position > upper + _EPSILON:
        return False

    min_gap = config.tolerances.min_gap
    return all(
        abs(position - d.position) >= min_gap - _EPSILON
        for d in dividers
        if d.orientation is orientation and d.id != divider_id
    )


def _clamp(position: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, position))


def _free_spans(
    neighbors: list[float], lower: float, upper: float, min_gap: float
) -> list[tuple[float, float]]:
    """Closed spans of the bounds that are at least ``min_gap`` from all neighbors."""
    spans = []
    start = lower
    for neighbor in neighbors:
        end = min(upper, neighbor - min_gap)
        if end >= start - _EPSILON:
            spans.append((start, max(start, end)))
        start = max(start, neighbor + min_gap)
    if upper >= start - _EPSILON:
        spans.append((start, max(start, upper)))
    return spans


def _span_around(
    origin: float,
    desired: float,
    neighbors: list[float],
    lower: float,
    upper: float,
    min_gap: float,
) -> tuple[float, float] | None:
    # A neighbor sitting exactly on the origin is passed on the desired side.
    below = [
        n for n in neighbors if n < origin or (n == origin and desired >= origin)
    ]
    above = [n for n in neighbors if n not in below]
    low = max([lower] + [n + min_gap for n in below])
    high = min([upper] + [n - min_gap for n in above])
    if high < low - _EPSILON:
        return None
    return low, max(low, high)


def _nearest_span(
    desired: float, spans: list[tuple[float, float]]
) -> tuple[float, float] | None:
    def distance(span: tuple[float, float]) -> float:
        low, high = span
        if desired < low:
            return low - desired
        if desired > high:
            return desired - high
        return 0.0

    if not spans:
        return None
    return min(spans, key=lambda span: (distance(span), -span[0]))


def _snap_within(
    desired: float,
    span: tuple[float, float],
    increment: float,
    lower: float,
    upper: float,
) -> float:
    low, high = span
    snapped = snap_to_increment(_clamp(desired, low, high), increment)

    if snapped > high + _EPSILON:
        if high >= upper - _EPSILON:
            return high
        inside = math.floor(high / increment + _EPSILON) * increment
        return inside if inside >= low - _EPSILON else high

    if snapped < low - _EPSILON:
        if low <= lower + _EPSILON:
            return low
        inside = math.ceil(low / increment - _EPSILON) * increment
        return inside if inside <= high + _EPSILON else low

    return snapped
