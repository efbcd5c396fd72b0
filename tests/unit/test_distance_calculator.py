"""Unit tests for divider distance annotations."""

import pytest

from shelves.domain.distance_calculator import (
    DistanceDirection,
    TargetKind,
    calculate_divider_distances,
)
from shelves.domain.value_objects import Divider, Orientation, ShelfConfig


def _h(divider_id: str, position: float) -> Divider:
    return Divider(id=divider_id, position=position, orientation=Orientation.HORIZONTAL)


def _v(divider_id: str, position: float) -> Divider:
    return Divider(id=divider_id, position=position, orientation=Orientation.VERTICAL)


class TestHorizontalDistances:
    """Above/below measurements for horizontal dividers."""

    def test_lone_divider_measures_to_both_walls(
        self, imperial_config: ShelfConfig
    ) -> None:
        divider = _h("a", 36)
        above, below = calculate_divider_distances(divider, [divider], imperial_config)

        assert above.direction is DistanceDirection.ABOVE
        assert above.target_kind is TargetKind.WALL
        assert above.target_label == "Top"
        assert above.distance == pytest.approx(70.125 - 36)

        assert below.direction is DistanceDirection.BELOW
        assert below.target_kind is TargetKind.WALL
        assert below.target_label == "Bottom"
        assert below.distance == pytest.approx(36 - 0.375)

    def test_between_dividers_subtracts_full_thickness(
        self, imperial_config: ShelfConfig
    ) -> None:
        """Half of each divider's material intrudes into the clear space."""
        lower, upper = _h("a", 20), _h("b", 40)

        above, below = calculate_divider_distances(
            lower, [lower, upper], imperial_config
        )
        assert above.target_kind is TargetKind.DIVIDER
        assert above.distance == pytest.approx(19.25)
        assert below.target_label == "Bottom"

        above, below = calculate_divider_distances(
            upper, [lower, upper], imperial_config
        )
        assert above.target_label == "Top"
        assert above.distance == pytest.approx(30.125)
        assert below.target_kind is TargetKind.DIVIDER
        assert below.distance == pytest.approx(19.25)

    def test_labels_are_ordinals_among_sorted_peers(
        self, imperial_config: ShelfConfig
    ) -> None:
        """Peers are numbered by position, reference excluded, from 1."""
        reference = _h("c", 20)
        dividers = [_h("a", 40), reference, _h("b", 10)]

        above, below = calculate_divider_distances(reference, dividers, imperial_config)

        assert above.target_label == "Divider 2"
        assert below.target_label == "Divider 1"

    def test_divider_at_wall_reports_zero(self, imperial_config: ShelfConfig) -> None:
        divider = _h("a", 0.375)
        _, below = calculate_divider_distances(divider, [divider], imperial_config)
        assert below.distance == pytest.approx(0.0)

    def test_ignores_vertical_dividers(self, imperial_config: ShelfConfig) -> None:
        divider = _h("a", 36)
        above, below = calculate_divider_distances(
            divider, [divider, _v("v", 0)], imperial_config
        )
        assert above.target_kind is TargetKind.WALL
        assert below.target_kind is TargetKind.WALL


class TestVerticalDistances:
    """Right/left measurements for vertical dividers."""

    def test_centered_divider(self, imperial_config: ShelfConfig) -> None:
        divider = _v("a", 0)
        right, left = calculate_divider_distances(divider, [divider], imperial_config)

        assert right.direction is DistanceDirection.RIGHT
        assert right.target_label == "Right"
        assert right.distance == pytest.approx(16.875)
        assert left.direction is DistanceDirection.LEFT
        assert left.target_label == "Left"
        assert left.distance == pytest.approx(16.875)

    def test_neighbor_to_the_left(self, metric_config: ShelfConfig) -> None:
        divider = _v("a", 10)
        right, left = calculate_divider_distances(
            divider, [_v("b", -10), divider], metric_config
        )

        assert right.target_kind is TargetKind.WALL
        assert left.target_kind is TargetKind.DIVIDER
        assert left.target_label == "Divider 1"
        assert left.distance == pytest.approx(20 - 1.8)
