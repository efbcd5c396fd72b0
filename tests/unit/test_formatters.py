"""Unit tests for snapshot formatters and exporters."""

import json

import pytest

from shelves.application.commands import ReplayStep
from shelves.domain.distance_calculator import calculate_divider_distances
from shelves.domain.interaction import (
    AddExistingDivider,
    ClickDivider,
    InteractionState,
    MachineSnapshot,
    MouseMove,
    transition,
)
from shelves.domain.value_objects import Divider, Orientation, ShelfConfig, Units
from shelves.infrastructure import (
    DistanceFormatter,
    ReplayTraceFormatter,
    SnapshotFormatter,
    SnapshotJsonExporter,
)


@pytest.fixture
def populated(imperial_snapshot: MachineSnapshot) -> MachineSnapshot:
    """Two horizontal dividers and one vertical, with 'h2' selected."""
    snapshot = imperial_snapshot
    for divider in (
        Divider(id="h1", position=20, orientation=Orientation.HORIZONTAL),
        Divider(id="h2", position=50, orientation=Orientation.HORIZONTAL),
        Divider(id="v1", position=-4, orientation=Orientation.VERTICAL),
    ):
        snapshot = transition(snapshot, AddExistingDivider(divider=divider)).snapshot
    return transition(
        snapshot,
        ClickDivider(divider=Divider("h2", 50, Orientation.HORIZONTAL)),
    ).snapshot


class TestSnapshotJsonExporter:
    """Tests for SnapshotJsonExporter."""

    def test_to_dict(self, populated: MachineSnapshot) -> None:
        data = SnapshotJsonExporter().to_dict(populated)

        assert data["state"] == "selected"
        assert [d["id"] for d in data["horizontal_dividers"]] == ["h1", "h2"]
        assert data["vertical_dividers"] == [
            {"id": "v1", "position": -4, "orientation": "vertical"}
        ]
        assert data["selected_divider"]["id"] == "h2"
        assert data["hovered_divider"] is None
        assert data["ghost_divider"] is None
        assert data["dragging"] is False
        assert data["shelf_config"]["units"] == "imperial"

    def test_export_is_valid_json(self, populated: MachineSnapshot) -> None:
        output = SnapshotJsonExporter().export(populated)
        assert json.loads(output)["state"] == "selected"

    def test_ghost_is_exported(self, imperial_snapshot: MachineSnapshot) -> None:
        snapshot = transition(
            imperial_snapshot, MouseMove(x=0, y=0, position_y=36, position_x=0)
        ).snapshot
        ghost = SnapshotJsonExporter().to_dict(snapshot)["ghost_divider"]

        assert ghost == {
            "position": 36,
            "orientation": "horizontal",
            "addable": True,
            "visible": True,
        }


class TestSnapshotFormatter:
    """Tests for the text summary."""

    def test_lists_dividers_and_marks_selection(self, populated: MachineSnapshot) -> None:
        output = SnapshotFormatter().format(populated)

        assert "DIVIDER LAYOUT" in output
        assert "State: selected" in output
        assert "Shelf: 36 x 72 x 12 in (material 0.75 in)" in output
        assert "Horizontal: 2  Vertical: 1" in output
        h2_line = next(line for line in output.splitlines() if line.startswith("h2"))
        assert h2_line.endswith(" *")

    def test_empty_shelf(self, imperial_snapshot: MachineSnapshot) -> None:
        output = SnapshotFormatter().format(imperial_snapshot)

        assert "No dividers." in output
        assert "Ghost:" not in output

    def test_without_config(self) -> None:
        output = SnapshotFormatter().format(MachineSnapshot.initial())
        assert "State: normal" in output
        assert "Shelf:" not in output


class TestDistanceFormatter:
    def test_metric_lines(self) -> None:
        config = ShelfConfig(
            width=91, height=183, depth=30, material_thickness=1.8, units=Units.METRIC
        )
        divider = Divider(id="a", position=58, orientation=Orientation.HORIZONTAL)
        peers = [divider, Divider(id="b", position=60, orientation=Orientation.HORIZONTAL)]

        output = DistanceFormatter().format(
            calculate_divider_distances(divider, peers, config), config.units
        )

        assert output.splitlines() == [
            "above  0.20 cm to Divider 1",
            "below  57.10 cm to Bottom",
        ]


class TestReplayTraceFormatter:
    def test_marks_ignored_events(self) -> None:
        steps = [
            ReplayStep(0, "MOUSE_MOVE", InteractionState.NORMAL, changed=True),
            ReplayStep(1, "CLICK_DELETE", InteractionState.NORMAL, changed=False),
        ]
        lines = ReplayTraceFormatter().format(steps).splitlines()

        assert "MOUSE_MOVE" in lines[1]
        assert "(ignored)" not in lines[1]
        assert lines[2].endswith("(ignored)")

    def test_no_steps(self) -> None:
        assert ReplayTraceFormatter().format([]) == "No events replayed."
