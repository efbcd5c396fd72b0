"""Output formatters and exporters for interaction snapshots."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from shelves.domain.interaction import MachineSnapshot
from shelves.domain.value_objects import Divider, GhostDivider, ShelfConfig, Units

if TYPE_CHECKING:
    from shelves.application.commands import ReplayStep
    from shelves.domain.distance_calculator import DistanceMeasurement

_UNIT_SUFFIX = {Units.METRIC: "cm", Units.IMPERIAL: "in"}


def _divider_dict(divider: Divider | None) -> dict[str, Any] | None:
    if divider is None:
        return None
    return {
        "id": divider.id,
        "position": divider.position,
        "orientation": divider.orientation.value,
    }


def _ghost_dict(ghost: GhostDivider | None) -> dict[str, Any] | None:
    if ghost is None:
        return None
    return {
        "position": ghost.position,
        "orientation": ghost.orientation.value,
        "addable": ghost.addable,
        "visible": ghost.visible,
    }


def _config_dict(config: ShelfConfig | None) -> dict[str, Any] | None:
    if config is None:
        return None
    return {
        "width": config.width,
        "height": config.height,
        "depth": config.depth,
        "material_thickness": config.material_thickness,
        "units": config.units.value,
    }


class SnapshotJsonExporter:
    """Exports interaction snapshots as JSON."""

    def to_dict(self, snapshot: MachineSnapshot) -> dict[str, Any]:
        """Plain-data view of a snapshot, safe to serialize."""
        context = snapshot.context
        return {
            "state": snapshot.state.value,
            "horizontal_dividers": [_divider_dict(d) for d in context.horizontal_dividers],
            "vertical_dividers": [_divider_dict(d) for d in context.vertical_dividers],
            "selected_divider": _divider_dict(context.selected_divider),
            "hovered_divider": _divider_dict(context.hovered_divider),
            "ghost_divider": _ghost_dict(context.ghost_divider),
            "dragging": context.dragging,
            "shelf_config": _config_dict(context.shelf_config),
        }

    def export(self, snapshot: MachineSnapshot) -> str:
        """Export a snapshot as a JSON string."""
        return json.dumps(self.to_dict(snapshot), indent=2)


class SnapshotFormatter:
    """Formats a snapshot as a readable summary with a divider table."""

    def format(self, snapshot: MachineSnapshot) -> str:
        context = snapshot.context
        config = context.shelf_config
        suffix = _UNIT_SUFFIX[config.units] if config else ""

        lines = [
            "DIVIDER LAYOUT",
            "=" * 50,
            f"State: {snapshot.state.value}",
        ]
        if config is not None:
            lines.append(
                f"Shelf: {config.width:g} x {config.height:g} x {config.depth:g} {suffix} "
                f"(material {config.material_thickness:g} {suffix})"
            )

        dividers = sorted(
            context.all_dividers, key=lambda d: (d.orientation.value, d.position)
        )
        lines.append("-" * 50)
        if not dividers:
            lines.append("No dividers.")
        else:
            lines.append(f"{'Id':<20} {'Orientation':<12} {'Position':>10}")
            lines.append("-" * 50)
            selected_id = context.selected_divider.id if context.selected_divider else None
            for divider in dividers:
                marker = " *" if divider.id == selected_id else ""
                lines.append(
                    f"{divider.id:<20} {divider.orientation.value:<12} "
                    f"{divider.position:>10.3f}{marker}"
                )
        lines.append("-" * 50)
        lines.append(
            f"Horizontal: {len(context.horizontal_dividers)}  "
            f"Vertical: {len(context.vertical_dividers)}"
        )

        ghost = context.ghost_divider
        if ghost is not None:
            status = "addable" if ghost.addable else "blocked"
            lines.append(
                f"Ghost: {ghost.orientation.value} at {ghost.position:g} ({status})"
            )
        return "\n".join(lines)


class DistanceFormatter:
    """Formats distance annotations, one line per direction."""

    def format(
        self, measurements: Sequence[DistanceMeasurement], units: Units
    ) -> str:
        suffix = _UNIT_SUFFIX[units]
        return "\n".join(
            f"{m.direction.value:<6} {m.distance:.2f} {suffix} to {m.target_label}"
            for m in measurements
        )


class ReplayTraceFormatter:
    """Formats the per-event trace of a replay."""

    def format(self, steps: Sequence[ReplayStep]) -> str:
        if not steps:
            return "No events replayed."
        lines = [f"{'#':>4}  {'Event':<22} {'State':<15}"]
        for step in steps:
            note = "" if step.changed else "  (ignored)"
            lines.append(
                f"{step.index:>4}  {step.event_type:<22} {step.state.value:<15}{note}"
            )
        return "\n".join(lines)
