"""Infrastructure layer - formatters and exporters."""

from .formatters import (
    DistanceFormatter,
    ReplayTraceFormatter,
    SnapshotFormatter,
    SnapshotJsonExporter,
)

__all__ = [
    "DistanceFormatter",
    "ReplayTraceFormatter",
    "SnapshotFormatter",
    "SnapshotJsonExporter",
]
