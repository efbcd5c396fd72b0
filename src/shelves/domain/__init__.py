"""Domain layer - divider model, placement algorithms and interaction machine."""

from .constraint_solver import (
    calculate_constrained_position,
    is_legal_position,
    snap_to_increment,
)
from .distance_calculator import (
    DistanceDirection,
    DistanceMeasurement,
    TargetKind,
    calculate_divider_distances,
)
from .ghost_detector import (
    Section,
    detect_ghost_divider,
    find_section,
    preferred_orientation,
)
from .interaction import (
    DragReleasePolicy,
    InteractionContext,
    InteractionState,
    MachineSettings,
    MachineSnapshot,
    TransitionResult,
    transition,
)
from .proximity import find_divider_near
from .value_objects import (
    Divider,
    DragAnchor,
    GhostDivider,
    Orientation,
    PointerPosition,
    ShelfConfig,
    Units,
    UnitTolerances,
)

__all__ = [
    # Value objects
    "Divider",
    "DragAnchor",
    "GhostDivider",
    "Orientation",
    "PointerPosition",
    "ShelfConfig",
    "Units",
    "UnitTolerances",
    # Placement algorithms
    "Section",
    "calculate_constrained_position",
    "calculate_divider_distances",
    "detect_ghost_divider",
    "find_divider_near",
    "find_section",
    "is_legal_position",
    "preferred_orientation",
    "snap_to_increment",
    "DistanceDirection",
    "DistanceMeasurement",
    "TargetKind",
    # Interaction machine
    "DragReleasePolicy",
    "InteractionContext",
    "InteractionState",
    "MachineSettings",
    "MachineSnapshot",
    "TransitionResult",
    "transition",
]
