"""Application layer - session orchestration, input adaptation and use cases."""

from .commands import ReplayOutput, ReplayScriptCommand, ReplayStep
from .input_adapter import PointerInputAdapter
from .session import DividerSession

__all__ = [
    "DividerSession",
    "PointerInputAdapter",
    "ReplayOutput",
    "ReplayScriptCommand",
    "ReplayStep",
]
