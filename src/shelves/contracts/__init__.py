"""Contracts between the interaction core and its host collaborators."""

from .protocols import CameraControlProtocol, DividerChangeListener, SnapshotSubscriber

__all__ = [
    "CameraControlProtocol",
    "DividerChangeListener",
    "SnapshotSubscriber",
]
