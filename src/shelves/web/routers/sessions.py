"""Editing session endpoints.

A host view layer opens a session, forwards normalized pointer and keyboard
events to it, and renders the snapshot each response carries.
"""

from fastapi import APIRouter, Response

from shelves.application.config import (
    config_to_divider,
    config_to_event,
    config_to_settings,
    config_to_shelf,
)
from shelves.application.session import DividerSession
from shelves.domain.interaction import MachineSnapshot
from shelves.domain.value_objects import Divider
from shelves.infrastructure import SnapshotJsonExporter
from shelves.web.dependencies import SessionRegistryDep
from shelves.web.exceptions import DividerNotFoundError
from shelves.web.schemas.requests import CreateSessionRequest, EventBatchRequest
from shelves.web.schemas.responses import (
    DistanceSchema,
    DistancesSchema,
    SessionSchema,
    SnapshotSchema,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])

_exporter = SnapshotJsonExporter()


def _snapshot_schema(snapshot: MachineSnapshot) -> SnapshotSchema:
    return SnapshotSchema.model_validate(_exporter.to_dict(snapshot))


class _EffectRecorder:
    """Camera control and change listener that records effect names."""

    def __init__(self) -> None:
        self.effects: list[str] = []

    def enable(self) -> None:
        self.effects.append("enable_camera_controls")

    def disable(self) -> None:
        self.effects.append("disable_camera_controls")

    def divider_committed(self, divider: Divider, restored: bool) -> None:
        self.effects.append("divider_restored" if restored else "divider_committed")

    def divider_moved(self, divider: Divider, previous_position: float) -> None:
        self.effects.append("divider_moved")

    def divider_deleted(self, divider: Divider) -> None:
        self.effects.append("divider_deleted")

    def dividers_cleared(self, dividers: tuple[Divider, ...]) -> None:
        self.effects.append("dividers_cleared")

    def drain(self) -> list[str]:
        effects, self.effects = self.effects, []
        return effects


@router.post("", response_model=SessionSchema, status_code=201)
async def create_session(
    request: CreateSessionRequest, registry: SessionRegistryDep
) -> SessionSchema:
    """Open a session for a shelf, restoring any saved dividers."""
    recorder = _EffectRecorder()
    session = DividerSession(
        settings=config_to_settings(request.settings),
        camera_controls=recorder,
        listeners=[recorder],
    )
    session.initialize(
        config_to_shelf(request.shelf),
        [config_to_divider(d) for d in request.layout.dividers],
    )
    recorder.drain()
    session_id = registry.open(session)
    return SessionSchema(session_id=session_id, snapshot=_snapshot_schema(session.snapshot))


@router.get("/{session_id}", response_model=SessionSchema)
async def get_session(session_id: str, registry: SessionRegistryDep) -> SessionSchema:
    """Return the latest snapshot of a session."""
    session = registry.get(session_id)
    return SessionSchema(session_id=session_id, snapshot=_snapshot_schema(session.snapshot))


@router.post("/{session_id}/events", response_model=SessionSchema)
async def send_events(
    session_id: str, request: EventBatchRequest, registry: SessionRegistryDep
) -> SessionSchema:
    """Process events in order and return the resulting snapshot.

    The response lists the host effects (camera control, divider changes)
    the events triggered.
    """
    session = registry.get(session_id)
    session.send_all(config_to_event(event) for event in request.events)
    recorder = session.camera_controls
    effects = recorder.drain() if isinstance(recorder, _EffectRecorder) else []
    return SessionSchema(
        session_id=session_id,
        snapshot=_snapshot_schema(session.snapshot),
        effects=effects,
    )


@router.delete("/{session_id}", status_code=204)
async def close_session(session_id: str, registry: SessionRegistryDep) -> Response:
    """Close a session and discard its state."""
    registry.close(session_id)
    return Response(status_code=204)


@router.get(
    "/{session_id}/dividers/{divider_id}/distances", response_model=DistancesSchema
)
async def get_divider_distances(
    session_id: str, divider_id: str, registry: SessionRegistryDep
) -> DistancesSchema:
    """Clear space from a divider to its nearest neighbor or wall, both ways."""
    session = registry.get(session_id)
    measurements = session.distances_for(divider_id)
    if measurements is None:
        raise DividerNotFoundError(divider_id)
    return DistancesSchema(
        divider_id=divider_id,
        distances=[
            DistanceSchema(
                direction=m.direction.value,
                distance=m.distance,
                target_kind=m.target_kind.value,
                target_label=m.target_label,
            )
            for m in measurements
        ],
    )
