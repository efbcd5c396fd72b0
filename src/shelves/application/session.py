"""Divider editing session.

``DividerSession`` is the long-lived owner of the interaction machine's
snapshot. It feeds events through the pure reducer strictly in order,
carries out the effects the reducer requests through injected host
collaborators, and publishes every new snapshot to subscribers.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable

from shelves.contracts.protocols import (
    CameraControlProtocol,
    DividerChangeListener,
    SnapshotSubscriber,
)
from shelves.domain.distance_calculator import (
    DistanceMeasurement,
    calculate_divider_distances,
)
from shelves.domain.interaction import (
    AddExistingDivider,
    DisableCameraControls,
    DividerCommitted,
    DividerDeleted,
    DividerEvent,
    DividerMoved,
    DividersCleared,
    Effect,
    EnableCameraControls,
    InteractionContext,
    InteractionState,
    MachineSettings,
    MachineSnapshot,
    Reset,
    UpdateShelfConfig,
    transition,
)
from shelves.domain.value_objects import Divider, Orientation, ShelfConfig

logger = logging.getLogger(__name__)

__all__ = ["DividerSession"]


class DividerSession:
    """Event-driven divider editor.

    Events sent from inside a subscriber or listener callback are queued and
    processed after the current event completes, so every event runs to
    completion before the next one starts.

    Example:
        ```python
        session = DividerSession(ShelfConfig(36, 72, 12, 0.75))
        session.subscribe(renderer.render)
        session.send(MouseMove(x=400, y=300, position_y=36, position_x=0))
        session.send(ClickEmptySpace(position_y=36, position_x=0))
        session.all_dividers()[Orientation.HORIZONTAL]
        ```
    """

    def __init__(
        self,
        config: ShelfConfig | None = None,
        settings: MachineSettings | None = None,
        camera_controls: CameraControlProtocol | None = None,
        listeners: Iterable[DividerChangeListener] = (),
    ) -> None:
        """Initialize the session in the normal state.

        Args:
            config: Initial shelf configuration, if already known.
            settings: Machine settings (drag threshold, release policy, ids).
            camera_controls: Camera control to suspend while dragging.
            listeners: Consumers notified of committed divider changes.
        """
        self._settings = settings or MachineSettings()
        self._snapshot = MachineSnapshot.initial(config)
        self._camera_controls = camera_controls
        self._listeners: list[DividerChangeListener] = list(listeners)
        self._subscribers: list[SnapshotSubscriber] = []
        self._pending: deque[DividerEvent] = deque()
        self._processing = False

    @property
    def snapshot(self) -> MachineSnapshot:
        return self._snapshot

    @property
    def state(self) -> InteractionState:
        return self._snapshot.state

    @property
    def context(self) -> InteractionContext:
        return self._snapshot.context

    @property
    def settings(self) -> MachineSettings:
        return self._settings

    @property
    def camera_controls(self) -> CameraControlProtocol | None:
        return self._camera_controls

    def subscribe(self, subscriber: SnapshotSubscriber) -> Callable[[], None]:
        """Register a snapshot subscriber.

        Returns:
            A callable that removes the subscription.
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def add_listener(self, listener: DividerChangeListener) -> None:
        self._listeners.append(listener)

    def send(self, event: DividerEvent) -> MachineSnapshot:
        """Process an event and return the resulting snapshot."""
        self._pending.append(event)
        if self._processing:
            return self._snapshot

        self._processing = True
        try:
            while self._pending:
                self._process(self._pending.popleft())
        finally:
            self._processing = False
        return self._snapshot

    def send_all(self, events: Iterable[DividerEvent]) -> MachineSnapshot:
        for event in events:
            self.send(event)
        return self._snapshot

    def update_shelf_config(self, config: ShelfConfig) -> MachineSnapshot:
        return self.send(UpdateShelfConfig(config=config))

    def initialize(
        self, config: ShelfConfig, dividers: Iterable[Divider] = ()
    ) -> MachineSnapshot:
        """Apply a configuration and restore a saved divider layout."""
        self.update_shelf_config(config)
        for divider in dividers:
            self.send(AddExistingDivider(divider=divider))
        return self._snapshot

    def reset(self) -> MachineSnapshot:
        return self.send(Reset())

    def all_dividers(self) -> dict[Orientation, tuple[Divider, ...]]:
        """Committed dividers by orientation, for downstream consumers."""
        context = self._snapshot.context
        return {
            Orientation.HORIZONTAL: context.horizontal_dividers,
            Orientation.VERTICAL: context.vertical_dividers,
        }

    def distances_for(
        self, divider_id: str
    ) -> tuple[DistanceMeasurement, DistanceMeasurement] | None:
        """Distance annotations for a divider, or None if it does not exist."""
        context = self._snapshot.context
        divider = context.find_divider(divider_id)
        if divider is None or context.shelf_config is None:
            return None
        return calculate_divider_distances(
            divider, context.dividers_for(divider.orientation), context.shelf_config
        )

    def _process(self, event: DividerEvent) -> None:
        previous_state = self._snapshot.state
        result = transition(self._snapshot, event, self._settings)
        if not result.changed:
            logger.debug(f"{event.type} absorbed in state {previous_state.value}")
            return

        self._snapshot = result.snapshot
        logger.debug(
            f"{event.type}: {previous_state.value} -> {self._snapshot.state.value}"
        )
        for effect in result.effects:
            self._dispatch(effect)
        for subscriber in list(self._subscribers):
            subscriber(self._snapshot)

    def _dispatch(self, effect: Effect) -> None:
        match effect:
            case DisableCameraControls():
                if self._camera_controls is not None:
                    self._camera_controls.disable()
            case EnableCameraControls():
                if self._camera_controls is not None:
                    self._camera_controls.enable()
            case DividerCommitted(divider=divider, restored=restored):
                logger.info(
                    f"{'Restored' if restored else 'Added'} {divider.orientation.value} "
                    f"divider {divider.id} at {divider.position:g}"
                )
                for listener in self._listeners:
                    listener.divider_committed(divider, restored)
            case DividerMoved(divider=divider, previous_position=previous):
                logger.info(
                    f"Moved divider {divider.id} from {previous:g} to {divider.position:g}"
                )
                for listener in self._listeners:
                    listener.divider_moved(divider, previous)
            case DividerDeleted(divider=divider):
                logger.info(f"Deleted divider {divider.id}")
                for listener in self._listeners:
                    listener.divider_deleted(divider)
            case DividersCleared(dividers=dividers):
                logger.info(f"Reset cleared {len(dividers)} dividers")
                for listener in self._listeners:
                    listener.dividers_cleared(dividers)
