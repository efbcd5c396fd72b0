"""Host collaborator protocols for dependency injection.

The interaction session never renders or performs I/O itself. Hosts plug
in the collaborators below to react to what the machine decides.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shelves.domain.interaction import MachineSnapshot
    from shelves.domain.value_objects import Divider


@runtime_checkable
class CameraControlProtocol(Protocol):
    """Viewport camera control that must be suspended while dragging.

    Example:
        ```python
        class OrbitControls:
            def enable(self) -> None:
                self.enabled = True

            def disable(self) -> None:
                self.enabled = False
        ```
    """

    def enable(self) -> None:
        """Resume camera control after a drag ends."""
        ...

    def disable(self) -> None:
        """Suspend camera control when a drag starts."""
        ...


@runtime_checkable
class DividerChangeListener(Protocol):
    """Downstream consumer of committed divider changes.

    The cut-list generator implements this to recompute its outputs
    whenever the committed layout changes.
    """

    def divider_committed(self, divider: Divider, restored: bool) -> None:
        ...

    def divider_moved(self, divider: Divider, previous_position: float) -> None:
        ...

    def divider_deleted(self, divider: Divider) -> None:
        ...

    def dividers_cleared(self, dividers: tuple[Divider, ...]) -> None:
        ...


SnapshotSubscriber = Callable[["MachineSnapshot"], None]
