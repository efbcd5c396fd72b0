"""Translation of raw pointer and keyboard input into machine events."""

from __future__ import annotations

from shelves.domain.interaction import (
    ClickDelete,
    ClickDivider,
    ClickElsewhere,
    ClickEmptySpace,
    HoverDivider,
    InteractionState,
    MachineSnapshot,
    MouseDown,
    MouseMove,
    MouseUp,
    Unhover,
)
from shelves.domain.proximity import find_divider_near
from shelves.domain.value_objects import Divider

from .session import DividerSession

__all__ = ["DELETE_KEYS", "DESELECT_KEYS", "PointerInputAdapter"]

DELETE_KEYS = frozenset({"Delete", "Backspace"})
DESELECT_KEYS = frozenset({"Escape"})


class PointerInputAdapter:
    """Converts pointer samples and key presses into session events.

    Each pointer sample carries screen pixels (``x``, ``y``) and the
    matching shelf-interior coordinates (``position_x``, ``position_y``).
    Divider hit-testing uses the unit's ``near_distance`` around the
    interior coordinates.

    A click that arrives right after a drag release is the tail of that
    drag, not a new click, and is swallowed.
    """

    def __init__(self, session: DividerSession) -> None:
        self._session = session
        self._just_finished_dragging = False

    def pointer_move(
        self,
        x: float,
        y: float,
        position_x: float,
        position_y: float,
        is_over_panel: bool = False,
    ) -> MachineSnapshot:
        """Report pointer movement, updating hover before position."""
        divider = None if is_over_panel else self._divider_at(position_x, position_y)
        if divider is not None:
            self._session.send(HoverDivider(divider=divider))
        else:
            self._session.send(Unhover())

        return self._session.send(
            MouseMove(
                x=x,
                y=y,
                position_y=position_y,
                position_x=position_x,
                is_over_panel=is_over_panel,
            )
        )

    def click(self, position_x: float, position_y: float) -> MachineSnapshot:
        """Report a click at an interior position."""
        if self._just_finished_dragging:
            self._just_finished_dragging = False
            return self._session.snapshot

        divider = self._divider_at(position_x, position_y)
        if divider is not None:
            return self._session.send(ClickDivider(divider=divider))
        if self._session.state is InteractionState.SELECTED:
            return self._session.send(ClickElsewhere())
        return self._session.send(
            ClickEmptySpace(position_y=position_y, position_x=position_x)
        )

    def pointer_down(self, x: float, y: float) -> MachineSnapshot:
        """Report a pointer press.

        Only a press on the hovered divider, or on the selected divider, can
        lead to a drag; any other press is ignored.
        """
        state = self._session.state
        if state is InteractionState.HOVERING or (
            state is InteractionState.SELECTED and self._pointer_on_selected()
        ):
            return self._session.send(MouseDown(x=x, y=y))
        return self._session.snapshot

    def pointer_up(self) -> MachineSnapshot:
        if self._session.state is InteractionState.DRAGGING:
            self._just_finished_dragging = True
        return self._session.send(MouseUp())

    def key_press(self, key: str) -> MachineSnapshot:
        """Keyboard shortcuts: Delete/Backspace delete, Escape deselects."""
        if self._session.state is not InteractionState.SELECTED:
            return self._session.snapshot
        if key in DELETE_KEYS:
            return self._session.send(ClickDelete())
        if key in DESELECT_KEYS:
            return self._session.send(ClickElsewhere())
        return self._session.snapshot

    def _divider_at(self, position_x: float, position_y: float) -> Divider | None:
        context = self._session.context
        if context.shelf_config is None:
            return None
        return find_divider_near(
            position_x, position_y, context.all_dividers, context.shelf_config
        )

    def _pointer_on_selected(self) -> bool:
        # Selecting clears the hover, so test the last pointer sample directly.
        context = self._session.context
        selected = context.selected_divider
        if selected is None:
            return False
        hovered = context.hovered_divider
        pointer = context.pointer_position
        if pointer is None:
            return hovered is not None and hovered.id == selected.id
        divider = self._divider_at(pointer.position_x, pointer.position_y)
        return divider is not None and divider.id == selected.id
