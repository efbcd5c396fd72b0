"""Interaction states and the context aggregate owned by the machine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from ..value_objects import (
    Divider,
    DragAnchor,
    GhostDivider,
    Orientation,
    PointerPosition,
    ShelfConfig,
)


class InteractionState(str, Enum):
    """Top-level states of the divider interaction machine.

    - NORMAL: nothing hovered or selected; the ghost preview may be live.
    - HOVERING: the pointer is over an existing divider; ghost suppressed.
    - SELECTED: one divider is pinned; another may still be hovered.
    - PREPARING_DRAG: pointer pressed on the selected divider, waiting to
      see whether it moves past the drag threshold.
    - DRAGGING: pointer movement relocates the selected divider.
    """

    NORMAL = "normal"
    HOVERING = "hovering"
    SELECTED = "selected"
    PREPARING_DRAG = "preparingDrag"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class InteractionContext:
    """Everything the machine knows about the current editing session.

    Instances are immutable; transitions produce new contexts. Divider
    collections keep insertion order, not position order.
    ``next_divider_number`` only ever grows, so a generated id is never
    handed out twice, even after the divider holding it is deleted.
    """

    horizontal_dividers: tuple[Divider, ...] = ()
    vertical_dividers: tuple[Divider, ...] = ()
    selected_divider: Divider | None = None
    hovered_divider: Divider | None = None
    ghost_divider: GhostDivider | None = None
    dragging: bool = False
    drag_anchor: DragAnchor | None = None
    pointer_position: PointerPosition | None = None
    shelf_config: ShelfConfig | None = None
    next_divider_number: int = 1

    def dividers_for(self, orientation: Orientation) -> tuple[Divider, ...]:
        if orientation is Orientation.HORIZONTAL:
            return self.horizontal_dividers
        return self.vertical_dividers

    @property
    def all_dividers(self) -> tuple[Divider, ...]:
        return self.horizontal_dividers + self.vertical_dividers

    def find_divider(self, divider_id: str) -> Divider | None:
        """Look up the live copy of a divider by id."""
        for divider in self.all_dividers:
            if divider.id == divider_id:
                return divider
        return None

    def with_dividers(
        self, orientation: Orientation, dividers: tuple[Divider, ...]
    ) -> "InteractionContext":
        """Copy with one orientation's collection replaced."""
        if orientation is Orientation.HORIZONTAL:
            return replace(self, horizontal_dividers=dividers)
        return replace(self, vertical_dividers=dividers)

    def with_divider_replaced(self, divider: Divider) -> "InteractionContext":
        """Copy with the divider sharing ``divider.id`` swapped for ``divider``.

        Selection and hover references to the same id follow the new value.
        """
        updated = self.with_dividers(
            divider.orientation,
            tuple(
                divider if d.id == divider.id else d
                for d in self.dividers_for(divider.orientation)
            ),
        )
        return updated.with_refreshed_references()

    def with_refreshed_references(self) -> "InteractionContext":
        """Point selection and hover at the live dividers with the same ids.

        References to dividers that no longer exist are cleared.
        """
        selected = self.selected_divider
        hovered = self.hovered_divider
        return replace(
            self,
            selected_divider=self.find_divider(selected.id) if selected else None,
            hovered_divider=self.find_divider(hovered.id) if hovered else None,
        )


@dataclass(frozen=True)
class MachineSnapshot:
    """Read-only view of the machine published after every transition."""

    state: InteractionState = InteractionState.NORMAL
    context: InteractionContext = field(default_factory=InteractionContext)

    @classmethod
    def initial(cls, config: ShelfConfig | None = None) -> "MachineSnapshot":
        return cls(context=InteractionContext(shelf_config=config))
