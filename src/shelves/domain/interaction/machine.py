"""Divider interaction state machine.

The machine is a single pure reducer::

    transition(snapshot, event, settings) -> TransitionResult

All context mutation happens here; the placement helpers it calls
(ghost detection, constraint solving) only read the context they are given.
Events that do not apply to the current state are absorbed: the snapshot
comes back unchanged, with no effects and ``changed=False``.

Transition table (state, event -> state):

    normal          MOUSE_MOVE            normal           recompute ghost
    normal          CLICK_EMPTY_SPACE     normal           commit addable ghost
    normal          HOVER_DIVIDER         hovering
    normal          CLICK_DIVIDER         selected
    hovering        HOVER_DIVIDER         hovering         track new divider
    hovering        CLICK_DIVIDER         selected
    hovering        MOUSE_DOWN            preparingDrag    select hovered divider
    hovering/normal UNHOVER               normal
    selected        HOVER_DIVIDER/UNHOVER selected         hover alongside selection
    selected        CLICK_DIVIDER         selected         switch selection
    selected        CLICK_ELSEWHERE       normal
    selected        CLICK_DELETE          normal           remove selected divider
    selected        MOUSE_DOWN            preparingDrag    record drag anchor
    preparingDrag   MOUSE_MOVE            dragging         once past the threshold
    preparingDrag   MOUSE_UP              selected         plain click
    dragging        MOUSE_MOVE            dragging         constrained relocation
    dragging        MOUSE_UP              per policy       commit drag
    any             RESET                 normal           clear everything
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from ..constraint_solver import calculate_constrained_position, is_legal_position
from ..ghost_detector import detect_ghost_divider
from ..value_objects import (
    Divider,
    DragAnchor,
    Orientation,
    PointerPosition,
    ShelfConfig,
)
from .context import InteractionContext, InteractionState, MachineSnapshot
from .effects import (
    DisableCameraControls,
    DividerCommitted,
    DividerDeleted,
    DividerMoved,
    DividersCleared,
    Effect,
    EnableCameraControls,
)
from .events import (
    AddExistingDivider,
    ClickDelete,
    ClickDivider,
    ClickElsewhere,
    ClickEmptySpace,
    DividerEvent,
    HoverDivider,
    MouseDown,
    MouseMove,
    MouseUp,
    Reset,
    Unhover,
    UpdateShelfConfig,
)

__all__ = [
    "DEFAULT_DRAG_THRESHOLD_PX",
    "DragReleasePolicy",
    "MachineSettings",
    "TransitionResult",
    "transition",
]

DEFAULT_DRAG_THRESHOLD_PX = 5.0


class DragReleasePolicy(str, Enum):
    """Where the machine goes when a drag is released.

    - DESELECT: back to normal with the selection cleared.
    - KEEP_SELECTED: back to selected, with the dragged divider still pinned.
    """

    DESELECT = "deselect"
    KEEP_SELECTED = "keep_selected"


@dataclass(frozen=True)
class MachineSettings:
    """Tunable behavior of the interaction machine.

    Attributes:
        drag_threshold_px: Pixel distance the pointer must travel after a
            pointer-down before a drag starts.
        release_policy: State to return to when a drag is released.
        id_prefix: Prefix of the ids given to dividers committed from a
            ghost. The numeric suffix comes from the context counter.
    """

    drag_threshold_px: float = DEFAULT_DRAG_THRESHOLD_PX
    release_policy: DragReleasePolicy = DragReleasePolicy.DESELECT
    id_prefix: str = "divider"

    def __post_init__(self) -> None:
        if self.drag_threshold_px < 0:
            raise ValueError("Drag threshold cannot be negative")


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of processing one event.

    Attributes:
        snapshot: State and context after the event.
        effects: Host side effects to carry out, in order.
        changed: False when the event was absorbed as a no-op.
    """

    snapshot: MachineSnapshot
    effects: tuple[Effect, ...] = ()
    changed: bool = True


_Handler = Callable[
    [InteractionContext, DividerEvent, MachineSettings],
    "tuple[InteractionState, InteractionContext, tuple[Effect, ...]] | None",
]


def transition(
    snapshot: MachineSnapshot,
    event: DividerEvent,
    settings: MachineSettings | None = None,
) -> TransitionResult:
    """Process one event.

    Args:
        snapshot: Current state and context.
        event: Event to apply.
        settings: Machine settings; defaults are used when omitted.

    Returns:
        The resulting snapshot, the effects the host should run, and whether
        anything changed.
    """
    settings = settings or MachineSettings()
    handler = _TRANSITIONS[snapshot.state].get(type(event))
    if handler is None:
        return TransitionResult(snapshot=snapshot, changed=False)

    outcome = handler(snapshot.context, event, settings)
    if outcome is None:
        return TransitionResult(snapshot=snapshot, changed=False)

    state, context, effects = outcome
    new_snapshot = MachineSnapshot(state=state, context=context)
    if not effects and new_snapshot == snapshot:
        return TransitionResult(snapshot=snapshot, changed=False)
    return TransitionResult(snapshot=new_snapshot, effects=effects)


# ---------------------------------------------------------------------------
# Shared handlers
# ---------------------------------------------------------------------------


def _pointer_from(event: MouseMove) -> PointerPosition:
    return PointerPosition(
        x=event.x,
        y=event.y,
        position_x=event.position_x,
        position_y=event.position_y,
        is_over_panel=event.is_over_panel,
    )


def _keep_state(state: InteractionState) -> _Handler:
    """Handler that records the pointer and leaves everything else alone."""

    def handler(context, event, settings):
        return state, replace(context, pointer_position=_pointer_from(event)), ()

    return handler


def _reset(context, event, settings):
    effects: list[Effect] = []
    if context.dragging:
        effects.append(EnableCameraControls())
    if context.all_dividers:
        effects.append(DividersCleared(dividers=context.all_dividers))
    return (
        InteractionState.NORMAL,
        InteractionContext(
            shelf_config=context.shelf_config,
            next_divider_number=context.next_divider_number,
        ),
        tuple(effects),
    )


def _update_shelf_config(state: InteractionState) -> _Handler:
    def handler(context, event, settings):
        config = event.config
        updated = replace(context, shelf_config=config, ghost_divider=None)
        for orientation in Orientation:
            for divider in _refit(context.dividers_for(orientation), config):
                if divider != context.find_divider(divider.id):
                    updated = updated.with_divider_replaced(divider)
        return state, updated, ()

    return handler


def _add_existing(state: InteractionState) -> _Handler:
    def handler(context, event, settings):
        divider = event.divider
        if context.find_divider(divider.id) is not None:
            return None
        config = context.shelf_config
        if config is not None:
            lower, upper = config.placement_bounds(divider.orientation)
            divider = divider.moved_to(max(lower, min(upper, divider.position)))
        collection = context.dividers_for(divider.orientation) + (divider,)
        return (
            state,
            context.with_dividers(divider.orientation, collection),
            (DividerCommitted(divider=divider, restored=True),),
        )

    return handler


def _select(context, event, settings):
    divider = context.find_divider(event.divider.id)
    if divider is None:
        return None
    return (
        InteractionState.SELECTED,
        replace(
            context, selected_divider=divider, hovered_divider=None, ghost_divider=None
        ),
        (),
    )


def _hover(state: InteractionState) -> _Handler:
    def handler(context, event, settings):
        divider = context.find_divider(event.divider.id)
        if divider is None:
            return None
        return state, replace(context, hovered_divider=divider, ghost_divider=None), ()

    return handler


def _unhover(state: InteractionState) -> _Handler:
    def handler(context, event, settings):
        return state, replace(context, hovered_divider=None), ()

    return handler


def _prepare_drag(context, event, settings):
    divider = context.selected_divider
    if divider is None:
        return None
    anchor = DragAnchor(x=event.x, y=event.y, divider_position=divider.position)
    return InteractionState.PREPARING_DRAG, replace(context, drag_anchor=anchor), ()


def _relocate_selected(
    context: InteractionContext, pointer: PointerPosition
) -> InteractionContext:
    divider = context.selected_divider
    config = context.shelf_config
    if divider is None or config is None:
        return context

    peers = context.dividers_for(divider.orientation)
    position = calculate_constrained_position(
        pointer.position_along(divider.orientation),
        divider.orientation,
        divider.id,
        peers,
        config,
    )
    if position == divider.position or not is_legal_position(
        position, divider.orientation, divider.id, peers, config
    ):
        return context
    return context.with_divider_replaced(divider.moved_to(position))


def _refit(dividers: tuple[Divider, ...], config: ShelfConfig) -> list[Divider]:
    """Fit one orientation's dividers into new walls.

    Dividers inside the new bounds are placed first and keep their positions
    where they stay legal. Dividers cut off by a wall follow, the one furthest
    out first, so a stack pushed against the wall keeps its order.
    """
    if not dividers:
        return []
    orientation = dividers[0].orientation
    lower, upper = config.placement_bounds(orientation)

    def placement_order(divider: Divider) -> tuple[int, float]:
        if divider.position > upper:
            return 2, -divider.position
        if divider.position < lower:
            return 1, divider.position
        return 0, divider.position

    placed: list[Divider] = []
    for divider in sorted(dividers, key=placement_order):
        position = max(lower, min(upper, divider.position))
        if not is_legal_position(position, orientation, divider.id, placed, config):
            position = calculate_constrained_position(
                position, orientation, divider.id, placed, config
            )
        placed.append(divider.moved_to(position))
    return placed


# ---------------------------------------------------------------------------
# normal
# ---------------------------------------------------------------------------


def _track_pointer_with_ghost(context, event, settings):
    pointer = _pointer_from(event)
    ghost = None
    if context.selected_divider is None and not pointer.is_over_panel:
        ghost = detect_ghost_divider(
            pointer,
            context.horizontal_dividers,
            context.vertical_dividers,
            context.shelf_config,
        )
    return (
        InteractionState.NORMAL,
        replace(context, pointer_position=pointer, ghost_divider=ghost),
        (),
    )


def _commit_ghost(context, event, settings):
    ghost = context.ghost_divider
    config = context.shelf_config
    if ghost is None or not ghost.addable or config is None:
        return None

    number = context.next_divider_number
    divider_id = f"{settings.id_prefix}-{number}"
    while context.find_divider(divider_id) is not None:
        number += 1
        divider_id = f"{settings.id_prefix}-{number}"

    peers = context.dividers_for(ghost.orientation)
    position = calculate_constrained_position(
        ghost.position, ghost.orientation, divider_id, peers, config
    )
    if not is_legal_position(position, ghost.orientation, divider_id, peers, config):
        return None

    divider = Divider(id=divider_id, position=position, orientation=ghost.orientation)
    updated = context.with_dividers(ghost.orientation, peers + (divider,))
    return (
        InteractionState.NORMAL,
        replace(updated, ghost_divider=None, next_divider_number=number + 1),
        (DividerCommitted(divider=divider),),
    )


# ---------------------------------------------------------------------------
# hovering
# ---------------------------------------------------------------------------


def _select_hovered_and_prepare(context, event, settings):
    hovered = context.hovered_divider
    if hovered is None:
        return None
    selected = replace(context, selected_divider=hovered, hovered_divider=None)
    return _prepare_drag(selected, event, settings)


# ---------------------------------------------------------------------------
# selected
# ---------------------------------------------------------------------------


def _clear_selection(context, event, settings):
    return (
        InteractionState.NORMAL,
        replace(context, selected_divider=None, hovered_divider=None),
        (),
    )


def _delete_selected(context, event, settings):
    divider = context.selected_divider
    if divider is None:
        return None
    remaining = tuple(
        d for d in context.dividers_for(divider.orientation) if d.id != divider.id
    )
    updated = context.with_dividers(divider.orientation, remaining)
    return (
        InteractionState.NORMAL,
        replace(updated, selected_divider=None, hovered_divider=None),
        (DividerDeleted(divider=divider),),
    )


# ---------------------------------------------------------------------------
# preparingDrag
# ---------------------------------------------------------------------------


def _maybe_start_drag(context, event, settings):
    pointer = _pointer_from(event)
    updated = replace(context, pointer_position=pointer)
    anchor = context.drag_anchor
    if anchor is None or anchor.distance_to(event.x, event.y) <= settings.drag_threshold_px:
        return InteractionState.PREPARING_DRAG, updated, ()

    updated = _relocate_selected(replace(updated, dragging=True), pointer)
    return InteractionState.DRAGGING, updated, (DisableCameraControls(),)


def _cancel_prepared_drag(context, event, settings):
    return InteractionState.SELECTED, replace(context, drag_anchor=None), ()


# ---------------------------------------------------------------------------
# dragging
# ---------------------------------------------------------------------------


def _drag(context, event, settings):
    pointer = _pointer_from(event)
    updated = _relocate_selected(replace(context, pointer_position=pointer), pointer)
    return InteractionState.DRAGGING, updated, ()


def _release_drag(context, event, settings):
    effects: list[Effect] = [EnableCameraControls()]
    divider = context.selected_divider
    anchor = context.drag_anchor
    if (
        divider is not None
        and anchor is not None
        and divider.position != anchor.divider_position
    ):
        effects.append(
            DividerMoved(divider=divider, previous_position=anchor.divider_position)
        )

    released = replace(context, dragging=False, drag_anchor=None)
    if settings.release_policy is DragReleasePolicy.KEEP_SELECTED:
        return InteractionState.SELECTED, released, tuple(effects)
    return (
        InteractionState.NORMAL,
        replace(released, selected_divider=None, hovered_divider=None),
        tuple(effects),
    )


_S = InteractionState

_TRANSITIONS: dict[InteractionState, dict[type, _Handler]] = {
    _S.NORMAL: {
        MouseMove: _track_pointer_with_ghost,
        ClickEmptySpace: _commit_ghost,
        ClickDivider: _select,
        HoverDivider: _hover(_S.HOVERING),
        Unhover: _unhover(_S.NORMAL),
        UpdateShelfConfig: _update_shelf_config(_S.NORMAL),
        AddExistingDivider: _add_existing(_S.NORMAL),
        Reset: _reset,
    },
    _S.HOVERING: {
        MouseMove: _keep_state(_S.HOVERING),
        ClickDivider: _select,
        HoverDivider: _hover(_S.HOVERING),
        Unhover: _unhover(_S.NORMAL),
        MouseDown: _select_hovered_and_prepare,
        UpdateShelfConfig: _update_shelf_config(_S.HOVERING),
        AddExistingDivider: _add_existing(_S.HOVERING),
        Reset: _reset,
    },
    _S.SELECTED: {
        MouseMove: _keep_state(_S.SELECTED),
        ClickDivider: _select,
        HoverDivider: _hover(_S.SELECTED),
        Unhover: _unhover(_S.SELECTED),
        MouseDown: _prepare_drag,
        ClickDelete: _delete_selected,
        ClickElsewhere: _clear_selection,
        UpdateShelfConfig: _update_shelf_config(_S.SELECTED),
        AddExistingDivider: _add_existing(_S.SELECTED),
        Reset: _reset,
    },
    _S.PREPARING_DRAG: {
        MouseMove: _maybe_start_drag,
        MouseUp: _cancel_prepared_drag,
        Reset: _reset,
    },
    _S.DRAGGING: {
        MouseMove: _drag,
        MouseUp: _release_drag,
        Reset: _reset,
    },
}
