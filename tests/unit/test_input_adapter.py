"""Unit tests for PointerInputAdapter."""

import pytest

from shelves.application import DividerSession, PointerInputAdapter
from shelves.domain.interaction import InteractionState
from shelves.domain.value_objects import Divider, Orientation, ShelfConfig


@pytest.fixture
def session(imperial_config: ShelfConfig) -> DividerSession:
    session = DividerSession()
    session.initialize(
        imperial_config,
        [Divider(id="a", position=36, orientation=Orientation.HORIZONTAL)],
    )
    return session


@pytest.fixture
def adapter(session: DividerSession) -> PointerInputAdapter:
    return PointerInputAdapter(session)


class TestPointerMove:
    """Tests for hover detection on pointer movement."""

    def test_empty_area_shows_ghost(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.pointer_move(400, 300, position_x=0, position_y=20)

        assert session.state is InteractionState.NORMAL
        assert session.context.ghost_divider is not None

    def test_near_divider_hovers(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.pointer_move(400, 300, position_x=0, position_y=37)

        assert session.state is InteractionState.HOVERING
        assert session.context.hovered_divider.id == "a"
        assert session.context.ghost_divider is None

    def test_leaving_divider_unhovers(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.pointer_move(400, 300, position_x=0, position_y=37)
        adapter.pointer_move(400, 400, position_x=0, position_y=20)

        assert session.state is InteractionState.NORMAL
        assert session.context.hovered_divider is None
        assert session.context.ghost_divider is not None

    def test_over_panel_never_hovers(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.pointer_move(400, 300, position_x=0, position_y=36, is_over_panel=True)

        assert session.state is InteractionState.NORMAL
        assert session.context.ghost_divider is None


class TestClick:
    """Tests for click translation."""

    def test_click_empty_space_adds_divider(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.pointer_move(400, 300, position_x=0, position_y=20)
        adapter.click(position_x=0, position_y=20)

        positions = [d.position for d in session.context.horizontal_dividers]
        assert positions == [36, 20]

    def test_click_divider_selects(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.click(position_x=0, position_y=36.5)

        assert session.state is InteractionState.SELECTED
        assert session.context.selected_divider.id == "a"

    def test_click_away_while_selected_deselects(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.click(position_x=0, position_y=36)
        adapter.click(position_x=0, position_y=10)

        assert session.state is InteractionState.NORMAL
        assert len(session.context.horizontal_dividers) == 1


class TestDragGesture:
    """Tests for press, move and release."""

    def test_drag_from_hover(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.pointer_move(400, 300, position_x=0, position_y=36)
        adapter.pointer_down(400, 300)
        assert session.state is InteractionState.PREPARING_DRAG

        adapter.pointer_move(400, 280, position_x=0, position_y=45)
        assert session.state is InteractionState.DRAGGING
        assert session.context.find_divider("a").position == pytest.approx(45)

        adapter.pointer_up()
        assert session.state is InteractionState.NORMAL

    def test_click_after_drag_is_swallowed(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.pointer_move(400, 300, position_x=0, position_y=36)
        adapter.pointer_down(400, 300)
        adapter.pointer_move(400, 280, position_x=0, position_y=45)
        adapter.pointer_up()

        adapter.click(position_x=0, position_y=20)
        assert len(session.context.horizontal_dividers) == 1

        adapter.pointer_move(400, 500, position_x=0, position_y=20)
        adapter.click(position_x=0, position_y=20)
        assert len(session.context.horizontal_dividers) == 2

    def test_press_on_selected_divider(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.click(position_x=0, position_y=36)
        adapter.pointer_move(400, 300, position_x=0, position_y=36)
        adapter.pointer_down(400, 300)

        assert session.state is InteractionState.PREPARING_DRAG

    def test_press_right_after_click_starts_drag(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        """Clicking clears the hover; the press still lands on the divider."""
        adapter.pointer_move(400, 300, position_x=0, position_y=36)
        adapter.click(position_x=0, position_y=36)
        assert session.state is InteractionState.SELECTED
        assert session.context.hovered_divider is None

        adapter.pointer_down(400, 300)

        assert session.state is InteractionState.PREPARING_DRAG

        adapter.pointer_move(400, 280, position_x=0, position_y=45)
        assert session.state is InteractionState.DRAGGING
        assert session.context.find_divider("a").position == pytest.approx(45)

    def test_press_away_from_selected_divider_is_ignored(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.click(position_x=0, position_y=36)
        adapter.pointer_move(400, 300, position_x=0, position_y=10)
        adapter.pointer_down(400, 300)

        assert session.state is InteractionState.SELECTED

    def test_press_on_empty_space_is_ignored(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.pointer_down(400, 300)
        assert session.state is InteractionState.NORMAL


class TestKeyPress:
    """Tests for keyboard shortcuts."""

    @pytest.mark.parametrize("key", ["Delete", "Backspace"])
    def test_delete_keys_remove_selection(
        self, adapter: PointerInputAdapter, session: DividerSession, key: str
    ) -> None:
        adapter.click(position_x=0, position_y=36)
        adapter.key_press(key)

        assert session.state is InteractionState.NORMAL
        assert session.context.horizontal_dividers == ()

    def test_escape_deselects(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.click(position_x=0, position_y=36)
        adapter.key_press("Escape")

        assert session.state is InteractionState.NORMAL
        assert len(session.context.horizontal_dividers) == 1

    def test_keys_ignored_without_selection(
        self, adapter: PointerInputAdapter, session: DividerSession
    ) -> None:
        adapter.key_press("Delete")
        adapter.key_press("q")

        assert len(session.context.horizontal_dividers) == 1
