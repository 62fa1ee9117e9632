"""Unit tests for the AppNavigation state machine.

Tests cover:
- initial state and the on_display observer
- open_picker / on_color_chosen / clear_selection transitions
- cursor movement and button activation on both screens
- end-to-end pick / clear scenarios
"""
import pytest

from colorpicker.colors import COLOR_LIST, find_color
from colorpicker.navigation import AppNavigation, Route


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_nav(**kwargs):
    """Build an AppNavigation and capture its display calls."""
    display_calls = []

    def on_display(route, layout, cursor):
        display_calls.append((route, layout, cursor))

    nav = AppNavigation(on_display=on_display, **kwargs)
    return nav, display_calls


def _click(nav):
    nav.handle_button(True)
    nav.handle_button(False)


# ---------------------------------------------------------------------------
# Initial state
# ---------------------------------------------------------------------------

class TestInit:
    def test_starts_on_main_with_nothing_picked(self):
        nav, _ = _make_nav()
        assert nav.route is Route.MAIN
        assert nav.picked_color is None
        assert nav.cursor == 0

    def test_initial_display_called(self):
        _, calls = _make_nav()
        assert len(calls) == 1
        route, layout, cursor = calls[0]
        assert route is Route.MAIN
        assert layout.headline == "No color selected"
        assert cursor == 0

    def test_route_names(self):
        assert Route.MAIN.value == "main"
        assert Route.PICKER.value == "picker"

    def test_display_callback_errors_are_contained(self):
        def broken(route, layout, cursor):
            raise RuntimeError("boom")

        nav = AppNavigation(on_display=broken)
        nav.open_picker()
        assert nav.route is Route.PICKER


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

class TestTransitions:
    @pytest.mark.parametrize("item", COLOR_LIST, ids=lambda c: c.name)
    def test_selecting_any_row_stores_it_and_returns_to_main(self, item):
        nav, _ = _make_nav()
        nav.open_picker()
        nav.picker_screen.select_row(item)
        assert nav.picked_color is item
        assert nav.route is Route.MAIN

    def test_open_picker_from_empty_state_keeps_selection(self):
        nav, _ = _make_nav()
        nav.open_picker()
        assert nav.route is Route.PICKER
        assert nav.picked_color is None

    def test_open_picker_from_picked_state_keeps_selection(self):
        nav, _ = _make_nav()
        green = find_color("Green")
        nav.on_color_chosen(green)
        nav.open_picker()
        assert nav.route is Route.PICKER
        assert nav.picked_color is green

    def test_picker_opens_on_the_picked_row(self):
        nav, calls = _make_nav()
        nav.on_color_chosen(find_color("Cyan"))
        nav.open_picker()
        assert nav.cursor == 4
        assert calls[-1][2] == 4

    def test_clear_selection_resets_to_none(self):
        nav, _ = _make_nav()
        nav.on_color_chosen(find_color("Red"))
        nav.clear_selection()
        assert nav.picked_color is None
        assert nav.route is Route.MAIN

    def test_clear_selection_is_idempotent(self):
        nav, _ = _make_nav()
        nav.on_color_chosen(find_color("Red"))
        nav.clear_selection()
        once = (nav.route, nav.picked_color, nav.cursor)
        nav.clear_selection()
        assert (nav.route, nav.picked_color, nav.cursor) == once

    def test_clear_selection_when_already_empty(self):
        nav, _ = _make_nav()
        nav.clear_selection()
        assert nav.picked_color is None

    def test_every_transition_redraws(self):
        nav, calls = _make_nav()
        nav.open_picker()
        nav.on_color_chosen(find_color("Blue"))
        nav.clear_selection()
        assert [c[0] for c in calls] == [Route.MAIN, Route.PICKER, Route.MAIN, Route.MAIN]


# ---------------------------------------------------------------------------
# Cursor and buttons
# ---------------------------------------------------------------------------

class TestInput:
    def test_click_on_main_opens_picker(self):
        nav, _ = _make_nav()
        _click(nav)
        assert nav.route is Route.PICKER

    def test_rotate_then_click_picks_that_row(self):
        nav, _ = _make_nav()
        _click(nav)
        nav.handle_rotate(+1)
        nav.handle_rotate(+1)
        _click(nav)
        assert nav.route is Route.MAIN
        assert nav.picked_color.name == "Blue"

    def test_rotate_wraps_in_picker(self):
        nav, _ = _make_nav()
        nav.open_picker()
        nav.handle_rotate(-1)
        assert nav.cursor == len(COLOR_LIST) - 1
        _click(nav)
        assert nav.picked_color.name == "Orange"

    def test_rotate_clamps_without_wrap(self):
        nav, _ = _make_nav(wrap=False)
        nav.open_picker()
        nav.handle_rotate(-1)
        assert nav.cursor == 0
        for _ in range(20):
            nav.handle_rotate(+1)
        assert nav.cursor == len(COLOR_LIST) - 1

    def test_rotate_on_empty_main_does_not_redraw(self):
        nav, calls = _make_nav()
        before = len(calls)
        nav.handle_rotate(+1)  # one button only: wraps onto itself
        assert nav.cursor == 0
        assert len(calls) == before

    def test_clear_button_on_picked_main(self):
        nav, _ = _make_nav()
        nav.on_color_chosen(find_color("Yellow"))
        nav.handle_rotate(+1)  # "Clear Selection"
        _click(nav)
        assert nav.picked_color is None
        assert nav.route is Route.MAIN
        assert nav.cursor == 0

    def test_pick_another_button_on_picked_main(self):
        nav, _ = _make_nav()
        nav.on_color_chosen(find_color("Yellow"))
        _click(nav)
        assert nav.route is Route.PICKER
        assert nav.picked_color.name == "Yellow"

    def test_release_without_press_is_ignored(self):
        nav, calls = _make_nav()
        before = len(calls)
        nav.handle_button(False)
        assert nav.route is Route.MAIN
        assert len(calls) == before

    def test_press_alone_does_not_activate(self):
        nav, _ = _make_nav()
        nav.handle_button(True)
        assert nav.route is Route.MAIN


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_pick_blue_then_clear(self):
        nav, _ = _make_nav()
        assert (nav.route, nav.picked_color) == (Route.MAIN, None)
        nav.open_picker()
        assert nav.route is Route.PICKER
        nav.on_color_chosen(find_color("Blue"))
        assert nav.route is Route.MAIN
        assert nav.picked_color.name == "Blue"
        nav.clear_selection()
        assert nav.picked_color is None

    def test_pick_orange_yields_custom_rgb(self):
        nav, _ = _make_nav()
        nav.open_picker()
        orange = nav.picker_screen.colors[-1]
        nav.picker_screen.select_row(orange)
        assert nav.picked_color.name == "Orange"
        assert nav.picked_color.rgb == (255, 165, 0)

    def test_main_renders_empty_branch_iff_nothing_picked(self):
        nav, _ = _make_nav()
        assert nav.current_layout().headline == "No color selected"
        nav.on_color_chosen(find_color("Magenta"))
        assert nav.current_layout().headline == "Picked Color: Magenta"
        nav.clear_selection()
        assert nav.current_layout().headline == "No color selected"
