"""Navigation state machine for the two-screen colour picker.

:class:`AppNavigation` owns the only piece of shared state, the picked colour,
and the active route.  The screens never talk to each other; they call back
into the controller, which mutates state and asks for a redraw.

Routes
------
``main``
    Shows the selection (or the empty prompt).  Entries are buttons.
``picker``
    Shows the ten fixed colours.  Entries are rows.

Transitions
-----------
* ``open_picker()``           main   -> picker
* ``on_color_chosen(item)``   picker -> main, stores ``item``
* ``clear_selection()``       main   -> main, forgets the selection

No other transitions exist; in particular the picker has no back action.

Input
-----
A cursor highlights one entry of the active screen.  :meth:`handle_rotate`
moves it and :meth:`handle_button` activates the highlighted entry on
release.  The cursor restarts at 0 on every route change, except that the
picker opens on the row of the currently picked colour.

Display updates
---------------
``on_display(route, layout, cursor)`` is called once on construction and
again after every change of route, selection or cursor.  It defaults to a
no-op.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from colorpicker.colors import ColorItem
from colorpicker.screens import ColorPickerScreen, MainScreen, ScreenLayout

logger = logging.getLogger(__name__)


class Route(Enum):
    MAIN = "main"
    PICKER = "picker"


DisplayCallback = Callable[[Route, ScreenLayout, int], None]


class AppNavigation:
    """Route and selection owner for the colour picker.

    Parameters
    ----------
    on_display:
        Callback ``(route, layout, cursor) -> None`` invoked whenever the
        visible screen should be redrawn.
    wrap:
        When ``True`` (default), moving past either end of a list wraps
        around.  Set to ``False`` for clamped behaviour.
    """

    def __init__(self, on_display: Optional[DisplayCallback] = None, wrap: bool = True) -> None:
        self.wrap = wrap
        self._on_display = on_display or (lambda route, layout, cursor: None)

        self._route: Route = Route.MAIN
        self._picked_color: Optional[ColorItem] = None
        self._cursor: int = 0
        self._pressed: bool = False

        self.main_screen = MainScreen(
            on_open_color_picker=self.open_picker,
            on_clear_color=self.clear_selection,
        )
        self.picker_screen = ColorPickerScreen(on_color_picked=self.on_color_chosen)

        logger.info("AppNavigation initialized (route=%s)", self._route.value)
        self._refresh_display()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def open_picker(self) -> None:
        self._route = Route.PICKER
        self._cursor = self.picker_screen.index_of(self._picked_color)
        logger.info("Open picker (cursor=%d)", self._cursor)
        self._refresh_display()

    def on_color_chosen(self, item: ColorItem) -> None:
        self._picked_color = item
        self._route = Route.MAIN
        self._cursor = 0
        logger.info("Color chosen: %s (%s)", item.name, item.hex)
        self._refresh_display()

    def clear_selection(self) -> None:
        self._picked_color = None
        self._cursor = 0
        logger.info("Selection cleared")
        self._refresh_display()

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def handle_rotate(self, direction: int) -> None:
        """Move the cursor by ``direction`` (+1 next entry, -1 previous entry)."""
        n = len(self.current_layout().entries)
        if n == 0:
            return

        new_cursor = self._cursor + direction
        if self.wrap:
            new_cursor = new_cursor % n
        else:
            new_cursor = max(0, min(n - 1, new_cursor))

        if new_cursor != self._cursor:
            self._cursor = new_cursor
            logger.debug("Cursor -> %d on %s", self._cursor, self._route.value)
            self._refresh_display()

    def handle_button(self, pressed: bool) -> None:
        """Record a press; activate the highlighted entry on the matching release."""
        if pressed:
            self._pressed = True
            return

        if not self._pressed:
            return  # release with no matching press
        self._pressed = False

        entries = self.current_layout().entries
        if not 0 <= self._cursor < len(entries):
            return
        entry = entries[self._cursor]
        logger.debug("Activate %r on %s", entry.label, self._route.value)
        entry.on_select()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def route(self) -> Route:
        return self._route

    @property
    def picked_color(self) -> Optional[ColorItem]:
        return self._picked_color

    @property
    def cursor(self) -> int:
        return self._cursor

    def current_layout(self) -> ScreenLayout:
        if self._route is Route.PICKER:
            return self.picker_screen.render()
        return self.main_screen.render(self._picked_color)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _refresh_display(self) -> None:
        layout = self.current_layout()
        try:
            self._on_display(self._route, layout, self._cursor)
        except Exception:
            logger.exception("on_display callback raised an exception")
