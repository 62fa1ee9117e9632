"""Screen views for the colour picker.

Each screen turns its inputs into a :class:`ScreenLayout`: an optional
headline, an optional swatch and an ordered tuple of selectable entries.
Layouts carry the callbacks wired in by the navigation controller, so a screen
never holds a reference to the other screen or to the shared state.

Main screen
-----------
Pure function of the picked colour::

    None        -> "No color selected"      [Pick a Color]
    ColorItem   -> "Picked Color: <name>"   [Pick Another Color] [Clear Selection]

Picker screen
-------------
One row per entry of :data:`colorpicker.colors.COLOR_LIST`, in table order.
Selecting a row reports the item through ``on_color_picked``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from colorpicker.colors import COLOR_LIST, RGBA, ColorItem

NO_COLOR_TEXT = "No color selected"
PICK_COLOR_LABEL = "Pick a Color"
PICK_ANOTHER_LABEL = "Pick Another Color"
CLEAR_SELECTION_LABEL = "Clear Selection"
PICKED_COLOR_FORMAT = "Picked Color: {name}"


@dataclass(frozen=True)
class Entry:
    """A selectable element: a button on the main screen or a row on the picker."""

    label: str
    on_select: Callable[[], None]
    swatch: Optional[RGBA] = None


@dataclass(frozen=True)
class ScreenLayout:
    route: str
    entries: Tuple[Entry, ...]
    headline: Optional[str] = None
    swatch: Optional[RGBA] = None

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(e.label for e in self.entries)


class MainScreen:
    """Shows the current selection and the actions available for it."""

    route = "main"

    def __init__(
        self,
        on_open_color_picker: Callable[[], None],
        on_clear_color: Callable[[], None],
    ) -> None:
        self._on_open_color_picker = on_open_color_picker
        self._on_clear_color = on_clear_color

    def render(self, picked_color: Optional[ColorItem]) -> ScreenLayout:
        if picked_color is not None:
            return ScreenLayout(
                route=self.route,
                headline=PICKED_COLOR_FORMAT.format(name=picked_color.name),
                swatch=picked_color.color,
                entries=(
                    Entry(PICK_ANOTHER_LABEL, self._on_open_color_picker),
                    Entry(CLEAR_SELECTION_LABEL, self._on_clear_color),
                ),
            )
        return ScreenLayout(
            route=self.route,
            headline=NO_COLOR_TEXT,
            entries=(Entry(PICK_COLOR_LABEL, self._on_open_color_picker),),
        )


class ColorPickerScreen:
    """Lists the fixed colours; a selection is dispatched upward and nothing is kept."""

    route = "picker"

    def __init__(
        self,
        on_color_picked: Callable[[ColorItem], None],
        colors: Sequence[ColorItem] = COLOR_LIST,
    ) -> None:
        self._on_color_picked = on_color_picked
        self.colors = tuple(colors)

    def render(self) -> ScreenLayout:
        return ScreenLayout(
            route=self.route,
            entries=tuple(self._row(item) for item in self.colors),
        )

    def select_row(self, item: ColorItem) -> None:
        self._on_color_picked(item)

    def index_of(self, item: Optional[ColorItem]) -> int:
        """Row index of `item`, or 0 when it is None or not listed."""
        if item is None:
            return 0
        try:
            return self.colors.index(item)
        except ValueError:
            return 0

    def _row(self, item: ColorItem) -> Entry:
        return Entry(item.name, lambda: self.select_row(item), swatch=item.color)
