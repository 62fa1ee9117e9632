"""Fixed colour table for the picker.

The ten entries are built once at import time and shared by every screen.
Colours are stored as RGBA tuples so they can be handed straight to Pillow.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ColorItem:
    name: str
    color: RGBA

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.color[:3]

    @property
    def hex(self) -> str:
        r, g, b = self.rgb
        return f"#{r:02X}{g:02X}{b:02X}"


# Display order is fixed; Orange is the only non-primary custom value.
COLOR_LIST: Tuple[ColorItem, ...] = (
    ColorItem("Red", (255, 0, 0, 255)),
    ColorItem("Green", (0, 255, 0, 255)),
    ColorItem("Blue", (0, 0, 255, 255)),
    ColorItem("Yellow", (255, 255, 0, 255)),
    ColorItem("Cyan", (0, 255, 255, 255)),
    ColorItem("Magenta", (255, 0, 255, 255)),
    ColorItem("Black", (0, 0, 0, 255)),
    ColorItem("White", (255, 255, 255, 255)),
    ColorItem("Gray", (136, 136, 136, 255)),
    ColorItem("Orange", (255, 165, 0, 255)),
)


def find_color(name: str) -> Optional[ColorItem]:
    """Return the table entry called `name` (case-insensitive), or None."""
    wanted = name.strip().lower()
    for item in COLOR_LIST:
        if item.name.lower() == wanted:
            return item
    return None
