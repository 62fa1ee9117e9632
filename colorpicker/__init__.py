"""Colour picker package.

A two-screen application: the main screen shows the picked colour and the
picker screen lists the ten fixed colours.  Screens are rendered with Pillow
and shown through `colorpicker.drivers.display`.
"""

__all__ = [
    "colors",
    "config",
    "navigation",
    "screens",
    "ui",
    "input",
    "app",
]
