"""UI composition for the colour picker screens.

Uses Pillow to compose full-screen RGB images from a
:class:`colorpicker.screens.ScreenLayout`.  The highlighted entry is
inverted.  Sizes are expressed in layout units scaled from a 360-unit wide
reference screen so the same layout works on any display size.
"""
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from colorpicker.screens import ScreenLayout

# default display size for composition (portrait, phone-like)
DISPLAY_W = 480
DISPLAY_H = 800

FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

# Base font size relative to the shorter display dimension
DEFAULT_BASE_FONT_RATIO = 0.045
REFERENCE_WIDTH = 360

BACKGROUND = (255, 255, 255)
FOREGROUND = (0, 0, 0)
SWATCH_BORDER = (0, 0, 0, 128)  # black at 50% alpha


def _choose_font_path():
    for p in FONT_PATHS:
        if Path(p).exists():
            return p
    return None


def _load_font(size: int):
    font_path = _choose_font_path()
    if font_path:
        try:
            return ImageFont.truetype(font_path, size)
        except OSError:
            pass
    return ImageFont.load_default()


def _text_size(draw: ImageDraw.ImageDraw, text: str, font) -> Tuple[int, int]:
    bbox = draw.textbbox((0, 0), text, font=font)
    return bbox[2] - bbox[0], bbox[3] - bbox[1]


def _unit(full_screen: Tuple[int, int]) -> float:
    return min(full_screen) / REFERENCE_WIDTH


def _base_font_size(full_screen: Tuple[int, int]) -> int:
    return max(12, int(min(full_screen) * DEFAULT_BASE_FONT_RATIO))


def visible_window(count: int, cursor: int, capacity: int) -> Tuple[int, int]:
    """Return the ``(start, end)`` slice of rows to draw.

    Only as many rows as fit (`capacity`) are composed.  The window is centred
    on the cursor where possible and never runs past either end of the list.
    """
    capacity = max(1, capacity)
    if count <= capacity:
        return 0, count
    cursor = max(0, min(count - 1, cursor))
    start = max(0, cursor - capacity // 2)
    start = min(start, count - capacity)
    return start, start + capacity


def compose_color_list(layout: ScreenLayout, cursor: int, full_screen: Tuple[int, int] = (DISPLAY_W, DISPLAY_H)) -> Image.Image:
    """Compose the picker screen: one row per colour with a swatch and its name."""
    w, h = full_screen
    img = Image.new("RGB", (w, h), color=BACKGROUND)
    draw = ImageDraw.Draw(img, "RGBA")

    u = _unit(full_screen)
    pad = int(16 * u)
    gap = int(8 * u)
    swatch = int(48 * u)
    row_h = swatch + 2 * int(8 * u)
    border = max(1, int(2 * u))
    radius = max(2, int(12 * u))
    font = _load_font(_base_font_size(full_screen))

    capacity = (h - 2 * pad + gap) // (row_h + gap)
    start, end = visible_window(len(layout.entries), cursor, capacity)

    y = pad
    for i in range(start, end):
        entry = layout.entries[i]
        y0, y1 = y, y + row_h
        text_fill = FOREGROUND
        # selected -> draw black row and white text
        if i == cursor:
            draw.rectangle((pad, y0, w - pad, y1), fill=FOREGROUND)
            text_fill = BACKGROUND

        sx = pad + int(16 * u)
        sy = y0 + (row_h - swatch) // 2
        if entry.swatch is not None:
            draw.rounded_rectangle((sx, sy, sx + swatch, sy + swatch), radius=radius, fill=entry.swatch)
            draw.rounded_rectangle((sx, sy, sx + swatch, sy + swatch), radius=radius, outline=SWATCH_BORDER, width=border)

        _, th = _text_size(draw, entry.label, font)
        tx = sx + swatch + int(16 * u)
        draw.text((tx, y0 + (row_h - th) // 2), entry.label, font=font, fill=text_fill)
        y = y1 + gap

    return img


def compose_main_screen(layout: ScreenLayout, cursor: int, full_screen: Tuple[int, int] = (DISPLAY_W, DISPLAY_H)) -> Image.Image:
    """Compose the main screen as a centred column.

    Headline, then the picked colour swatch (when there is one), then one
    button per entry.  The highlighted button is drawn filled.
    """
    w, h = full_screen
    img = Image.new("RGB", (w, h), color=BACKGROUND)
    draw = ImageDraw.Draw(img, "RGBA")

    u = _unit(full_screen)
    spacer = int(16 * u)
    swatch = int(100 * u)
    border = max(1, int(2 * u))
    base_font_size = _base_font_size(full_screen)
    title_font = _load_font(int(base_font_size * 1.4))
    button_font = _load_font(base_font_size)
    btn_pad_x = int(24 * u)
    btn_h = base_font_size + 2 * int(10 * u)

    headline = layout.headline or ""
    title_w, title_h = _text_size(draw, headline, title_font)

    # Total column height so the content can be centred vertically
    total = title_h
    if layout.swatch is not None:
        total += spacer + swatch
    total += len(layout.entries) * (spacer + btn_h)
    y = max(0, (h - total) // 2)

    draw.text(((w - title_w) // 2, y), headline, font=title_font, fill=FOREGROUND)
    y += title_h

    if layout.swatch is not None:
        y += spacer
        x0 = (w - swatch) // 2
        box = (x0, y, x0 + swatch, y + swatch)
        draw.rounded_rectangle(box, radius=max(2, int(16 * u)), fill=layout.swatch)
        draw.rounded_rectangle(box, radius=max(2, int(16 * u)), outline=SWATCH_BORDER, width=border)
        y += swatch

    for i, entry in enumerate(layout.entries):
        y += spacer
        tw, th = _text_size(draw, entry.label, button_font)
        bw = tw + 2 * btn_pad_x
        x0 = (w - bw) // 2
        box = (x0, y, x0 + bw, y + btn_h)
        radius = btn_h // 2
        if i == cursor:
            draw.rounded_rectangle(box, radius=radius, fill=FOREGROUND)
            text_fill = BACKGROUND
        else:
            draw.rounded_rectangle(box, radius=radius, outline=FOREGROUND, width=border)
            text_fill = FOREGROUND
        draw.text((x0 + btn_pad_x, y + (btn_h - th) // 2), entry.label, font=button_font, fill=text_fill)
        y += btn_h

    return img


def compose_screen(layout: ScreenLayout, cursor: int, full_screen: Tuple[int, int] = (DISPLAY_W, DISPLAY_H)) -> Image.Image:
    if layout.route == "picker":
        return compose_color_list(layout, cursor, full_screen=full_screen)
    return compose_main_screen(layout, cursor, full_screen=full_screen)


def compose_message(message: str, full_screen: Tuple[int, int] = (DISPLAY_W, DISPLAY_H)) -> Image.Image:
    """Compose a large centred message (used for the startup screen)."""
    w, h = full_screen
    img = Image.new("RGB", (w, h), color=BACKGROUND)
    draw = ImageDraw.Draw(img)

    font = _load_font(max(24, int(min(w, h) * 0.1)))
    tw, th = _text_size(draw, message, font)
    draw.text(((w - tw) // 2, (h - th) // 2), message, font=font, fill=FOREGROUND)
    return img


if __name__ == "__main__":
    # quick visual smoke test
    from colorpicker.navigation import AppNavigation

    nav = AppNavigation()
    nav.open_picker()
    img = compose_screen(nav.current_layout(), 3)
    img.save("/tmp/colorpicker_list.png")
    print("Wrote /tmp/colorpicker_list.png")
