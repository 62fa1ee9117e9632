from unittest.mock import MagicMock

from colorpicker.colors import COLOR_LIST, find_color
from colorpicker.screens import ColorPickerScreen, MainScreen
from colorpicker.ui import (
    compose_color_list,
    compose_main_screen,
    compose_message,
    compose_screen,
    visible_window,
)


def _colors_in(img):
    w, h = img.size
    return {color for _, color in img.getcolors(maxcolors=w * h)}


def _picker_layout():
    return ColorPickerScreen(on_color_picked=MagicMock()).render()


def _main_layout(picked):
    return MainScreen(on_open_color_picker=MagicMock(), on_clear_color=MagicMock()).render(picked)


class TestVisibleWindow:
    def test_everything_fits(self):
        assert visible_window(10, 7, 12) == (0, 10)

    def test_window_follows_cursor(self):
        assert visible_window(10, 0, 4) == (0, 4)
        assert visible_window(10, 5, 4) == (3, 7)
        assert visible_window(10, 9, 4) == (6, 10)

    def test_window_always_contains_cursor(self):
        for cursor in range(10):
            start, end = visible_window(10, cursor, 3)
            assert start <= cursor < end
            assert end - start == 3

    def test_zero_capacity_still_shows_cursor_row(self):
        assert visible_window(10, 4, 0) == (4, 5)


class TestColorList:
    def test_size_and_all_swatches_when_tall(self):
        img = compose_color_list(_picker_layout(), 0, full_screen=(480, 1400))
        assert img.size == (480, 1400)
        colors = _colors_in(img)
        for name in ("Red", "Green", "Blue", "Yellow", "Cyan", "Magenta", "Orange"):
            assert find_color(name).rgb in colors

    def test_only_visible_rows_are_drawn(self):
        layout = _picker_layout()
        top = _colors_in(compose_color_list(layout, 0, full_screen=(480, 800)))
        assert COLOR_LIST[0].rgb in top
        assert COLOR_LIST[9].rgb not in top

        bottom = _colors_in(compose_color_list(layout, 9, full_screen=(480, 800)))
        assert COLOR_LIST[9].rgb in bottom
        assert COLOR_LIST[0].rgb not in bottom

    def test_highlighted_row_is_inverted(self):
        w, h = 480, 800
        u = min(w, h) / 360
        pad = int(16 * u)
        row_h = int(48 * u) + 2 * int(8 * u)
        sample = (pad + 4, pad + row_h // 2)

        img = compose_color_list(_picker_layout(), 0, full_screen=(w, h))
        assert img.getpixel(sample) == (0, 0, 0)

        img = compose_color_list(_picker_layout(), 1, full_screen=(w, h))
        assert img.getpixel(sample) == (255, 255, 255)


class TestMainScreenImage:
    def test_empty_state_has_no_swatch(self):
        img = compose_main_screen(_main_layout(None), 0, full_screen=(480, 800))
        assert img.size == (480, 800)
        assert find_color("Orange").rgb not in _colors_in(img)

    def test_picked_state_shows_swatch(self):
        orange = find_color("Orange")
        img = compose_main_screen(_main_layout(orange), 0, full_screen=(480, 800))
        assert (255, 165, 0) in _colors_in(img)

    def test_compose_screen_dispatches_on_route(self):
        blue = find_color("Blue")
        main_img = compose_screen(_main_layout(blue), 1, full_screen=(360, 640))
        list_img = compose_screen(_picker_layout(), 2, full_screen=(360, 640))
        assert main_img.size == list_img.size == (360, 640)
        assert blue.rgb in _colors_in(main_img)
        assert find_color("Green").rgb in _colors_in(list_img)


def test_compose_message():
    img = compose_message("Starting...", full_screen=(400, 300))
    assert img.size == (400, 300)
    # some dark text pixels in the middle band
    assert min(img.convert("L").crop((0, 100, 400, 200)).getdata()) < 128
