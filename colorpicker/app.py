"""Application loop for the colour picker.

Polls the input source, dispatches events to the navigation controller and
renders a new frame whenever the controller reports a change.  Everything
runs on the calling thread.
"""
import time
import logging
from typing import Dict, Optional, Tuple

from colorpicker.config import load_settings
from colorpicker.drivers.display import init as display_init, blit, pump, is_open, window_input
from colorpicker.drivers.display import get_display_size
from colorpicker.input import KeyboardInput
from colorpicker.navigation import AppNavigation, Route
from colorpicker.screens import ScreenLayout
from colorpicker.ui import compose_screen, compose_message

logger = logging.getLogger(__name__)


class ColorPickerApp:
    def __init__(self, input_source=None, settings: Dict = None, force_simulation=False):
        self.settings = settings or load_settings()
        display = self.settings["display"]
        self.display_size: Tuple[int, int] = (display["width"], display["height"])
        self.interval = 1.0 / self.settings["poll_hz"]
        self.running = False
        self.frames_drawn = 0
        self.last_frame_tag: Optional[str] = None

        display_success = display_init(
            width=self.display_size[0],
            height=self.display_size[1],
            force_simulation=force_simulation,
            out_dir=self.settings["out_dir"],
        )
        self._display_ok = display_success
        if not display_success:
            logger.warning("Display initialization failed - frames will be dropped")
        else:
            real_size = get_display_size()
            if real_size:
                self.display_size = real_size
            blit(compose_message("Starting...", full_screen=self.display_size), "starting")

        # Prefer the window's own key bindings over reading stdin
        if input_source is None:
            input_source = window_input() or KeyboardInput()
        self.input = input_source

        self.nav = AppNavigation(on_display=self._on_display, wrap=self.settings["wrap"])

    def _on_display(self, route: Route, layout: ScreenLayout, cursor: int):
        tag = f"{route.value}_cursor{cursor}"
        img = compose_screen(layout, cursor, full_screen=self.display_size)
        blit(img, tag)
        self.frames_drawn += 1
        self.last_frame_tag = tag

    def dispatch(self, event) -> bool:
        """Apply one input event. Returns False for a quit event."""
        kind, value = event
        if kind == "rotate":
            self.nav.handle_rotate(int(value))
        elif kind == "button":
            self.nav.handle_button(bool(value))
        elif kind == "quit":
            logger.info("Quit requested")
            return False
        else:
            logger.warning(f"Ignoring unknown input event: {event!r}")
        return True

    def loop_once(self) -> bool:
        """Drain pending input. Returns False once the app should stop."""
        pump()
        while True:
            event = self.input.get_event()
            if event is None:
                break
            if not self.dispatch(event):
                return False
        # Only a display that was opened and has since closed stops the loop
        if self._display_ok and not is_open():
            logger.info("Display closed - stopping")
            return False
        return True

    def run(self, run_seconds: float = None):
        self.running = True
        start = time.time()
        try:
            while self.running:
                if not self.loop_once():
                    break
                time.sleep(self.interval)
                if run_seconds and (time.time() - start) >= run_seconds:
                    break
        finally:
            self.running = False
            self.input.cleanup()
