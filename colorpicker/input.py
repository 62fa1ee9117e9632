"""Input sources for the colour picker.

Every source exposes the same small API, ``get_event()`` and ``cleanup()``.
Events are ``(kind, value)`` tuples:

* ``('rotate', +1)``  : move the highlight to the next entry
* ``('rotate', -1)``  : move the highlight to the previous entry
* ``('button', True)``  : select pressed
* ``('button', False)`` : select released
* ``('quit', None)``    : stop the application

Sources
-------
:class:`SimulatedInput`
    Queue filled programmatically; used by tests and by the window display's
    key bindings.
:class:`ScriptedInput`
    A :class:`SimulatedInput` pre-loaded from a script such as
    ``"down, down, press, quit"`` (see :func:`parse_script`).
:class:`KeyboardInput`
    Reads commands line by line from a text stream (stdin by default) on a
    background thread.  The thread only enqueues events; all state changes
    happen on the application loop.
"""
from __future__ import annotations

import logging
import queue
import re
import sys
import threading
from typing import List, Optional, TextIO, Tuple

logger = logging.getLogger(__name__)

Event = Tuple[str, object]

# Command words accepted by scripts and the keyboard reader
_COMMANDS = {
    "up": "up",
    "k": "up",
    "down": "down",
    "j": "down",
    "press": "press",
    "enter": "press",
    "click": "press",
    "select": "press",
    "quit": "quit",
    "q": "quit",
}


def _command_events(command: str) -> List[Event]:
    if command == "up":
        return [("rotate", -1)]
    if command == "down":
        return [("rotate", 1)]
    if command == "press":
        return [("button", True), ("button", False)]
    return [("quit", None)]


def parse_script(text: str) -> List[Event]:
    """Turn a comma/whitespace separated command script into events.

    Raises ``ValueError`` for an unknown command word.
    """
    events: List[Event] = []
    for token in re.split(r"[,\s]+", text.strip()):
        if not token:
            continue
        command = _COMMANDS.get(token.lower())
        if command is None:
            raise ValueError(f"Unknown input command: {token!r}")
        events.extend(_command_events(command))
    return events


class SimulatedInput:
    """Software input source for development and testing.

    Example::

        inp = SimulatedInput()
        inp.simulate_rotate(+3)   # three steps down the list
        inp.simulate_click()      # press + release
    """

    def __init__(self) -> None:
        self._events: queue.Queue[Event] = queue.Queue()

    def simulate_rotate(self, delta: int) -> None:
        """Inject *delta* steps; each unit emits one ``('rotate', ±1)`` event."""
        sign = 1 if delta >= 0 else -1
        for _ in range(abs(delta)):
            self._events.put(("rotate", sign))

    def simulate_button(self, pressed: bool) -> None:
        self._events.put(("button", pressed))

    def simulate_click(self) -> None:
        self.simulate_button(True)
        self.simulate_button(False)

    def simulate_quit(self) -> None:
        self._events.put(("quit", None))

    def get_event(self) -> Optional[Event]:
        """Return the next queued event, or ``None`` if the queue is empty."""
        try:
            return self._events.get_nowait()
        except queue.Empty:
            return None

    def cleanup(self) -> None:
        """No-op; present for API compatibility with :class:`KeyboardInput`."""


class ScriptedInput(SimulatedInput):
    def __init__(self, script: str) -> None:
        super().__init__()
        events = parse_script(script)
        # A finished script stops the app, like end of input on the keyboard
        if not events or events[-1] != ("quit", None):
            events.append(("quit", None))
        for event in events:
            self._events.put(event)


class KeyboardInput:
    """Line-oriented keyboard input read on a background thread.

    Recognised lines: ``k``/``up``, ``j``/``down``, an empty line or
    ``enter`` to select, ``q``/``quit`` to stop.  End of input emits quit.
    Unrecognised lines are logged and ignored.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stdin
        self._events: queue.Queue[Event] = queue.Queue()
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._read_loop,
            name="colorpicker-keyboard",
            daemon=True,
        )
        self._thread.start()

    def _read_loop(self) -> None:
        for line in self._stream:
            if self._stop.is_set():
                return
            word = line.strip().lower() or "enter"
            command = _COMMANDS.get(word)
            if command is None:
                logger.warning(f"Ignoring unknown key command: {word!r}")
                continue
            for event in _command_events(command):
                self._events.put(event)
        self._events.put(("quit", None))

    def get_event(self) -> Optional[Event]:
        try:
            return self._events.get_nowait()
        except queue.Empty:
            return None

    def cleanup(self) -> None:
        """Stop accepting lines.  A read blocked on the stream is left to the daemon thread."""
        self._stop.set()
