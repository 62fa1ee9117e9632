"""Display adapter for the colour picker.

Module-level functions (`init`, `blit`, `clear_display`, `close`, ...) drive a
single display instance created by :func:`create_display`.  Two displays are
available:

* :class:`WindowDisplay` shows frames in a tkinter window and turns arrow
  keys, Return and Escape into input events.
* :class:`SimulatedDisplay` keeps the last frame in memory and can save each
  frame as a PNG for inspection.  Used for headless runs and tests.
"""
from pathlib import Path
from typing import Optional, Tuple
import logging

from PIL import Image

from colorpicker.input import SimulatedInput

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Color Picker"
# Window a key release must survive before it counts (filters key autorepeat)
RELEASE_DELAY_MS = 30

# Global display instance
_display = None


class SimulatedDisplay:
    """In-memory display; optionally writes every frame to `out_dir`."""

    def __init__(self, width=480, height=800, out_dir: Optional[str] = None):
        self.width = width
        self.height = height
        self.frame_buf = Image.new('RGB', (width, height), (255, 255, 255))
        self.output_dir = Path(out_dir) if out_dir else None
        if self.output_dir:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        self.frame_count = 0
        self.input = None
        self.closed = False

    def clear(self):
        logger.info("Simulated: Clearing display")
        self.frame_buf = Image.new('RGB', (self.width, self.height), (255, 255, 255))
        self._save_frame("clear")

    def display_image(self, image: Image.Image, label: str = "frame"):
        img = image.copy()
        if img.mode != 'RGB':
            img = img.convert('RGB')
        if img.size != (self.width, self.height):
            img = img.resize((self.width, self.height), Image.LANCZOS)
        self.frame_buf = img
        self._save_frame(label)

    def pump(self):
        pass

    def _save_frame(self, label="frame"):
        if self.output_dir:
            filename = self.output_dir / f"{label}_{self.frame_count:04d}.png"
            self.frame_buf.save(filename)
            logger.debug(f"Saved simulated frame to {filename}")
        self.frame_count += 1

    def close(self):
        self.closed = True
        logger.info("Simulated: Display closed")


class WindowDisplay:
    """tkinter window showing each frame; key presses feed `self.input`.

    Raises ``tkinter.TclError`` when no windowing system is available.
    """

    def __init__(self, width=480, height=800, title: str = WINDOW_TITLE):
        import tkinter as tk
        from PIL import ImageTk

        self._tk = tk
        self._ImageTk = ImageTk
        self.width = width
        self.height = height
        self.frame_buf = Image.new('RGB', (width, height), (255, 255, 255))
        self.input = SimulatedInput()
        self.closed = False
        self._return_down = False
        self._release_job = None

        self.root = tk.Tk()
        self.root.title(title)
        self.root.resizable(False, False)
        self._photo = ImageTk.PhotoImage(self.frame_buf)
        self.label = tk.Label(self.root, image=self._photo, borderwidth=0)
        self.label.pack()

        self.root.bind("<Up>", lambda e: self.input.simulate_rotate(-1))
        self.root.bind("<Down>", lambda e: self.input.simulate_rotate(1))
        self.root.bind("<KeyPress-Return>", self._on_return_press)
        self.root.bind("<KeyRelease-Return>", self._on_return_release)
        self.root.bind("<Escape>", lambda e: self.input.simulate_quit())
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def _on_return_press(self, event=None):
        # Key autorepeat sends release+press pairs while held; treat them as one press
        if self._release_job is not None:
            self.root.after_cancel(self._release_job)
            self._release_job = None
            return
        if self._return_down:
            return
        self._return_down = True
        self.input.simulate_button(True)

    def _on_return_release(self, event=None):
        if not self._return_down:
            return
        if self._release_job is not None:
            self.root.after_cancel(self._release_job)
        self._release_job = self.root.after(RELEASE_DELAY_MS, self._finish_return_release)

    def _finish_return_release(self):
        self._release_job = None
        self._return_down = False
        self.input.simulate_button(False)

    def _on_close(self):
        self.input.simulate_quit()
        self.close()

    def clear(self):
        self.display_image(Image.new('RGB', (self.width, self.height), (255, 255, 255)), "clear")

    def display_image(self, image: Image.Image, label: str = "frame"):
        if self.closed:
            return
        self.frame_buf = image.copy()
        self._photo = self._ImageTk.PhotoImage(self.frame_buf)
        self.label.configure(image=self._photo)
        self.pump()

    def pump(self):
        """Process pending window events without blocking."""
        if self.closed:
            return
        try:
            self.root.update()
        except self._tk.TclError:
            logger.info("Window closed")
            self.closed = True

    def close(self):
        if self.closed:
            return
        self.closed = True
        try:
            self.root.destroy()
        except self._tk.TclError:
            pass
        logger.info("Window display closed")


def create_display(width=480, height=800, force_simulation=False, out_dir: Optional[str] = None):
    """Create the best available display instance.

    Args:
        width: Display width in pixels
        height: Display height in pixels
        force_simulation: Skip the window and use the in-memory display
        out_dir: Directory for PNG frames written by the simulated display

    Returns:
        Display instance
    """
    if force_simulation:
        logger.info("Creating simulated display")
        return SimulatedDisplay(width, height, out_dir=out_dir)

    try:
        logger.info(f"Creating window display ({width}x{height})")
        return WindowDisplay(width, height)
    except Exception as e:
        logger.warning(f"Window display failed: {e} - falling back to simulated display")
    return SimulatedDisplay(width, height, out_dir=out_dir)


def init(width=480, height=800, force_simulation=False, out_dir: Optional[str] = None):
    """Initialize the display adapter.

    Returns:
        True if initialization successful
    """
    global _display
    try:
        # Release any existing display before creating a new one
        if _display:
            close()
        _display = create_display(width=width, height=height, force_simulation=force_simulation, out_dir=out_dir)
        logger.info(f"Display initialized ({type(_display).__name__}, {width}x{height})")
        return True
    except Exception as e:
        logger.error(f"Display initialization failed: {e}")
        _display = None
        return False


def blit(full_bitmap: Image.Image, file_label: str = "frame"):
    """Send a full-screen bitmap to the display."""
    if _display:
        try:
            _display.display_image(full_bitmap, file_label)
            logger.debug(f"Display update completed: {file_label}")
        except Exception as e:
            logger.error(f"Display update failed: {e}")
    else:
        logger.warning("No display available - frame dropped")


def pump():
    """Let the display process pending window events."""
    if _display:
        _display.pump()


def clear_display():
    """Clear the display to white."""
    if _display:
        try:
            _display.clear()
            logger.info("Display cleared")
            return True
        except Exception as e:
            logger.error(f"Display clear failed: {e}")
            return False
    return True


def close():
    """Close the display and release it."""
    global _display
    if _display:
        try:
            _display.close()
        except Exception as e:
            logger.error(f"Display close failed: {e}")
        finally:
            _display = None


def is_open() -> bool:
    return _display is not None and not _display.closed


def window_input():
    """Return the input source bound to the display window, or None."""
    return getattr(_display, 'input', None) if _display else None


def last_frame() -> Optional[Image.Image]:
    """Return the frame currently shown, or None if no display."""
    return _display.frame_buf if _display else None


def get_display_size() -> Optional[Tuple[int, int]]:
    """Return (width, height) of the initialized display, or None if no display."""
    if _display:
        return (int(_display.width), int(_display.height))
    return None
