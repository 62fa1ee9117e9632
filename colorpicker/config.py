"""Default configuration and settings loader for the colour picker.

This module exposes a small `load_settings` helper that reads an optional JSON
settings file, merges it over the defaults and validates the result.  The
colour table itself is fixed and is not configurable.
"""

from pathlib import Path
import copy
import json
from typing import Dict, Any

DEFAULT_DISPLAY = {
    "width": 480,
    "height": 800,
}

DEFAULT_SETTINGS = {
    "display": DEFAULT_DISPLAY,
    "poll_hz": 60,
    "wrap": True,
    "out_dir": None,
}


def _positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_settings(data: Dict[str, Any]) -> Dict[str, Any]:
    """Raise ValueError if `data` is not a valid settings dict; return it otherwise."""
    unknown = set(data) - set(DEFAULT_SETTINGS)
    if unknown:
        raise ValueError(f"Unknown settings keys: {sorted(unknown)}")

    display = data["display"]
    if not isinstance(display, dict):
        raise ValueError("'display' must be an object with 'width' and 'height'")
    for k in ("width", "height"):
        if not _positive_int(display.get(k)):
            raise ValueError(f"display.{k} must be a positive integer")
    if not _positive_int(data["poll_hz"]):
        raise ValueError("poll_hz must be a positive integer")
    if not isinstance(data["wrap"], bool):
        raise ValueError("wrap must be true or false")
    if data["out_dir"] is not None and not isinstance(data["out_dir"], str):
        raise ValueError("out_dir must be a string or null")
    return data


def load_settings(path: str = None) -> Dict[str, Any]:
    """Load settings JSON merged over DEFAULT_SETTINGS. If `path` is None, return the defaults.

    Raises FileNotFoundError for a missing file and ValueError for malformed content.
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if not path:
        return settings

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Settings file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Settings file {p} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {p} must contain a JSON object")

    for key, value in data.items():
        if key == "display" and isinstance(value, dict):
            settings["display"].update(value)
        else:
            settings[key] = value

    return validate_settings(settings)


if __name__ == "__main__":
    # Quick smoke test when run directly
    import sys
    path = sys.argv[1] if len(sys.argv) > 1 else None
    print("Loaded settings:", load_settings(path))
