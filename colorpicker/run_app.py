"""CLI runner for the colour picker app.

Opens a window when a windowing system is available, otherwise renders
in-memory (optionally saving frames with --out-dir) and reads commands from
stdin.  --script feeds a fixed command sequence instead, e.g.
``--script "down,down,press,quit"``.
"""
import argparse
import sys
import logging

from colorpicker.config import load_settings
from colorpicker.app import ColorPickerApp
from colorpicker.input import ScriptedInput
from colorpicker.drivers.display import close

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.info("Debug logging enabled")


def main(argv=None):
    p = argparse.ArgumentParser(description="Run the color picker application")
    p.add_argument("--config", help="Path to a settings JSON file")
    p.add_argument("--display-w", type=int, help="Display width in pixels (overrides settings)")
    p.add_argument("--display-h", type=int, help="Display height in pixels (overrides settings)")
    p.add_argument("--out-dir", help="Save every rendered frame as a PNG in this directory")
    p.add_argument("--script", help="Comma separated commands to run: up, down, press, quit")
    p.add_argument("--simulate", action="store_true", help="Render in-memory instead of opening a window")
    p.add_argument("--run-seconds", type=float, default=None, help="Stop after this many seconds")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args(argv)

    _configure_logging(args.verbose)

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load settings: {e}")
        return 1

    if args.display_w:
        settings["display"]["width"] = args.display_w
    if args.display_h:
        settings["display"]["height"] = args.display_h
    if args.out_dir:
        settings["out_dir"] = args.out_dir

    input_source = None
    if args.script:
        try:
            input_source = ScriptedInput(args.script)
        except ValueError as e:
            logger.error(f"Invalid --script: {e}")
            return 1

    logger.info(f"Starting color picker ({settings['display']['width']}x{settings['display']['height']})")

    try:
        app = ColorPickerApp(
            input_source=input_source,
            settings=settings,
            force_simulation=args.simulate or bool(args.script),
        )
        logger.info("Color picker initialized")
    except Exception as e:
        logger.error(f"Failed to initialize color picker: {e}")
        return 1

    try:
        app.run(run_seconds=args.run_seconds)
        picked = app.nav.picked_color
        logger.info(f"Exiting with selection: {picked.name if picked else 'none'}")
        return 0
    except KeyboardInterrupt:
        logger.info('Stopping color picker...')
        return 0
    finally:
        close()


if __name__ == "__main__":
    sys.exit(main())
