"""Main entry point for the rainbow scene.

This module provides command-line options to run the scene:
- Window mode (default): interactive pygame window
- Headless mode: render frames offscreen, optionally saving a screenshot
"""

import argparse
import logging
import sys

from scene.config.app_config import AppConfig, DisplayConfig
from scene.constants import FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH
from scene.exceptions import ConfigurationError
from scene.state import Weather

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Animated rainbow scene",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the interactive window (default)
  python main.py

  # Start at dusk in a storm
  python main.py --time 18.5 --weather stormy

  # Render 300 frames offscreen and save the result
  python main.py --headless --max-frames 300 --screenshot scene.png --seed 42
        """,
    )

    parser.add_argument(
        "--headless", action="store_true", help="Render offscreen without opening a window"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=600,
        help="Frames to render in headless mode (default: 600)",
    )
    parser.add_argument(
        "--screenshot",
        type=str,
        default=None,
        metavar="PATH",
        help="Save the final headless frame as a PNG",
    )
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=FRAME_RATE, help="Target frame rate")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for a reproducible scene (optional)"
    )
    parser.add_argument(
        "--weather",
        choices=[w.value for w in Weather],
        default=None,
        help="Starting weather (default: sunny)",
    )
    parser.add_argument(
        "--time", type=float, default=None, dest="time_of_day", help="Starting hour, 0-24"
    )
    parser.add_argument(
        "--no-debug", action="store_true", help="Hide the debug readout at startup"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        headless=args.headless,
        max_frames=args.max_frames,
        seed=args.seed,
        screenshot=args.screenshot,
        weather=args.weather,
        time_of_day=args.time_of_day,
        show_debug=not args.no_debug,
        display=DisplayConfig(
            screen_width=args.width,
            screen_height=args.height,
            frame_rate=args.fps,
        ),
    )


def main(argv=None) -> int:
    """Parse command-line arguments and run the appropriate mode."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = config_from_args(args).validate()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    logger.info("=" * config.display.separator_width)
    logger.info("RAINBOW SCENE")
    logger.info("=" * config.display.separator_width)

    if config.headless:
        from rainbow_scene import run_headless

        logger.info(
            "Headless: %d frames at %dx%d",
            config.max_frames,
            config.display.screen_width,
            config.display.screen_height,
        )
        run_headless(config)
    else:
        from rainbow_scene import main as run_window

        run_window(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
