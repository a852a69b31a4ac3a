"""Desktop entrypoint.

Parses the command line, configures logging and opens the game window.
"""

from __future__ import annotations

import argparse
import logging

import config

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Top-down tank battle.")
    parser.add_argument(
        "--difficulty",
        choices=config.DIFFICULTIES,
        default=None,
        help="skip the menu and start on this level",
    )
    parser.add_argument("--width", type=int, default=config.SCREEN_W, help="window width in pixels")
    parser.add_argument("--height", type=int, default=config.SCREEN_H, help="window height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="seed for terrain, spawns and effects")
    parser.add_argument(
        "--touch",
        action="store_true",
        default=config.TOUCH_CONTROLS,
        help="show the on-screen joystick and fire button",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="logging level (default: %(default)s, or $TANKS_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Start the game."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=str(args.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.width <= 0 or args.height <= 0:
        raise SystemExit(f"Window size must be positive, got {args.width}x{args.height}")

    import pyglet
    from game import Game

    try:
        _ = Game(width=args.width, height=args.height, difficulty=args.difficulty, seed=args.seed, touch=args.touch)
        pyglet.app.run()
    except KeyboardInterrupt:
        pass
    except Exception:
        LOG.exception("Fatal error")
        raise


if __name__ == "__main__":
    main()
