"""Command-line entry point that starts the game."""

from __future__ import annotations

import argparse
from typing import Sequence

from shotter.game import Game


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game and run it until the window is closed."""
    parser = argparse.ArgumentParser(prog="shotter", description="A vertical space shooter.")
    parser.add_argument("--fps", type=_positive_int, default=60, help="frames per second")
    parser.add_argument(
        "--save",
        default="assets/save.dat",
        help="save file; assets are read from its directory",
    )
    args = parser.parse_args(argv)

    game = Game(fps=args.fps, save_path=args.save)
    try:
        game.init()
        game.run()
    finally:
        game.clean()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())