"""Command that opens the window and plays the snake game."""

from __future__ import annotations

import argparse
import sys

from .core import CoreInitError, SpinachCore
from .game import Game

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
WINDOW_TITLE = "Example Game for Spinach"


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="snake2d",
        description="Play snake. Arrows steer, F5 restarts, F12 saves a "
        "screenshot, Escape quits.",
    )
    parser.parse_args(argv)

    game = Game()
    try:
        core = SpinachCore(WINDOW_WIDTH, WINDOW_HEIGHT)
    except CoreInitError as exc:
        print(f"initialization failed with error {exc.code}")
        return 1
    with core:
        core.set_window_title(WINDOW_TITLE)
        game.init(core)
        core.update_and_render = game.update_and_render
        core.input_handler = game.handle_input
        core.main_loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())