"""Command-line entry point: menu, game and game-over screens in a loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import pygame

from redsattack.game import Assets, run_game
from redsattack.gameover import run_game_over
from redsattack.menu import MenuChoice, run_menu
from redsattack.settings import Settings

CAPTION = "Attack of the Reds"


def _positive(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line."""
    defaults = Settings()
    parser = argparse.ArgumentParser(prog="redsattack", description=CAPTION)
    parser.add_argument("--data-dir", type=Path, default=Path("."),
                        help="directory holding images/, sounds/ and fonts/")
    parser.add_argument("--scores", type=Path, default=Path("hs.txt"),
                        help="high score file")
    parser.add_argument("--width", type=_positive, default=defaults.width)
    parser.add_argument("--height", type=_positive, default=defaults.height)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game; return the process exit status."""
    args = parse_args(argv)
    settings = Settings()
    if (args.width, args.height) != (settings.width, settings.height):
        settings = settings.scaled(args.width, args.height)
    pygame.init()
    try:
        try:
            assets = Assets.load(args.data_dir)
        except FileNotFoundError as exc:
            print(f"redsattack: missing game data: {exc}", file=sys.stderr)
            return 1
        screen = pygame.display.set_mode((settings.width, settings.height))
        pygame.display.set_caption(CAPTION)
        while True:
            if run_menu(screen, assets, settings) is MenuChoice.QUIT:
                break
            scores, quit_requested = run_game(screen, assets, settings, args.scores)
            if quit_requested:
                break
            if run_game_over(screen, assets, settings, scores):
                break
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())