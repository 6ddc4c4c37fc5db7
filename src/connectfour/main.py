# src/connectfour/main.py

from __future__ import annotations

import argparse
import logging

from connectfour import config
from connectfour.core.board import Board
from connectfour.errors import InvalidBoardDimensionsException
from connectfour.game.controller import run_game
from connectfour.game.session import GameSession


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Connect-4 in the terminal (two human players).")
    ap.add_argument("--width", type=int, default=config.WIDTH, help="Number of columns")
    ap.add_argument("--height", type=int, default=config.HEIGHT, help="Number of rows")
    ap.add_argument("--connect", type=int, default=config.CONNECT_N, help="Run length needed to win")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("--verbose", action="store_true", help="Log debug output")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    try:
        board = Board(args.width, args.height, args.connect)
    except InvalidBoardDimensionsException as e:
        logging.error("%s", e)
        return 2

    try:
        run_game(GameSession(board))
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
