# src/connectfour/ui/colors.py

from __future__ import annotations
from connectfour import config
from connectfour.types import Side

RESET = "\033[0m"
TITLE = "\033[1m"
MUTED = "\033[2m"
STATUS = "\033[36m"
EMPTY = "\033[90m"
WIN_CELL = "\033[7m"

SIDE_COLORS = {"X": "\033[31m", "O": "\033[33m"}


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def side_mark(side: Side) -> str:
    return c(side, SIDE_COLORS[side])


def winning_mark(mark: str) -> str:
    # lower-case marks stand in for reverse video on plain terminals
    if not config.USE_COLOR:
        return mark.lower()
    return f"{WIN_CELL}{mark}{RESET}"
