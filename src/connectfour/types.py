# src/connectfour/types.py

from __future__ import annotations
from typing import TYPE_CHECKING, Literal, Optional, NewType, Tuple

if TYPE_CHECKING:
    from connectfour.core.piece import Piece

Side = Literal["X", "O"]
SIDES: Tuple[Side, ...] = ("X", "O")
Cell = Optional["Piece"]
Coord = Tuple[int, int]  # (x, y), y == 0 is the bottom row
Move = NewType("Move", int)   # column index 0..width-1


def other(side: Side) -> Side:
    return "O" if side == "X" else "X"
