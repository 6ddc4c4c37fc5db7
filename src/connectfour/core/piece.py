# src/connectfour/core/piece.py

from __future__ import annotations
from dataclasses import dataclass

from connectfour.types import Side


@dataclass(frozen=True, slots=True)
class Piece:
    side: Side
    x: int
    y: int
