# src/connectfour/game/state.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from connectfour.core.board import Board
from connectfour.core.piece import Piece
from connectfour.types import Side


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Side = "X"
    last_piece: Optional[Piece] = None
    winner: Optional[Side] = None
    is_over: bool = False
    move_count: int = 0
    last_status: str = "Player X starts."
