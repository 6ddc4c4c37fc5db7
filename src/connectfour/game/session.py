# src/connectfour/game/session.py

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from connectfour.core.board import Board
from connectfour.core.piece import Piece
from connectfour.core.rules import is_draw
from connectfour.core.wincheck import check_for_win, winning_check
from connectfour.errors import (
    BoardFullException,
    OutOfGameBoardBoundsException,
    WrongPlayerMoveException,
)
from connectfour.game.state import GameState
from connectfour.types import SIDES, Move, Side, other

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    piece: Piece
    won: bool = False
    draw: bool = False
    check_name: Optional[str] = None


class GameSession:
    """
    Owns one board for one game. Every move is validated here before the
    win checks see it, so the checks never get an anchor off the board.
    """

    def __init__(self, board: Optional[Board] = None, first: Side = "X") -> None:
        if first not in SIDES:
            raise ValueError(f"First player must be one of {SIDES}, got {first!r}.")
        self.state = GameState(
            board=board if board is not None else Board(),
            current=first,
            last_status=f"Player {first} starts.",
        )

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current(self) -> Side:
        return self.state.current

    @property
    def winner(self) -> Optional[Side]:
        return self.state.winner

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    def validate(self, col: Move, side: Side) -> None:
        st = self.state
        if st.is_over:
            raise WrongPlayerMoveException("Game is already over.")
        if side != st.current:
            raise WrongPlayerMoveException(f"Player {side} moved out of turn; {st.current} to play.")
        c = int(col)
        if c < 0 or c >= st.board.width:
            raise OutOfGameBoardBoundsException(f"Column must be between 1 and {st.board.width}.")
        if st.board.is_full():
            raise BoardFullException()
        if st.board.column_full(Move(c)):
            raise ValueError("Column is full.")

    def play(self, col: Move, side: Side) -> MoveResult:
        self.validate(col, side)

        st = self.state
        piece = st.board.drop(col, side)
        st.last_piece = piece
        st.move_count += 1
        log.debug("move %d: %s -> (%d, %d)", st.move_count, side, piece.x, piece.y)

        check = winning_check(st.board, piece)
        if check is not None:
            st.winner = side
            st.is_over = True
            log.info("player %s wins (%s) after %d moves", side, check.name, st.move_count)
            return MoveResult(piece, won=True, check_name=check.name)

        if is_draw(st.board, piece):
            st.is_over = True
            log.info("draw after %d moves", st.move_count)
            return MoveResult(piece, draw=True)

        st.current = other(side)
        return MoveResult(piece)

    def check_anchor(self, piece: Piece) -> bool:
        if not self.board.in_bounds(piece.x, piece.y):
            raise OutOfGameBoardBoundsException(
                f"Anchor ({piece.x}, {piece.y}) is outside the board."
            )
        return check_for_win(self.board, piece)
