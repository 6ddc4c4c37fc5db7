# src/connectfour/core/rules.py

from __future__ import annotations
from typing import Optional, List, Tuple

from connectfour.core.board import Board
from connectfour.core.piece import Piece
from connectfour.core.wincheck import DIAGONALS, winning_check
from connectfour.types import Coord, Side


def _run_from(board: Board, piece: Piece, dx: int, dy: int) -> List[Coord]:
    line: List[Coord] = []
    x, y = piece.x, piece.y
    while board.in_bounds(x, y):
        cell = board.cells[x][y]
        if cell is None or cell.side != piece.side:
            break
        line.append((x, y))
        x, y = x + dx, y + dy
    return line


def winning_line(board: Board, piece: Piece) -> List[Coord]:
    """
    Cells to highlight for a winning anchor: the longest same-side run
    leaving the anchor in a single direction.
    """
    n = board.connections_required
    directions = [(1, 0), (-1, 0), (0, 1), (0, -1), *DIAGONALS]
    best: List[Coord] = []
    for dx, dy in directions:
        line = _run_from(board, piece, dx, dy)
        if len(line) > len(best):
            best = line
    return best[:n] if len(best) >= n else best


def check_winner_with_line(board: Board, piece: Piece) -> Optional[Tuple[Side, List[Coord]]]:
    if winning_check(board, piece) is None:
        return None
    return piece.side, winning_line(board, piece)


def check_winner(board: Board, piece: Piece) -> Optional[Side]:
    res = check_winner_with_line(board, piece)
    return res[0] if res else None


def is_draw(board: Board, last: Optional[Piece]) -> bool:
    if not board.is_full():
        return False
    return last is None or check_winner(board, last) is None
