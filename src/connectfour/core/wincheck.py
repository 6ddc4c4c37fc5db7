# src/connectfour/core/wincheck.py

from __future__ import annotations
from typing import Optional, Protocol, Tuple

from connectfour.core.board import Board
from connectfour.core.piece import Piece


class WinCheck(Protocol):
    name: str

    def check_for_winning_condition(self, board: Board, piece: Piece) -> bool:
        ...


def _same_side(board: Board, x: int, y: int, piece: Piece) -> bool:
    cell = board.cells[x][y]
    return cell is not None and cell.side == piece.side


class HorizontalWinCheck:
    """
    Scans the anchor's row forward, then backward.

    Each pass counts the anchor itself and is compared on its own; the two
    passes are not added together.
    """

    name = "horizontal"

    def check_for_winning_condition(self, board: Board, piece: Piece) -> bool:
        n = board.connections_required

        count = 0
        for x in range(piece.x, min(piece.x + n, board.width - 1) + 1):
            if _same_side(board, x, piece.y, piece):
                count += 1
            else:
                break

        if count >= n:
            return True

        count = 0
        for x in range(piece.x, max(piece.x - n, 0) - 1, -1):
            if _same_side(board, x, piece.y, piece):
                count += 1
            else:
                break

        return count >= n


class VerticalWinCheck:
    """
    Same scan as HorizontalWinCheck along the anchor's column (up, then down).
    """

    name = "vertical"

    def check_for_winning_condition(self, board: Board, piece: Piece) -> bool:
        n = board.connections_required

        count = 0
        for y in range(piece.y, min(piece.y + n, board.height - 1) + 1):
            if _same_side(board, piece.x, y, piece):
                count += 1
            else:
                break

        if count >= n:
            return True

        count = 0
        for y in range(piece.y, max(piece.y - n, 0) - 1, -1):
            if _same_side(board, piece.x, y, piece):
                count += 1
            else:
                break

        return count >= n


# (dx, dy): up-right, down-right, up-left, down-left
DIAGONALS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class DiagonalWinCheck:
    """
    Four one-directional scans starting at the anchor. There is no
    backward complement per diagonal: the run has to start at the anchor.
    """

    name = "diagonal"

    def check_for_winning_condition(self, board: Board, piece: Piece) -> bool:
        n = board.connections_required

        for dx, dy in DIAGONALS:
            count = 0
            for i in range(n):
                x, y = piece.x + dx * i, piece.y + dy * i
                if not board.in_bounds(x, y) or not _same_side(board, x, y, piece):
                    break
                count += 1

            if count >= n:
                return True

        return False


WIN_CHECKS: Tuple[WinCheck, ...] = (HorizontalWinCheck(), VerticalWinCheck(), DiagonalWinCheck())


def winning_check(board: Board, piece: Piece) -> Optional[WinCheck]:
    for check in WIN_CHECKS:
        if check.check_for_winning_condition(board, piece):
            return check
    return None


def check_for_win(board: Board, piece: Piece) -> bool:
    return winning_check(board, piece) is not None
