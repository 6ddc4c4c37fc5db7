# src/connectfour/ui/render.py

from __future__ import annotations
from typing import Optional, Iterable, List, Set

from connectfour import config
from connectfour.core.board import Board
from connectfour.types import Cell, Coord
from connectfour.ui.colors import c, side_mark, winning_mark, EMPTY, MUTED, STATUS, TITLE


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", EMPTY)
    return side_mark(cell.side)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """
    Text rows of the board, top row first (y == height - 1 is printed first).
    """
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.width)), MUTED)]
    for y in range(board.height - 1, -1, -1):
        parts = []
        for x in range(board.width):
            p = _piece(board.cells[x][y])
            if (x, y) in hl:
                p = winning_mark(p)
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.width - 1), MUTED))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c(f"CONNECT {board.connections_required}", TITLE))
    if status:
        print(c(status, STATUS))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)

    print(c(f"   Enter 1-{board.width} to drop. Enter q to quit.", MUTED))
