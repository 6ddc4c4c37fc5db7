# src/connectfour/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterator, List

from connectfour.config import WIDTH, HEIGHT, CONNECT_N
from connectfour.core.piece import Piece
from connectfour.errors import InvalidBoardDimensionsException, OutOfGameBoardBoundsException
from connectfour.types import Cell, Side, Move

log = logging.getLogger(__name__)


@dataclass(slots=True)
class Board:
    """
    Fixed-size grid addressed as cells[x][y].
    x runs left to right, y runs bottom (0) to top (height - 1).
    """

    width: int = WIDTH
    height: int = HEIGHT
    connections_required: int = CONNECT_N
    cells: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidBoardDimensionsException(
                f"Board must be at least 1x1, got {self.width}x{self.height}."
            )
        if self.connections_required <= 0:
            raise InvalidBoardDimensionsException(
                f"Connections required must be positive, got {self.connections_required}."
            )
        if self.connections_required > max(self.width, self.height):
            raise InvalidBoardDimensionsException(
                f"A {self.width}x{self.height} board cannot hold a run of {self.connections_required}."
            )
        if not self.cells:
            self.cells = [[None for _ in range(self.height)] for _ in range(self.width)]
        elif len(self.cells) != self.width or any(len(col) != self.height for col in self.cells):
            raise InvalidBoardDimensionsException("Cell grid does not match width and height.")
        log.debug(
            "board created %dx%d connect=%d", self.width, self.height, self.connections_required
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _require_in_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfGameBoardBoundsException(
                f"({x}, {y}) is outside the {self.width}x{self.height} board."
            )

    def get(self, x: int, y: int) -> Cell:
        self._require_in_bounds(x, y)
        return self.cells[x][y]

    def place(self, piece: Piece) -> Piece:
        self._require_in_bounds(piece.x, piece.y)
        if self.cells[piece.x][piece.y] is not None:
            raise ValueError("Cell is already occupied.")
        self.cells[piece.x][piece.y] = piece
        return piece

    def column_full(self, col: Move) -> bool:
        c = int(col)
        self._require_in_bounds(c, 0)
        return all(cell is not None for cell in self.cells[c])

    def is_full(self) -> bool:
        return all(cell is not None for col in self.cells for cell in col)

    def pieces(self) -> Iterator[Piece]:
        for col in self.cells:
            for cell in col:
                if cell is not None:
                    yield cell

    def drop(self, col: Move, side: Side) -> Piece:
        """
        Gravity placement: the piece lands on the lowest empty cell of the column.
        """
        c = int(col)
        if c < 0 or c >= self.width:
            raise OutOfGameBoardBoundsException(f"Column {c} is outside the board.")

        for y in range(self.height):
            if self.cells[c][y] is None:
                return self.place(Piece(side, c, y))

        raise ValueError("Column is full.")
