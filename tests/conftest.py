from __future__ import annotations
from typing import Callable, Iterable, List

import pytest

from connectfour import config
from connectfour.core.board import Board
from connectfour.core.piece import Piece
from connectfour.types import Coord, Side

Put = Callable[[Board, Side, Iterable[Coord]], List[Piece]]


@pytest.fixture
def board() -> Board:
    return Board(7, 6, 4)


@pytest.fixture
def put() -> Put:
    def _put(board: Board, side: Side, coords: Iterable[Coord]) -> List[Piece]:
        return [board.place(Piece(side, x, y)) for x, y in coords]

    return _put


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
