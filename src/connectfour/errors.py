# src/connectfour/errors.py

"""
Exceptions raised when a move or a board cannot be accepted.

All of them derive from ValueError so the interactive loop can report any
rejected move the same way it reports bad input.
"""

from __future__ import annotations
from typing import Optional


class GameError(ValueError):
    default_message = "Invalid game state."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class OutOfGameBoardBoundsException(GameError):
    default_message = "Coordinate is outside the game board."


class BoardFullException(GameError):
    default_message = "The board is full."


class InvalidBoardDimensionsException(GameError):
    default_message = "Invalid board dimensions."


class WrongPlayerMoveException(GameError):
    default_message = "It is not this player's turn."
