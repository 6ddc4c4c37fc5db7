# src/connectfour/game/controller.py

from __future__ import annotations
import logging
from typing import Callable, Optional

from connectfour.game.session import GameSession
from connectfour.core.rules import check_winner_with_line
from connectfour.ui.render import render
from connectfour.ui.prompts import parse_move
from connectfour.types import Side

log = logging.getLogger(__name__)


def _status_with_turn(status: str, current: Side) -> str:
    header = f"X vs O | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def run_game(
    session: Optional[GameSession] = None, read: Optional[Callable[[str], str]] = None
) -> Optional[Side]:
    """
    Human vs human loop. Returns the winning side, or None on a draw or quit.
    """
    session = session if session is not None else GameSession()
    read = read if read is not None else input
    state = session.state
    winning = None

    while True:
        render(state.board, _status_with_turn(state.last_status, state.current), highlight=winning)

        if state.is_over:
            return state.winner

        raw = read(f"Player {state.current} move: ")
        try:
            move = parse_move(raw, state.board.width)
            if move is None:
                render(state.board, _status_with_turn("Game quit.", state.current))
                return None

            mover = state.current
            result = session.play(move, mover)

            if result.won:
                _, winning = check_winner_with_line(state.board, state.last_piece)
                state.last_status = f"Player {mover} wins! ({result.check_name})"
            elif result.draw:
                state.last_status = "Draw game."
            else:
                state.last_status = f"Player {mover} chose {int(move) + 1} | Next: Player {state.current}"

        except ValueError as e:
            log.debug("rejected input %r: %s", raw, e)
            state.last_status = str(e)
