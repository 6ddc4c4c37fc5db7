"""Terminal loop and command-line entry point."""

from connectfour.core.board import Board
from connectfour.game.controller import run_game
from connectfour.game.session import GameSession
from connectfour.main import main
from connectfour.ui.render import board_lines


def scripted(*inputs):
    it = iter(inputs)
    return lambda prompt: next(it)


class TestRunGame:
    def test_vertical_win(self, capsys):
        winner = run_game(read=scripted("1", "2", "1", "2", "1", "2", "1"))
        assert winner == "X"
        assert "Player X wins! (vertical)" in capsys.readouterr().out

    def test_bad_input_is_reported(self, capsys):
        winner = run_game(read=scripted("9", "abc", "q"))
        assert winner is None
        out = capsys.readouterr().out
        assert "Column must be between 1 and 7." in out
        assert "Invalid input. Enter a number or q." in out
        assert "Game quit." in out

    def test_full_column_is_reported(self, capsys):
        session = GameSession(Board(2, 2, 2))
        run_game(session, read=scripted("1", "1", "1", "q"))
        assert "Column is full." in capsys.readouterr().out
        assert session.current == "X"

    def test_draw(self, capsys):
        winner = run_game(GameSession(Board(3, 1, 3)), read=scripted("1", "2", "3"))
        assert winner is None
        assert "Draw game." in capsys.readouterr().out


def test_board_lines_top_row_first():
    b = Board(3, 2, 2)
    b.drop(0, "X")
    b.drop(2, "O")
    lines = board_lines(b)
    assert lines[0].strip() == "1 2 3"
    assert lines[1] == " | · · · |"
    assert lines[2] == " | X · O |"


def test_board_lines_highlight():
    b = Board(2, 1, 2)
    b.drop(0, "X")
    b.drop(1, "X")
    assert board_lines(b, highlight=[(0, 0), (1, 0)])[1] == " | x x |"


class TestMain:
    def test_invalid_dimensions(self):
        assert main(["--width", "0"]) == 2

    def test_unwinnable_board(self):
        assert main(["--width", "3", "--height", "3", "--connect", "4"]) == 2

    def test_quit(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt: "q")
        assert main(["--no-color", "--no-clear"]) == 0
        assert "CONNECT 4" in capsys.readouterr().out

    def test_end_of_input(self, monkeypatch):
        def eof(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", eof)
        assert main(["--no-clear"]) == 0


def test_winning_cells_highlighted_after_win(capsys):
    run_game(read=scripted("1", "2", "1", "2", "1", "2", "1"))
    out = capsys.readouterr().out
    assert " | x · · · · · · |" in out
