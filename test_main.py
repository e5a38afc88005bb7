"""Unit tests for the console front-end's input handling."""

from logic.board_state import Mark
from logic.game_session import GameSession
from main import ConsoleGame


def test_parse_move():
    game = ConsoleGame(GameSession())
    assert game._parse_move("1 2 3") == (1, 2, 3)
    assert game._parse_move("3,1,2") == (3, 1, 2)
    assert game._parse_move("  2 ,  2,2 ") == (2, 2, 2)


def test_parse_move_rejects_bad_input():
    game = ConsoleGame(GameSession())
    for command in ["", "1 2", "1 2 3 4", "a b c", "1.5 1 1"]:
        assert game._parse_move(command) is None


def test_process_move_reports_rejection(capsys):
    game = ConsoleGame(GameSession())
    game._process_move(1, 1, 1)
    capsys.readouterr()

    game._process_move(1, 1, 1)
    assert "already occupied" in capsys.readouterr().out
    assert game.session.move_count == 1
    assert game.session.get_cell(1, 1, 1) == Mark.X
