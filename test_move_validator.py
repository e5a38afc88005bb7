"""Unit tests for move validation."""

from logic.game_session import GameSession
from logic.move_validator import MoveValidator


def test_valid_move():
    result = MoveValidator().validate_move(GameSession(), 0, 0, 0)
    assert result.is_valid
    assert result.error_message is None


def test_out_of_range_reports_public_coordinates():
    result = MoveValidator().validate_move(GameSession(), 3, 0, 0)
    assert not result.is_valid
    assert "(4, 1, 1)" in result.error_message


def test_occupied_cell():
    session = GameSession()
    session.make_move(2, 2, 2)
    result = session.validate_move(2, 2, 2)
    assert not result.is_valid
    assert "occupied by X" in result.error_message


def test_game_over_checked_first():
    session = GameSession(2, 2, 2, win_length=1)
    session.make_move(1, 1, 1)
    for move in [(1, 1, 1), (2, 2, 2), (9, 9, 9)]:
        result = session.validate_move(*move)
        assert not result.is_valid
        assert result.error_message == "Game is already over!"


def test_valid_moves_are_the_empty_cells():
    session = GameSession(3, 2, 2)
    validator = MoveValidator()
    assert len(validator.get_valid_moves(session)) == 12
    session.make_move(3, 2, 1)
    moves = validator.get_valid_moves(session)
    assert len(moves) == 11
    assert (2, 1, 0) not in moves
