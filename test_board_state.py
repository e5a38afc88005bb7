"""Unit tests for the 3D board."""

import numpy as np
import pytest

from logic.board_state import BoardState, Mark, OutOfBoundsError


def test_new_board_is_empty():
    board = BoardState(3, 4, 5)
    assert board.shape == (3, 4, 5)
    assert board.total_cells == 60
    assert board.move_count == 0
    assert len(board.get_empty_cells()) == 60
    assert board.get(2, 3, 4) == Mark.EMPTY


def test_set_and_get():
    board = BoardState()
    board.set(0, 1, 2, Mark.X)
    board.set(2, 2, 2, Mark.O)
    assert board.get(0, 1, 2) == Mark.X
    assert board.get(2, 2, 2) == Mark.O
    assert board.move_count == 2
    assert board.count(Mark.X) == 1
    assert board.count(Mark.O) == 1
    assert not board.is_empty(0, 1, 2)
    assert (0, 1, 2) not in board.get_empty_cells()


def test_get_out_of_bounds_raises():
    board = BoardState()
    for cell in [(-1, 0, 0), (3, 0, 0), (0, 3, 0), (0, 0, 3)]:
        with pytest.raises(OutOfBoundsError):
            board.get(*cell)


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        BoardState().get(5, 5, 5)


def test_set_occupied_cell_raises():
    board = BoardState()
    board.set(1, 1, 1, Mark.X)
    with pytest.raises(ValueError):
        board.set(1, 1, 1, Mark.O)
    assert board.get(1, 1, 1) == Mark.X
    assert board.move_count == 1


def test_set_rejects_empty_and_out_of_range():
    board = BoardState()
    with pytest.raises(ValueError):
        board.set(0, 0, 0, Mark.EMPTY)
    with pytest.raises(OutOfBoundsError):
        board.set(3, 0, 0, Mark.X)
    assert board.move_count == 0


def test_is_full():
    board = BoardState(1, 2, 1)
    board.set(0, 0, 0, Mark.X)
    assert not board.is_full()
    board.set(0, 1, 0, Mark.O)
    assert board.is_full()


def test_clear_resets_grid_and_count():
    board = BoardState(2, 2, 2)
    board.set(0, 0, 0, Mark.X)
    board.set(1, 1, 1, Mark.O)
    board.clear()
    assert board.move_count == 0
    assert board.count(Mark.EMPTY) == 8


def test_copy_is_independent():
    board = BoardState()
    board.set(0, 0, 0, Mark.X)
    clone = board.copy()
    clone.set(1, 1, 1, Mark.O)
    assert board.get(1, 1, 1) == Mark.EMPTY
    assert board.move_count == 1
    assert clone.move_count == 2


@pytest.mark.parametrize("dims", [(0, 3, 3), (3, -1, 3), (3, 3, 0), (2.5, 3, 3), (True, 3, 3)])
def test_invalid_dimensions(dims):
    with pytest.raises(ValueError):
        BoardState(*dims)


def test_opposite_mark():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X
    with pytest.raises(ValueError):
        Mark.EMPTY.opposite()


def test_format_layers():
    board = BoardState(2, 2, 2)
    board.set(0, 0, 0, Mark.X)
    board.set(1, 1, 1, Mark.O)
    text = board.format_layers()
    assert "z=1" in text and "z=2" in text
    first_layer, second_layer = text.split("\n\n")
    assert "X" in first_layer and "O" not in first_layer
    assert "O" in second_layer and "X" not in second_layer


def test_in_bounds_requires_integers():
    board = BoardState()
    assert board.in_bounds(0, 2, 1)
    assert board.in_bounds(np.int64(2), 0, 0)
    assert not board.in_bounds(0.5, 0, 0)
    assert not board.in_bounds(1, 1.0, 1)
    assert not board.is_empty(0, 0, 1.5)
