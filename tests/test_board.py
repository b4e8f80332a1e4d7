from __future__ import annotations

import pytest

from autotetris.board import Board, CellState
from autotetris.tetromino import Tetromino, TetrominoType


def test_cell_at_reads_columns_and_rows() -> None:
    board = Board.from_rows(["...", ".#.", "#.."])
    assert board.width == 3
    assert board.height == 3
    assert board.cell_at(1, 1) is CellState.OCCUPIED
    assert board.cell_at(0, 2) is CellState.OCCUPIED
    assert board.cell_at(2, 2) is CellState.BLANK


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
def test_cell_at_out_of_bounds_raises(x: int, y: int) -> None:
    with pytest.raises(IndexError):
        Board().cell_at(x, y)


def test_copy_is_independent() -> None:
    board = Board()
    clone = board.copy()
    clone.set_cell(19, 0, 1)
    assert board.cell_at(0, 19) is CellState.BLANK
    assert clone.cell_at(0, 19) is CellState.OCCUPIED
    assert board != clone


def test_lock_and_clear_full_rows() -> None:
    board = Board.from_rows(["....", "....", "#..."])
    board.lock_piece(Tetromino(TetrominoType.O, position=(1, 1)))
    # O piece filled (1,1),(1,2),(2,1),(2,2); bottom row still misses column 3.
    assert board.clear_full_rows() == 0
    board.set_cell(2, 3, 1)
    assert board.clear_full_rows() == 1
    assert board.cell_at(1, 2) is CellState.OCCUPIED
    assert board.cell_at(0, 2) is CellState.BLANK


def test_from_rows_rejects_ragged_input() -> None:
    with pytest.raises(ValueError):
        Board.from_rows(["...", ".."])
