from __future__ import annotations

import pytest

from autotetris.tetromino import Tetromino, TetrominoType, rotation_count, shape_blocks


@pytest.mark.parametrize(
    "shape,expected",
    [
        (TetrominoType.I, 2),
        (TetrominoType.O, 1),
        (TetrominoType.S, 2),
        (TetrominoType.Z, 2),
        (TetrominoType.T, 4),
        (TetrominoType.J, 4),
        (TetrominoType.L, 4),
    ],
)
def test_duplicate_orientations_are_collapsed(shape: TetrominoType, expected: int) -> None:
    assert rotation_count(shape) == expected


def test_i_piece_rotation_one_is_vertical() -> None:
    assert shape_blocks(TetrominoType.I, 1) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_rotate_wraps_around_rotation_count() -> None:
    piece = Tetromino(TetrominoType.I)
    piece.rotate()
    assert piece.rotation == 1
    piece.rotate()
    assert piece.rotation == 0
    piece.rotate(-1)
    assert piece.rotation == 1


def test_copy_does_not_alias() -> None:
    piece = Tetromino(TetrominoType.T, position=(0, 3))
    clone = piece.copy()
    clone.move(1, 2)
    clone.rotate()
    assert piece.position == (0, 3)
    assert piece.rotation == 0
    assert clone.position == (2, 4)
