"""Tetromino definitions and basic behaviour.

Each shape is described by its spawn orientation; the remaining orientations
are derived by clockwise rotation.  Orientations that cover the same cells are
collapsed, so an ``O`` piece has a single rotation state and ``I``, ``S`` and
``Z`` have two.  The autoplayer treats rotation indices opaquely, it only
needs ``rotation_count`` and equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

RotationState = List[Tuple[int, int]]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


def _rotate(state: RotationState) -> RotationState:
    """Return ``state`` rotated 90 degrees clockwise.

    The resulting coordinates are normalised so that the minimum row and
    column are zero, which keeps a piece's position equal to the top-left
    corner of its bounding box.
    """

    rotated = [(c, -r) for r, c in state]
    min_r = min(r for r, _ in rotated)
    min_c = min(c for _, c in rotated)
    return sorted((r - min_r, c - min_c) for r, c in rotated)


def _generate_rotations(state: RotationState) -> List[RotationState]:
    """Return the distinct rotation states reachable from ``state``."""

    rotations = [sorted(state)]
    for _ in range(3):
        state = _rotate(state)
        if state in rotations:
            break
        rotations.append(state)
    return rotations


_BASE_SHAPES: Dict[TetrominoType, RotationState] = {
    TetrominoType.I: [(0, 0), (0, 1), (0, 2), (0, 3)],
    TetrominoType.O: [(0, 0), (0, 1), (1, 0), (1, 1)],
    TetrominoType.T: [(0, 0), (0, 1), (0, 2), (1, 1)],
    TetrominoType.S: [(0, 1), (0, 2), (1, 0), (1, 1)],
    TetrominoType.Z: [(0, 0), (0, 1), (1, 1), (1, 2)],
    TetrominoType.J: [(0, 0), (1, 0), (1, 1), (1, 2)],
    TetrominoType.L: [(0, 2), (1, 0), (1, 1), (1, 2)],
}


TETROMINO_SHAPES: Dict[TetrominoType, List[RotationState]] = {
    t_type: _generate_rotations(shape) for t_type, shape in _BASE_SHAPES.items()
}


def rotation_count(shape: TetrominoType) -> int:
    """Return the number of distinct orientations of ``shape``."""

    return len(TETROMINO_SHAPES[shape])


def shape_blocks(shape: TetrominoType, rotation: int) -> RotationState:
    """Return the block offsets for ``shape`` at ``rotation``.

    Rotation values wrap, so any integer is accepted.
    """

    states = TETROMINO_SHAPES[shape]
    return states[rotation % len(states)]


def shape_width(shape: TetrominoType, rotation: int) -> int:
    """Return the bounding box width of ``shape`` at ``rotation``."""

    return max(dc for _, dc in shape_blocks(shape, rotation)) + 1


@dataclass
class Tetromino:
    """Active falling piece in the game."""

    shape: TetrominoType
    rotation: int = 0
    position: Tuple[int, int] = (0, 0)  # (row, col)

    @property
    def rotation_count(self) -> int:
        return rotation_count(self.shape)

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def column(self) -> int:
        return self.position[1]

    def rotate(self, direction: int = 1) -> None:
        """Rotate the piece by one step.

        Positive values rotate clockwise whilst negative values rotate
        counter-clockwise.  Only the sign of ``direction`` matters.
        """

        step = 1 if direction >= 0 else -1
        self.rotation = (self.rotation + step) % self.rotation_count

    def move(self, dx: int, dy: int) -> None:
        """Move the piece by ``dx`` columns and ``dy`` rows."""

        row, col = self.position
        self.position = (row + dy, col + dx)

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the global ``(row, col)`` block coordinates for this piece."""

        row, col = self.position
        state = shape_blocks(self.shape, self.rotation)
        return [(row + dr, col + dc) for dr, dc in state]

    def copy(self) -> "Tetromino":
        return Tetromino(self.shape, self.rotation, self.position)
