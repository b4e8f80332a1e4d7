"""Board representation for the playfield.

The board is the grid accessor used by both the live game and the scratch
copies built during placement search.  Rows are counted from the top, so
``(x, y)`` addresses column ``x`` of row ``y``.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from .tetromino import Tetromino, TetrominoType


# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]

# Mapping from ``TetrominoType`` to the integer stored in the grid.  The
# specific numeric values are not important as long as ``0`` represents an empty
# cell.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(TetrominoType)}

# Value used for cells whose originating piece is unknown (fixtures, garbage).
FILLED = len(PIECE_VALUES) + 1


class CellState(str, Enum):
    BLANK = "blank"
    OCCUPIED = "occupied"


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Playfield holding the locked cells."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Board dimensions must be positive")
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """Build a board from strings such as ``"##..#"``.

        Any character other than ``.`` or a space marks an occupied cell.  All
        rows must have the same length.
        """

        rows = list(rows)
        if not rows:
            raise ValueError("At least one row is required")
        width = len(rows[0])
        board = cls(width=width, height=len(rows))
        for row, line in enumerate(rows):
            if len(line) != width:
                raise ValueError("Row width mismatch")
            for col, char in enumerate(line):
                if char not in ". ":
                    board.grid[row, col] = FILLED
        return board

    def copy(self) -> "Board":
        """Return an independent copy of the board."""

        clone = Board(self.width, self.height)
        clone.grid = self.grid.copy()
        return clone

    def cell_at(self, x: int, y: int) -> CellState:
        """Return the state of column ``x`` in row ``y``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= x < self.width and 0 <= y < self.height:
            return CellState.OCCUPIED if self.grid[y, x] else CellState.BLANK
        raise IndexError("Cell out of bounds")

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied so that
        off-board positions are rejected by collision checks.
        """

        if 0 <= row < self.height and 0 <= col < self.width:
            return bool(self.grid[row, col] == 0)
        return False

    def occupancy(self) -> NDArray[np.bool_]:
        """Return a boolean ``(height, width)`` array of occupied cells."""

        return self.grid != 0

    def lock_piece(self, tetromino: Tetromino) -> None:
        """Lock the tetromino's blocks into the board grid."""

        coordinates = np.asarray(tetromino.blocks(), dtype=np.int16)
        if coordinates.size == 0:
            return

        rows, cols = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")

        self.grid[rows, cols] = np.uint8(PIECE_VALUES[tetromino.shape])

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed."""

        full_rows = np.all(self.grid != 0, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
        return cleared

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(
            np.array_equal(self.grid, other.grid)
        )

    __hash__ = None  # type: ignore[assignment]
