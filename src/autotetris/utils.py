"""Utility helpers shared by the engine, the search and the front-ends."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .board import Board, PIECE_VALUES
from .tetromino import Tetromino


def can_move(board: Board, tetromino: Tetromino, dx: int, dy: int) -> bool:
    """Return ``True`` if ``tetromino`` can move by ``dx`` and ``dy`` on ``board``.

    Translating the piece must keep every block inside the board and on an
    empty cell.  A zero offset checks the piece where it stands, which is how
    rotations and spawns are validated.
    """

    for row, col in tetromino.blocks():
        if not board.is_empty(row + dy, col + dx):
            return False
    return True


def drop_distance(board: Board, tetromino: Tetromino) -> int:
    """Return how many rows ``tetromino`` can fall before resting."""

    distance = 0
    while can_move(board, tetromino, 0, distance + 1):
        distance += 1
    return distance


def render_grid(board: Board, active: Optional[Tetromino] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    The board itself is not touched, the piece is only drawn into the copy.
    """

    grid = [[int(cell) for cell in row] for row in board.grid]
    if active is not None:
        for r, c in active.blocks():
            if 0 <= r < board.height and 0 <= c < board.width:
                grid[r][c] = PIECE_VALUES[active.shape]
    return grid


def render_ascii(grid: Sequence[Sequence[int]]) -> str:
    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)
