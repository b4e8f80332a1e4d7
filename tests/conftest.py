from __future__ import annotations

import random
from typing import Callable, List, Optional

import pytest

from autotetris.board import Board
from autotetris.game_state import GameState
from autotetris.tetromino import Tetromino, TetrominoType


GameFactory = Callable[..., GameState]


@pytest.fixture
def make_game() -> GameFactory:
    """Return a factory for running games with a chosen active piece."""

    def _make(shape: TetrominoType, rows: Optional[List[str]] = None) -> GameState:
        game = GameState(rng=random.Random(0))
        game.reset_game()
        if rows is not None:
            game.board = Board.from_rows(rows)
        game.active = Tetromino(shape, position=game.spawn_position())
        return game

    return _make


def well_rows(depth: int, gap: int, width: int = 10, height: int = 20) -> List[str]:
    """Rows with the bottom ``depth`` rows full except column ``gap``."""

    blank = "." * width
    filled = "".join("." if col == gap else "#" for col in range(width))
    return [blank] * (height - depth) + [filled] * depth


@pytest.fixture
def well() -> Callable[..., List[str]]:
    return well_rows
