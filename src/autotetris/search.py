"""Placement search for the active piece.

Every rotation of the active piece is tried at every column from one column
left of the board to one column right of it.  Each candidate is dropped on a
scratch copy of the board, locked, and the resulting board is scored with
:func:`autotetris.evaluator.evaluate`.  The lowest score wins; exact ties go to
the column closest to the horizontal centre.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .board import Board
from .evaluator import DEFAULT_WEIGHTS, EvaluationWeights, evaluate
from .game_state import GameState
from .tetromino import Tetromino
from .utils import can_move, drop_distance


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Target:
    """Chosen placement for the active piece plus its evaluation score."""

    column: Optional[int]
    rotation: Optional[int]
    score: float

    @property
    def found(self) -> bool:
        """``False`` when no legal placement exists for the piece."""

        return not math.isinf(self.score)


NO_TARGET = Target(column=None, rotation=None, score=math.inf)


def candidate_columns(width: int) -> range:
    """Return the columns tried for every rotation, overhang included."""

    return range(-1, width + 1)


def iter_candidates(rotations: int, width: int) -> Iterator[Tuple[int, int]]:
    """Yield ``(column, rotation)`` pairs in search order."""

    for rotation in range(rotations):
        for column in candidate_columns(width):
            yield column, rotation


def simulate_drop(board: Board, piece: Tetromino) -> Optional[Board]:
    """Drop ``piece`` on a copy of ``board`` and return the settled board.

    Returns ``None`` when the piece collides where it starts.  Completed rows
    are cleared, as the engine would do after the lock.
    """

    if not can_move(board, piece, 0, 0):
        return None
    landed = piece.copy()
    landed.move(0, drop_distance(board, landed))
    result = board.copy()
    result.lock_piece(landed)
    result.clear_full_rows()
    return result


def _better(score: float, column: int, best: Target, center: float) -> bool:
    if score < best.score:
        return True
    if score == best.score and best.column is not None:
        return abs(column - center) < abs(best.column - center)
    return False


def compute_target(
    game: GameState, weights: EvaluationWeights = DEFAULT_WEIGHTS
) -> Target:
    """Return the best placement for the active piece of ``game``.

    The live board and piece are left untouched; all simulation happens on a
    snapshot released before returning.  ``NO_TARGET`` is returned when every
    candidate collides or there is no active piece.
    """

    best = NO_TARGET
    with game.snapshot() as snap:
        if snap.active is None:
            return best
        piece = snap.active
        center = snap.board.width / 2
        start_row = piece.row
        for column, rotation in iter_candidates(piece.rotation_count, snap.board.width):
            candidate = Tetromino(piece.shape, rotation, (start_row, column))
            settled = simulate_drop(snap.board, candidate)
            if settled is None:
                continue
            score = evaluate(settled, weights)
            if best.column is None or _better(score, column, best, center):
                best = Target(column=column, rotation=rotation, score=score)

    if best.found:
        LOGGER.debug(
            "Target for %s: column=%d rotation=%d score=%.3f",
            piece.shape.value,
            best.column,
            best.rotation,
            best.score,
        )
    else:
        LOGGER.debug("No legal placement for %s", piece.shape.value)
    return best


__all__ = [
    "NO_TARGET",
    "Target",
    "candidate_columns",
    "compute_target",
    "iter_candidates",
    "simulate_drop",
]
