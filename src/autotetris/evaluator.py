"""Board evaluation heuristic.

The score of a board combines the number of holes with statistics over the
column heights.  Lower scores are better.  Only the settled cells of a board
are considered, callers lock the piece before evaluating.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .board import Board


@dataclass(frozen=True)
class EvaluationWeights:
    """Weights applied to each term of the evaluation.

    The defaults are empirically tuned and kept as-is.
    """

    holes: float = 8.0
    mean_height: float = 4.0
    max_height: float = 3.0
    height_range: float = 3.0
    rms_height: float = 2.0


DEFAULT_WEIGHTS = EvaluationWeights()


@dataclass(frozen=True)
class BoardMetrics:
    """Summary statistics describing a board's shape."""

    heights: Tuple[int, ...]
    holes: int
    min_height: int
    max_height: int
    mean_height: float
    rms_height: float


def column_heights(board: Board) -> list[int]:
    """Return the height of every column, ``0`` for an empty column."""

    occupied = board.occupancy()
    has_block = occupied.any(axis=0)
    top = occupied.argmax(axis=0)
    heights = np.where(has_block, board.height - top, 0)
    return [int(h) for h in heights]


def count_holes(board: Board) -> int:
    """Count blank cells with an occupied cell anywhere above them."""

    occupied = board.occupancy()
    covered = np.logical_or.accumulate(occupied, axis=0)
    return int(np.count_nonzero(covered & ~occupied))


def board_metrics(board: Board) -> BoardMetrics:
    heights = column_heights(board)
    # Sorted so the float statistics only depend on the multiset of heights;
    # mirrored boards then score exactly the same.
    values = np.sort(np.asarray(heights, dtype=np.float64))
    mean = float(values.mean())
    rms = math.sqrt(float(np.mean((mean - values) ** 2)))
    return BoardMetrics(
        heights=tuple(heights),
        holes=count_holes(board),
        min_height=min(heights),
        max_height=max(heights),
        mean_height=mean,
        rms_height=rms,
    )


def score_metrics(metrics: BoardMetrics, weights: EvaluationWeights = DEFAULT_WEIGHTS) -> float:
    return (
        weights.holes * metrics.holes
        + weights.mean_height * metrics.mean_height
        + weights.max_height * metrics.max_height
        + weights.height_range * (metrics.max_height - metrics.min_height)
        + weights.rms_height * metrics.rms_height
    )


def evaluate(board: Board, weights: EvaluationWeights = DEFAULT_WEIGHTS) -> float:
    """Return the heuristic score of ``board``; lower is better."""

    return score_metrics(board_metrics(board), weights)


__all__ = [
    "BoardMetrics",
    "DEFAULT_WEIGHTS",
    "EvaluationWeights",
    "board_metrics",
    "column_heights",
    "count_holes",
    "evaluate",
    "score_metrics",
]
