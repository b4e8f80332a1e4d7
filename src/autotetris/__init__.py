"""Autonomous player for a falling-block puzzle game."""

from .actuator import Action, AutoPlayer
from .board import Board, CellState
from .config import AutoplayConfig
from .errors import AutotetrisError, ConfigError, InvalidContextError
from .evaluator import BoardMetrics, EvaluationWeights, board_metrics, evaluate
from .game_state import GameEvent, GameState, Snapshot
from .runner import HeadlessRunner, RunSummary
from .search import NO_TARGET, Target, compute_target
from .tetromino import Tetromino, TetrominoType, shape_blocks
from .utils import can_move, render_grid

__all__ = [
    "Action",
    "AutoPlayer",
    "AutoplayConfig",
    "AutotetrisError",
    "Board",
    "BoardMetrics",
    "CellState",
    "ConfigError",
    "EvaluationWeights",
    "GameEvent",
    "GameState",
    "HeadlessRunner",
    "InvalidContextError",
    "NO_TARGET",
    "RunSummary",
    "Snapshot",
    "Target",
    "Tetromino",
    "TetrominoType",
    "board_metrics",
    "can_move",
    "compute_target",
    "evaluate",
    "render_grid",
    "shape_blocks",
]
