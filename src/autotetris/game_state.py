"""High level game state container.

:class:`GameState` is the engine the autoplayer drives.  It owns the live
board and the active piece, exposes single-step movement commands and
publishes lifecycle events so observers can react to new pieces and new
games.
"""

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional

from .board import HEIGHT, WIDTH, Board
from .tetromino import Tetromino, TetrominoType
from .utils import can_move, drop_distance


LOGGER = logging.getLogger(__name__)

EventHandler = Callable[["GameState"], None]


class GameEvent(str, Enum):
    NEW_PIECE = "new_piece"
    GAME_STARTED = "game_started"


@dataclass
class Snapshot:
    """Disposable copy of the board and active piece used for simulation."""

    board: Board
    active: Optional[Tetromino]
    released: bool = False


class GameState:
    """Mutable state for a game session."""

    game_kind = "tetris"

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.board = Board(width, height)
        self.active: Optional[Tetromino] = None
        self.upcoming: Optional[TetrominoType] = None
        self.running = False
        self.paused = False
        self.score = 0
        self.lines = 0
        self.pieces = 0
        self._rng = rng or random.Random()
        self._handlers: Dict[GameEvent, List[EventHandler]] = {
            event: [] for event in GameEvent
        }

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def subscribe(self, event: GameEvent, handler: EventHandler) -> None:
        """Register ``handler`` to be called whenever ``event`` fires."""

        self._handlers[event].append(handler)

    def unsubscribe(self, event: GameEvent, handler: EventHandler) -> None:
        """Remove ``handler``; unknown handlers are ignored."""

        try:
            self._handlers[event].remove(handler)
        except ValueError:
            pass

    def _emit(self, event: GameEvent) -> None:
        for handler in list(self._handlers[event]):
            handler(self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def rotation_count(self) -> int:
        return self.active.rotation_count if self.active else 0

    def collides(self, piece: Tetromino, board: Optional[Board] = None) -> bool:
        """Return ``True`` if ``piece`` overlaps a locked cell or a wall."""

        return not can_move(board or self.board, piece, 0, 0)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def _random_type(self) -> TetrominoType:
        return self._rng.choice(list(TetrominoType))

    def spawn_position(self) -> tuple[int, int]:
        return (0, self.board.width // 2 - 2)

    def spawn_tetromino(self) -> Tetromino:
        """Spawn and return a new active tetromino.

        The piece in ``upcoming`` becomes active and a new upcoming piece is
        selected.  If the new piece collides at its spawn position the game
        is over.
        """

        shape = self.upcoming or self._random_type()
        self.active = Tetromino(shape, position=self.spawn_position())
        self.upcoming = self._random_type()
        if self.collides(self.active):
            self.game_over()
            return self.active
        self._emit(GameEvent.NEW_PIECE)
        return self.active

    def reset_game(self) -> None:
        """Reset the board and counters and start a new game."""

        self.board = Board(self.board.width, self.board.height)
        self.score = 0
        self.lines = 0
        self.pieces = 0
        self.active = None
        self.upcoming = None
        self.paused = False
        self.running = True
        LOGGER.info("Game started")
        self._emit(GameEvent.GAME_STARTED)
        self.spawn_tetromino()

    def start(self) -> None:
        self.reset_game()

    def game_over(self) -> None:
        LOGGER.info(
            "Game over after %d pieces: %d lines, score %d",
            self.pieces,
            self.lines,
            self.score,
        )
        self.running = False

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def stop(self) -> None:
        self.running = False
        self.paused = False

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def _try_move(self, dx: int, dy: int) -> bool:
        if self.active is None or not can_move(self.board, self.active, dx, dy):
            return False
        self.active.move(dx, dy)
        return True

    def move_left(self) -> bool:
        return self._try_move(-1, 0)

    def move_right(self) -> bool:
        return self._try_move(1, 0)

    def soft_drop(self) -> bool:
        """Move the piece down one row, locking it when it cannot fall."""

        if self._try_move(0, 1):
            return True
        if self.active is not None:
            self._lock_and_continue()
        return False

    def rotate(self) -> bool:
        """Rotate the active piece to its next orientation.

        The rotation is undone if the new orientation collides.
        """

        if self.active is None:
            return False
        self.active.rotate()
        if self.collides(self.active):
            self.active.rotate(-1)
            return False
        return True

    def drop(self) -> int:
        """Hard-drop the active piece, lock it and spawn the next one.

        Returns the number of rows cleared by the lock.
        """

        if self.active is None:
            return 0
        self.active.move(0, drop_distance(self.board, self.active))
        return self._lock_and_continue()

    def _lock_and_continue(self) -> int:
        assert self.active is not None
        self.board.lock_piece(self.active)
        cleared = self.board.clear_full_rows()
        if cleared:
            multiplier = cleared if cleared > 1 else 1
            self.score += cleared * 100 * multiplier
            self.lines += cleared
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self.score)
        self.pieces += 1
        self.spawn_tetromino()
        return cleared

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    @contextmanager
    def snapshot(self) -> Iterator[Snapshot]:
        """Yield an independent copy of the board and active piece.

        Nothing done to the snapshot reaches the live game, and the snapshot
        is marked released once the ``with`` block exits.
        """

        snap = Snapshot(
            board=self.board.copy(),
            active=self.active.copy() if self.active else None,
        )
        try:
            yield snap
        finally:
            snap.released = True
            snap.active = None
