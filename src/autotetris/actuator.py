"""Per-tick controller that steers the active piece towards its target.

The :class:`AutoPlayer` keeps at most one :class:`~autotetris.search.Target`
for the active piece.  Every tick performs a single action: rotate, shift
right, shift left, or hard-drop once the piece sits on its target.  The target
is computed lazily on the first tick of a piece and discarded when the piece
is dropped, a new piece spawns or a new game starts.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Optional

from .config import AutoplayConfig
from .errors import InvalidContextError
from .evaluator import EvaluationWeights
from .game_state import GameEvent, GameState
from .search import Target, compute_target


LOGGER = logging.getLogger(__name__)

SearchFn = Callable[[GameState, EvaluationWeights], Target]


class Action(str, Enum):
    ROTATE = "rotate"
    RIGHT = "right"
    LEFT = "left"
    DROP = "drop"


class AutoPlayer:
    """Autonomous controller for a :class:`GameState`.

    The player listens to the game's lifecycle events from construction
    until :meth:`close`.  Ticks only act while the mode is enabled, the game
    is running and not paused; otherwise they do nothing.
    """

    def __init__(
        self,
        game: GameState,
        config: Optional[AutoplayConfig] = None,
        *,
        search: SearchFn = compute_target,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.game = game
        self.config = config or AutoplayConfig()
        self.enabled = False
        self.target: Optional[Target] = None
        self._search = search
        self._clock = clock or time.perf_counter
        self._subscribed = False
        # Bumped on every lifecycle event, detects events fired during a search.
        self._generation = 0
        if self.config.enabled:
            self.enable()

    @property
    def tick_interval(self) -> float:
        return self.config.tick_interval

    # ------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------
    def enable(self) -> None:
        """Switch autonomous control on.

        Raises:
            InvalidContextError: If the game is not a falling-block game.  The
                mode stays off in that case.
        """

        self.enabled = True
        kind = getattr(self.game, "game_kind", None)
        if kind != GameState.game_kind:
            self.enabled = False
            LOGGER.error("Autoplay is only available in a %s game", GameState.game_kind)
            raise InvalidContextError(
                f"autoplay requires a {GameState.game_kind!r} game, got {kind!r}"
            )
        self._subscribe()
        self.target = None
        LOGGER.info("Autoplay enabled (tick interval %.3fs)", self.tick_interval)

    def disable(self) -> None:
        self.enabled = False
        self.target = None
        LOGGER.info("Autoplay disabled")

    def toggle(self) -> bool:
        """Flip the mode and return the new state."""

        if self.enabled:
            self.disable()
        else:
            self.enable()
        return self.enabled

    def close(self) -> None:
        """Disable the player and stop listening to the game."""

        self.enabled = False
        self.target = None
        if self._subscribed:
            self.game.unsubscribe(GameEvent.NEW_PIECE, self.reset_target)
            self.game.unsubscribe(GameEvent.GAME_STARTED, self.reset_target)
            self._subscribed = False

    def _subscribe(self) -> None:
        if self._subscribed:
            return
        self.game.subscribe(GameEvent.NEW_PIECE, self.reset_target)
        self.game.subscribe(GameEvent.GAME_STARTED, self.reset_target)
        self._subscribed = True

    def reset_target(self, game: Optional[GameState] = None) -> None:
        """Forget the current target; the next tick recomputes it."""

        self.target = None
        self._generation += 1

    # ------------------------------------------------------------------
    # Ticks
    # ------------------------------------------------------------------
    def tick(self) -> Optional[Action]:
        """Run one scheduled tick, returning the action taken if any."""

        if not self.enabled:
            return None
        return self._act()

    def step(self) -> Optional[Action]:
        """Run a single tick on demand, even while the mode is off."""

        self._subscribe()
        return self._act()

    def _ready(self) -> bool:
        game = self.game
        return game.running and not game.paused and game.active is not None

    def _compute_target(self) -> Target:
        start = self._clock()
        target = self._search(self.game, self.config.weights)
        elapsed = self._clock() - start
        if elapsed > self.tick_interval:
            LOGGER.warning(
                "Placement search took %.3fs, longer than the %.3fs tick interval",
                elapsed,
                self.tick_interval,
            )
        return target

    def _act(self) -> Optional[Action]:
        if not self._ready():
            return None
        if self.target is None:
            generation = self._generation
            target = self._compute_target()
            if generation != self._generation:
                LOGGER.debug("Piece changed during search; discarding its target")
                return None
            self.target = target

        target = self.target
        if not target.found:
            LOGGER.warning("No legal placement for the active piece; dropping it")
            return self._drop()

        piece = self.game.active
        assert piece is not None
        if piece.rotation != target.rotation:
            return self._apply(Action.ROTATE, self.game.rotate)
        if piece.column < target.column:
            return self._apply(Action.RIGHT, self.game.move_right)
        if piece.column > target.column:
            return self._apply(Action.LEFT, self.game.move_left)
        return self._drop()

    def _apply(self, action: Action, command: Callable[[], bool]) -> Action:
        if command():
            return action
        LOGGER.info("Action %s blocked; dropping the piece where it stands", action.value)
        return self._drop()

    def _drop(self) -> Action:
        self.target = None
        self.game.drop()
        return Action.DROP


__all__ = ["Action", "AutoPlayer"]
