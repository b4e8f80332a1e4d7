"""Headless game loop driving a :class:`GameState` with an autoplayer.

Each loop iteration stands for one autoplay tick.  Gravity is applied every
``gravity_ticks`` iterations so a disabled or paused player still sees the
piece fall, as it would under the interactive front-end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .actuator import AutoPlayer


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    pieces: int
    lines: int
    score: int
    ticks: int
    game_over: bool


class HeadlessRunner:
    """Run a game to completion without a display."""

    def __init__(self, player: AutoPlayer, *, gravity_ticks: int = 5) -> None:
        if gravity_ticks < 0:
            raise ValueError("gravity_ticks must not be negative")
        self.player = player
        self.game = player.game
        self.gravity_ticks = gravity_ticks
        self.ticks = 0

    def tick(self) -> None:
        self.player.tick()
        self.ticks += 1
        if (
            self.gravity_ticks
            and self.ticks % self.gravity_ticks == 0
            and self.game.running
            and not self.game.paused
        ):
            self.game.soft_drop()

    def run(self, max_pieces: int = 100, max_ticks: Optional[int] = None) -> RunSummary:
        """Tick until the game ends, ``max_pieces`` lock or ``max_ticks`` pass."""

        if not self.gravity_ticks and not self.player.enabled and max_ticks is None:
            raise ValueError("Nothing would move the piece: enable autoplay or gravity")
        if not self.game.running:
            self.game.start()
        while self.game.running and self.game.pieces < max_pieces:
            if max_ticks is not None and self.ticks >= max_ticks:
                break
            self.tick()
            if self.game.pieces and self.ticks % 500 == 0:
                LOGGER.info(
                    "Tick %d: %d pieces, %d lines", self.ticks, self.game.pieces, self.game.lines
                )
        return RunSummary(
            pieces=self.game.pieces,
            lines=self.game.lines,
            score=self.game.score,
            ticks=self.ticks,
            game_over=not self.game.running,
        )
