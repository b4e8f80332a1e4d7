"""pygame front-end with autoplay controls.

Keys:

* arrows move/rotate the piece, space hard-drops it
* ``A`` toggles autoplay, ``S`` runs a single autoplay step
* ``P`` pauses or resumes the game

Gravity and the autoplay timer both run off the pygame clock.  Human input is
accepted between autoplay ticks, which is how a player can take over.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from .actuator import AutoPlayer
from .board import PIECE_VALUES, FILLED, Board
from .config import AutoplayConfig
from .errors import InvalidContextError
from .game_state import GameState
from .tetromino import TetrominoType


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Milliseconds between automatic downward moves
GRAVITY_MS = 500
# Frames per second to run the game loop at
FPS = 60

SHAPE_COLORS = {
    TetrominoType.I: (0, 255, 255),
    TetrominoType.O: (255, 255, 0),
    TetrominoType.T: (128, 0, 128),
    TetrominoType.S: (0, 255, 0),
    TetrominoType.Z: (255, 0, 0),
    TetrominoType.J: (0, 0, 255),
    TetrominoType.L: (255, 165, 0),
}

# Mapping from the integer stored in the board grid to a colour
CELL_COLORS = {0: (0, 0, 0), FILLED: (128, 128, 128)}
for shape, value in PIECE_VALUES.items():
    CELL_COLORS[value] = SHAPE_COLORS[shape]


def draw_board(screen: pygame.Surface, board: Board) -> None:
    """Render the locked cells."""

    for r in range(board.height):
        for c in range(board.width):
            color = CELL_COLORS[int(board.grid[r][c])]
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, color, rect)
            pygame.draw.rect(screen, (50, 50, 50), rect, 1)


def draw_tetromino(screen: pygame.Surface, state: GameState) -> None:
    """Render the active piece."""

    if not state.active:
        return
    color = SHAPE_COLORS[state.active.shape]
    for r, c in state.active.blocks():
        rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, (50, 50, 50), rect, 1)


def handle_key(key: int, state: GameState, player: AutoPlayer) -> None:
    """Apply a key press to the game or the autoplayer."""

    if key == pygame.K_p:
        if state.paused:
            state.resume()
        else:
            state.pause()
        return
    if key == pygame.K_a:
        try:
            player.toggle()
        except InvalidContextError as exc:
            LOGGER.error("Cannot enable autoplay: %s", exc)
        return
    if state.paused or not state.running:
        return
    if key == pygame.K_s:
        player.step()
    elif key == pygame.K_LEFT:
        state.move_left()
    elif key == pygame.K_RIGHT:
        state.move_right()
    elif key == pygame.K_UP:
        state.rotate()
    elif key == pygame.K_DOWN:
        state.soft_drop()
    elif key == pygame.K_SPACE:
        state.drop()


class GameRunner:
    """Manage the pygame loop with start/pause/resume/stop controls."""

    def __init__(self, config: Optional[AutoplayConfig] = None, *, state: Optional[GameState] = None) -> None:
        self.config = config or AutoplayConfig()
        self._state = state or GameState()
        self._player = AutoPlayer(self._state, self.config)
        self._running = False
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._drop_timer = 0
        self._autoplay_timer = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def player(self) -> AutoPlayer:
        return self._player

    def advance(self, dt: int) -> None:
        """Advance gravity and the autoplay timer by ``dt`` milliseconds."""

        state = self._state
        if state.paused or not state.running:
            return
        self._autoplay_timer += dt
        if self._autoplay_timer >= self.config.tick_interval * 1000:
            self._autoplay_timer = 0
            self._player.tick()
        self._drop_timer += dt
        if self._drop_timer >= GRAVITY_MS:
            self._drop_timer = 0
            state.soft_drop()

    def _caption(self) -> str:
        state = self._state
        flags = []
        if state.paused:
            flags.append("Paused")
        if self._player.enabled:
            flags.append("Auto")
        if not state.running:
            flags.append("Game over")
        prefix = " - ".join(flags)
        return f"Tetris - {prefix + ' - ' if prefix else ''}Lines: {state.lines} Score: {state.score}"

    async def _run_loop(self) -> None:
        pygame.init()
        board = self._state.board
        self._screen = pygame.display.set_mode((board.width * CELL_SIZE, board.height * CELL_SIZE))
        self._clock = pygame.time.Clock()
        self._state.start()

        self._running = True
        while self._running:
            dt = self._clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_r and not self._state.running:
                        self._state.start()
                    else:
                        handle_key(event.key, self._state, self._player)

            self.advance(dt)

            self._screen.fill((0, 0, 0))
            draw_board(self._screen, self._state.board)
            draw_tetromino(self._screen, self._state)
            pygame.display.set_caption(self._caption())
            pygame.display.flip()

            # Yield to the host event loop to keep the UI responsive
            await asyncio.sleep(0)

        self._player.close()
        pygame.quit()
        LOGGER.info("Game stopped")

    def start(self) -> None:
        asyncio.run(self._run_loop())

    def stop(self) -> None:
        self._running = False


def main(config: Optional[AutoplayConfig] = None) -> None:
    GameRunner(config).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
