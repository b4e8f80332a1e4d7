from __future__ import annotations

import random

import pygame

from autotetris.config import AutoplayConfig
from autotetris.game_state import GameState
from autotetris.run_pygame import GameRunner, handle_key


def _runner(**config) -> GameRunner:
    state = GameState(rng=random.Random(0))
    state.reset_game()
    return GameRunner(AutoplayConfig(**config), state=state)


def test_a_key_toggles_autoplay() -> None:
    runner = _runner()
    handle_key(pygame.K_a, runner.state, runner.player)
    assert runner.player.enabled
    handle_key(pygame.K_a, runner.state, runner.player)
    assert not runner.player.enabled


def test_p_key_pauses_and_blocks_input() -> None:
    runner = _runner()
    handle_key(pygame.K_p, runner.state, runner.player)
    assert runner.state.paused
    position = runner.state.active.position
    handle_key(pygame.K_LEFT, runner.state, runner.player)
    assert runner.state.active.position == position
    handle_key(pygame.K_p, runner.state, runner.player)
    assert not runner.state.paused


def test_s_key_steps_once() -> None:
    runner = _runner()
    handle_key(pygame.K_s, runner.state, runner.player)
    assert runner.player.target is not None or runner.state.pieces == 1


def test_autoplay_ticks_on_interval() -> None:
    runner = _runner(tick_interval=0.1, enabled=True)
    runner.advance(50)
    assert runner.player.target is None
    runner.advance(50)
    assert runner.player.target is not None or runner.state.pieces == 1


def test_advance_is_idle_while_paused() -> None:
    runner = _runner(enabled=True)
    runner.state.pause()
    runner.advance(10_000)
    assert runner.player.target is None
    assert runner.state.pieces == 0
