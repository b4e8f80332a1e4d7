from __future__ import annotations

import random

import pytest

from autotetris.__main__ import main
from autotetris.actuator import AutoPlayer
from autotetris.config import AutoplayConfig
from autotetris.game_state import GameState
from autotetris.runner import HeadlessRunner


def test_headless_run_places_pieces() -> None:
    game = GameState(rng=random.Random(7))
    player = AutoPlayer(game, AutoplayConfig(enabled=True))
    summary = HeadlessRunner(player).run(max_pieces=15)
    assert summary.pieces == 15
    assert summary.game_over is False
    assert summary.ticks > 0


def test_gravity_alone_eventually_ends_the_game() -> None:
    game = GameState(rng=random.Random(3))
    player = AutoPlayer(game)
    summary = HeadlessRunner(player, gravity_ticks=1).run(max_pieces=1000)
    assert summary.game_over is True


def test_nothing_moving_is_rejected() -> None:
    player = AutoPlayer(GameState())
    with pytest.raises(ValueError):
        HeadlessRunner(player, gravity_ticks=0).run()


def test_cli_headless_prints_summary(capsys) -> None:
    assert main(["--headless", "--pieces", "5", "--seed", "1", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "pieces=5" in out


def test_cli_rejects_bad_tick_interval() -> None:
    assert main(["--headless", "--tick-interval", "0"]) == 2
