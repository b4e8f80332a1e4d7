from __future__ import annotations

from autotetris.actuator import Action, AutoPlayer
from autotetris.config import AutoplayConfig
from autotetris.tetromino import TetrominoType


def test_autoplayer_drops_vertical_i_into_well(make_game, well) -> None:
    game = make_game(TetrominoType.I, well(depth=4, gap=5))
    player = AutoPlayer(game, AutoplayConfig(enabled=True))

    # Spawn is rotation 0 at column 3: one rotation, two shifts, one drop.
    actions = [player.tick() for _ in range(4)]

    assert actions == [Action.ROTATE, Action.RIGHT, Action.RIGHT, Action.DROP]
    assert game.lines == 4
    assert not game.board.occupancy().any()
