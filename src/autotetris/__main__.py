"""Command line entry point.

Run with: ``python -m autotetris`` for the pygame window, or
``python -m autotetris --headless`` to let the autoplayer run in the
terminal and print the final board.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .actuator import AutoPlayer
from .config import AutoplayConfig
from .errors import ConfigError
from .game_state import GameState
from .runner import HeadlessRunner
from .utils import render_ascii, render_grid


LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="autotetris", description=__doc__)
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window; autoplay is always on.",
    )
    parser.add_argument("--pieces", type=int, default=200, help="Pieces to play in headless mode.")
    parser.add_argument(
        "--tick-interval",
        type=float,
        default=None,
        help="Seconds between autoplay actions (default 0.2 or AUTOTETRIS_TICK_INTERVAL).",
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        default=None,
        help="Start the pygame window with autoplay enabled.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument("--width", type=int, default=10, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=20, help="Board height in cells.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def run_headless(args: argparse.Namespace, config: AutoplayConfig) -> int:
    game = GameState(args.width, args.height, rng=random.Random(args.seed))
    player = AutoPlayer(game, config.with_overrides(enabled=True))
    summary = HeadlessRunner(player).run(max_pieces=args.pieces)
    player.close()
    print(render_ascii(render_grid(game.board, game.active)))
    print(
        f"pieces={summary.pieces} lines={summary.lines} score={summary.score} "
        f"game_over={summary.game_over}"
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = AutoplayConfig.from_env().with_overrides(
            tick_interval=args.tick_interval, enabled=args.autoplay
        )
    except ConfigError as exc:
        LOGGER.error("%s", exc)
        return 2

    if args.headless:
        return run_headless(args, config)

    from .run_pygame import GameRunner  # local import, pygame is only needed here

    GameRunner(config, state=GameState(args.width, args.height, rng=random.Random(args.seed))).start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
