"""Play several headless games with the autoplayer and report the results.

Run with::

    PYTHONPATH=src python examples/benchmark_autoplay.py

Pass ``--help`` to see options for the number of games, pieces per game and
how often to log progress.
"""

from __future__ import annotations

import argparse
import logging
import random
import time

from autotetris.actuator import AutoPlayer
from autotetris.config import AutoplayConfig
from autotetris.game_state import GameState
from autotetris.runner import HeadlessRunner, RunSummary


LOGGER = logging.getLogger(__name__)


def play_game(seed: int, pieces: int) -> RunSummary:
    game = GameState(rng=random.Random(seed))
    player = AutoPlayer(game, AutoplayConfig(enabled=True))
    try:
        return HeadlessRunner(player).run(max_pieces=pieces)
    finally:
        player.close()


def print_table(results: list[tuple[int, RunSummary, float]]) -> None:
    header = f"{'Seed':>6}  {'Pieces':>6}  {'Lines':>6}  {'Score':>7}  {'Over':>5}  {'Time (s)':>8}"
    print(header)
    print("-" * len(header))
    for seed, summary, elapsed in results:
        print(
            f"{seed:6d}  {summary.pieces:6d}  {summary.lines:6d}  {summary.score:7d}"
            f"  {str(summary.game_over):>5}  {elapsed:8.3f}"
        )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--games", type=int, default=5, help="Number of games to play.")
    parser.add_argument("--pieces", type=int, default=500, help="Piece limit per game.")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first game.")
    parser.add_argument(
        "--log-interval",
        type=int,
        default=1,
        help="Log a progress line every N games (0 disables periodic logging).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    results: list[tuple[int, RunSummary, float]] = []
    for index in range(args.games):
        seed = args.seed + index
        start = time.perf_counter()
        summary = play_game(seed, args.pieces)
        elapsed = time.perf_counter() - start
        results.append((seed, summary, elapsed))
        if args.log_interval > 0 and (index + 1) % args.log_interval == 0:
            LOGGER.info(
                "Game %d (seed %d): %d pieces, %d lines in %.2fs",
                index + 1,
                seed,
                summary.pieces,
                summary.lines,
                elapsed,
            )

    print_table(results)


if __name__ == "__main__":
    main()
