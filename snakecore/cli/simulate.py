"""
Run autopilot snake games and record their scores.

Usage:
    snakecore-simulate --games 5 --width 12 --height 12 --seed 7
    snakecore-simulate --watch --max-seconds 30

Defaults come from the environment (see snakecore.config); command line
flags override them.
"""

import argparse
import json
import logging
import random
import sys
from dataclasses import replace
from typing import Dict, List, Optional

from ..config import load_settings
from ..data_access import HighScoreRepository, InMemoryHighScoreStore, Leaderboard
from ..errors import ConfigurationError
from ..players import RandomPlayer
from ..services import ConsoleRenderer, GameDriver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run headless snake games driven by a random autopilot."
    )
    parser.add_argument("--games", type=int, default=1, help="Number of games to play")
    parser.add_argument("--width", type=int, help="Grid width")
    parser.add_argument("--height", type=int, help="Grid height")
    parser.add_argument("--length", type=int, help="Initial snake length")
    parser.add_argument("--speed", type=int, help="Initial speed (ticks per second)")
    parser.add_argument("--wrap", action="store_true", help="Wrap around the edges instead of walls")
    parser.add_argument("--max-ticks", type=int, default=2000, help="Tick limit per headless game")
    parser.add_argument("--max-seconds", type=float, help="Time limit per game in --watch mode")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible run")
    parser.add_argument("--watch", action="store_true", help="Play in real time and print every frame")
    parser.add_argument("--db", help="High score database path (overrides SNAKE_HIGH_SCORE_DB)")
    parser.add_argument("--no-save", action="store_true", help="Do not persist high scores")
    parser.add_argument("--env-file", help="Path to a .env file")
    return parser


def run_games(args: argparse.Namespace) -> List[Dict]:
    settings = load_settings(args.env_file)
    logging.getLogger().setLevel(settings.log_level)
    config = settings.game
    overrides = {}
    if args.width is not None:
        overrides["grid_width"] = args.width
    if args.height is not None:
        overrides["grid_height"] = args.height
    if args.length is not None:
        overrides["initial_snake_length"] = args.length
    if args.speed is not None:
        overrides["initial_speed"] = args.speed
    if args.wrap:
        overrides["wrap_mode"] = True
        overrides["wall_mode"] = False
    config = replace(config, **overrides)
    config.validate()

    if args.no_save:
        store = InMemoryHighScoreStore()
    else:
        store = HighScoreRepository(args.db or settings.high_score_db)
    leaderboard = Leaderboard(store, limit=settings.high_score_limit)

    rng = random.Random(args.seed)
    results = []
    for game_number in range(1, args.games + 1):
        renderers = [ConsoleRenderer(clear_screen=True)] if args.watch else []
        driver = GameDriver(config, rng=rng, leaderboard=leaderboard, renderers=renderers)
        player = RandomPlayer(rng)
        if args.watch:
            result = driver.run_realtime(player, max_seconds=args.max_seconds)
        else:
            result = driver.run(player, max_ticks=args.max_ticks)
        result["game"] = game_number
        logger.info(
            "Game %d finished: %s, score %d, length %d after %d ticks",
            game_number, result["status"], result["score"], result["length"], result["ticks"],
        )
        results.append(result)
    return results


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        results = run_games(args)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    print("\nSimulation Result Summary:")
    print(json.dumps(results, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
