"""
Print the high score leaderboard.

Usage:
    snakecore-scores
    snakecore-scores --db /tmp/scores.db --limit 5
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import load_settings
from ..data_access import HighScoreRepository, Leaderboard
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def format_table(records) -> str:
    if not records:
        return "No high scores yet."
    lines = [f"{'#':>3}  {'Score':>5}  {'Length':>6}  Date"]
    for rank, record in enumerate(records, start=1):
        lines.append(
            f"{rank:>3}  {record.score:>5}  {record.length:>6}  "
            f"{record.date.strftime('%Y-%m-%d %H:%M')}"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show the snake high score leaderboard.")
    parser.add_argument("--db", help="High score database path (overrides SNAKE_HIGH_SCORE_DB)")
    parser.add_argument("--limit", type=int, help="Number of records to show")
    parser.add_argument("--env-file", help="Path to a .env file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        settings = load_settings(args.env_file)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    logging.getLogger().setLevel(settings.log_level)

    limit = args.limit or settings.high_score_limit
    leaderboard = Leaderboard(HighScoreRepository(args.db or settings.high_score_db), limit=limit)
    print(format_table(leaderboard.top()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
