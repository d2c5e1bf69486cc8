"""
SQLite-backed high score storage.
"""

import logging
from datetime import datetime
from typing import List, Optional

from .. import database
from ..high_scores import HighScore
from .base import BaseRepository

logger = logging.getLogger(__name__)


class HighScoreRepository(BaseRepository):
    """
    Persists the leaderboard in the high_scores table.

    Implements the HighScoreStore interface (load/save) so it can be handed
    to a Leaderboard directly.
    """

    def __init__(self, db_path: Optional[str] = None, initialize: bool = True):
        super().__init__(db_path)
        if initialize:
            database.init_database(db_path)

    @staticmethod
    def _row_to_record(row) -> HighScore:
        return HighScore(
            score=row["score"],
            date=datetime.fromisoformat(row["achieved_at"]),
            length=row["snake_length"],
        )

    def load(self) -> List[HighScore]:
        """Return every stored record, best score first (ties in insertion order)."""
        with self.connection(auto_commit=False) as (_, cursor):
            cursor.execute("""
                SELECT score, snake_length, achieved_at
                FROM high_scores
                ORDER BY score DESC, id ASC
            """)
            return [self._row_to_record(row) for row in cursor.fetchall()]

    def save(self, records: List[HighScore]) -> None:
        """Replace the stored leaderboard with records, keeping their order."""
        with self.connection() as (_, cursor):
            cursor.execute("DELETE FROM high_scores")
            cursor.executemany(
                """
                INSERT INTO high_scores (score, snake_length, achieved_at)
                VALUES (?, ?, ?)
                """,
                [(r.score, r.length, r.date.isoformat()) for r in records],
            )
        logger.debug("Saved %d high score records", len(records))

    def top(self, limit: int) -> List[HighScore]:
        with self.connection(auto_commit=False) as (_, cursor):
            cursor.execute(
                """
                SELECT score, snake_length, achieved_at
                FROM high_scores
                ORDER BY score DESC, id ASC
                LIMIT ?
                """,
                (limit,),
            )
            return [self._row_to_record(row) for row in cursor.fetchall()]
