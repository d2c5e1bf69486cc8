"""
Leaderboard of finished games.

The engine never touches this module. Whoever drives the game reports
the final score and snake length here once a game ends.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol

from ..domain.constants import DEFAULT_HIGH_SCORE_LIMIT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighScore:
    score: int
    date: datetime
    length: int


class HighScoreStore(Protocol):
    """Durable storage for the leaderboard records."""

    def load(self) -> List[HighScore]:
        ...

    def save(self, records: List[HighScore]) -> None:
        ...


class InMemoryHighScoreStore:
    """Store that keeps records for the lifetime of the process only."""

    def __init__(self, records: Optional[List[HighScore]] = None):
        self._records: List[HighScore] = list(records or [])

    def load(self) -> List[HighScore]:
        return list(self._records)

    def save(self, records: List[HighScore]) -> None:
        self._records = list(records)


class Leaderboard:
    """
    Keeps the best `limit` records, highest score first.

    Among equal scores the earlier record ranks higher.
    """

    def __init__(self, store: HighScoreStore, limit: int = DEFAULT_HIGH_SCORE_LIMIT):
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self.store = store
        self.limit = limit

    def top(self) -> List[HighScore]:
        return self._ranked(self.store.load())

    def _ranked(self, records: List[HighScore]) -> List[HighScore]:
        return sorted(records, key=lambda record: -record.score)[: self.limit]

    def qualifies(self, score: int) -> bool:
        records = self.top()
        return len(records) < self.limit or score > records[-1].score

    def record(self, score: int, length: int, date: Optional[datetime] = None) -> Optional[int]:
        """
        Add a finished game to the leaderboard.

        Args:
            score: final score of the game
            length: snake length when the game ended
            date: when the game ended; defaults to now

        Returns:
            The 1-based rank of the new record, or None if it did not make
            the top `limit`.
        """
        entry = HighScore(score=score, date=date or datetime.now(), length=length)
        ranked = self._ranked(self.store.load() + [entry])
        self.store.save(ranked)

        for index, record in enumerate(ranked):
            if record is entry:
                logger.info("New high score %d (length %d) at rank %d", score, length, index + 1)
                return index + 1

        logger.debug("Score %d did not make the top %d", score, self.limit)
        return None
