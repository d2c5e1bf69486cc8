"""
Database configuration and schema management for the high score table.

The leaderboard lives in a single SQLite file whose path comes from
SNAKE_HIGH_SCORE_DB (see snakecore.config).
"""

import logging
import os
import sqlite3
from typing import Optional

from ..config import get_high_score_db_path

logger = logging.getLogger(__name__)


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(db_path or get_high_score_db_path())
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the schema. Safe to call multiple times (uses IF NOT EXISTS).
    """
    db_path = db_path or get_high_score_db_path()
    directory = os.path.dirname(db_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    logger.debug("Initializing high score database at %s", db_path)

    conn = get_connection(db_path)
    cursor = conn.cursor()
    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS high_scores (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                score INTEGER NOT NULL CHECK(score >= 0),
                snake_length INTEGER NOT NULL CHECK(snake_length >= 1),
                achieved_at TEXT NOT NULL
            )
        """)
        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_high_scores_score
            ON high_scores(score DESC)
        """)
        conn.commit()
    except Exception:
        conn.rollback()
        logger.exception("Failed to initialize high score database at %s", db_path)
        raise
    finally:
        conn.close()
