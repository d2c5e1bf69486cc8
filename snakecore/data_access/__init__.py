"""
Data access layer for the high score leaderboard.

This module provides the HighScoreStore interface, its in-memory and
SQLite implementations, and the Leaderboard that keeps the top-N records.
"""

from .database import get_connection, init_database
from .high_scores import HighScore, HighScoreStore, InMemoryHighScoreStore, Leaderboard
from .repositories import BaseRepository, HighScoreRepository

__all__ = [
    'get_connection',
    'init_database',
    'HighScore',
    'HighScoreStore',
    'InMemoryHighScoreStore',
    'Leaderboard',
    'BaseRepository',
    'HighScoreRepository',
]
