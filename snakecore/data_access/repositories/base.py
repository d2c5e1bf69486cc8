"""
Connection handling shared by the sqlite repositories.

Each unit of work opens its own connection to the high score file, so
repositories hold a path rather than a live connection.
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

from .. import database


class BaseRepository:
    """
    Base class for all repositories.

    Subclasses should use self.connection() to get database connections.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager for database connections.

        Args:
            auto_commit: If True, commit transaction on successful exit.

        Yields:
            A tuple of (connection, cursor) for database operations.

        Example:
            with self.connection() as (conn, cursor):
                cursor.execute("SELECT * FROM high_scores")
                results = cursor.fetchall()
        """
        conn = database.get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
