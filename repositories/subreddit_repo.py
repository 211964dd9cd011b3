"""
repositories/subreddit_repo.py
-------------------------------
Data access layer for subreddits.
All SQL queries related to the `subreddits` table live here.
"""

from psycopg2 import errors

from config import SUBREDDIT_LIMIT
from models.subreddit import Subreddit
from repositories.exceptions import DuplicateSubredditError
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, name, description, created_at, updated_at"


class SubredditRepository:
    """Repository for CRUD operations on the subreddits table."""

    def __init__(self, conn):
        self.conn = conn

    # ── CREATE ────────────────────────────────────────────

    def add(self, subreddit: Subreddit) -> Subreddit:
        """
        Insert a new subreddit.

        Returns:
            The same Subreddit with `id` and timestamps populated.

        Raises:
            DuplicateSubredditError: If the name is already in use.
        """
        sql = f"""
            INSERT INTO subreddits (name, description, created_at, updated_at)
            VALUES (%s, %s, NOW(), NOW())
            RETURNING {_COLUMNS};
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (subreddit.name, subreddit.description))
                row = cur.fetchone()
        except errors.UniqueViolation as e:
            logger.warning(f"Subreddit '{subreddit.name}' already exists")
            raise DuplicateSubredditError(subreddit.name) from e
        except Exception as e:
            logger.error(f"Failed to add subreddit '{subreddit.name}': {e}")
            raise
        subreddit.id = row[0]
        subreddit.created_at = row[3]
        subreddit.updated_at = row[4]
        logger.info(f"Added subreddit #{subreddit.id} ({subreddit})")
        return subreddit

    # ── READ ──────────────────────────────────────────────

    def get_recent(self, limit: int = SUBREDDIT_LIMIT) -> list[Subreddit]:
        """
        List subreddits, newest first.

        Args:
            limit: Maximum number of rows to return.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM subreddits
            ORDER BY created_at DESC, id DESC
            LIMIT %s;
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (limit,))
                return [self._row_to_subreddit(r) for r in cur.fetchall()]
        except Exception as e:
            logger.error(f"Failed to list subreddits: {e}")
            raise

    @staticmethod
    def _row_to_subreddit(row: tuple) -> Subreddit:
        """Convert a database row tuple to a Subreddit domain object."""
        return Subreddit(
            id=row[0],
            name=row[1],
            description=row[2],
            created_at=row[3],
            updated_at=row[4],
        )
