"""
repositories/vote_repo.py
-------------------------
Data access layer for votes.
"""

from typing import Optional

from models.vote import Vote
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "post_id, user_id, vote_direction, created_at, updated_at"


class VoteRepository:
    """Repository for the votes table."""

    def __init__(self, conn):
        self.conn = conn

    def upsert(self, vote: Vote) -> Vote:
        """
        Record a vote, replacing any earlier vote by the same user on the same post.
        Uses PostgreSQL's ON CONFLICT on the (post_id, user_id) primary key.

        Returns:
            The vote as stored, with timestamps populated.
        """
        sql = f"""
            INSERT INTO votes (post_id, user_id, vote_direction, created_at, updated_at)
            VALUES (%s, %s, %s, NOW(), NOW())
            ON CONFLICT (post_id, user_id)
            DO UPDATE SET vote_direction = EXCLUDED.vote_direction, updated_at = NOW()
            RETURNING {_COLUMNS};
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (vote.post_id, vote.user_id, vote.vote_direction))
                row = cur.fetchone()
        except Exception as e:
            logger.error(f"Failed to record vote on post #{vote.post_id} by user {vote.user_id}: {e}")
            raise
        stored = self._row_to_vote(row)
        if stored.is_upvote():
            action = "upvoted"
        elif stored.is_downvote():
            action = "downvoted"
        else:
            action = "cleared their vote on"
        logger.info(f"User {stored.user_id} {action} post #{stored.post_id}")
        return stored

    def get(self, post_id: int, user_id: int) -> Optional[Vote]:
        """Fetch the current vote of a user on a post, or None."""
        sql = f"SELECT {_COLUMNS} FROM votes WHERE post_id = %s AND user_id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (post_id, user_id))
                row = cur.fetchone()
        except Exception as e:
            logger.error(f"Failed to fetch vote on post #{post_id} by user {user_id}: {e}")
            raise
        return self._row_to_vote(row) if row else None

    @staticmethod
    def _row_to_vote(row: tuple) -> Vote:
        """Convert a database row tuple to a Vote domain object."""
        return Vote(
            post_id=row[0],
            user_id=row[1],
            vote_direction=row[2],
            created_at=row[3],
            updated_at=row[4],
        )
