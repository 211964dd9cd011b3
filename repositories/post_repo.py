"""
repositories/post_repo.py
-------------------------
Data access layer for posts and the ranked post feed.
All SQL queries related to the `posts` table live here.
"""

from typing import Optional

from psycopg2 import errors

from config import FEED_LIMIT
from db.init_db import POSTS_SUBREDDIT_FK
from models.post import Post, PostFeedEntry
from models.subreddit import SubredditSummary
from models.user import UserSummary
from repositories.exceptions import SubredditNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, user_id, subreddit_id, title, url, created_at, updated_at"

# Votes are LEFT JOINed so unvoted posts still appear with a score of 0.
FEED_SQL = """
    SELECT
        COALESCE(SUM(v.vote_direction), 0) AS score,
        p.id, p.user_id, p.subreddit_id, p.title, p.url, p.created_at, p.updated_at,
        u.id, u.username, u.created_at, u.updated_at,
        s.id, s.name, s.description, s.created_at, s.updated_at
    FROM posts p
    JOIN users u ON u.id = p.user_id
    JOIN subreddits s ON s.id = p.subreddit_id
    LEFT JOIN votes v ON v.post_id = p.id
    GROUP BY p.id, u.id, s.id
    ORDER BY score DESC, p.created_at DESC, p.id DESC
    LIMIT %s;
"""


class PostRepository:
    """Repository for CRUD operations on the posts table."""

    def __init__(self, conn):
        self.conn = conn

    # ── CREATE ────────────────────────────────────────────

    def add(self, post: Post) -> Post:
        """
        Insert a new post.

        Args:
            post: The Post domain object to persist.

        Returns:
            The same Post with its `id` and timestamps populated.

        Raises:
            SubredditNotFoundError: If `post.subreddit_id` matches no subreddit.
        """
        sql = f"""
            INSERT INTO posts (user_id, subreddit_id, title, url, created_at, updated_at)
            VALUES (%s, %s, %s, %s, NOW(), NOW())
            RETURNING {_COLUMNS};
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (post.user_id, post.subreddit_id, post.title, post.url))
                row = cur.fetchone()
        except errors.ForeignKeyViolation as e:
            if e.diag.constraint_name == POSTS_SUBREDDIT_FK:
                logger.warning(f"Rejected post for missing subreddit #{post.subreddit_id}")
                raise SubredditNotFoundError(post.subreddit_id) from e
            logger.error(f"Failed to add post: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to add post: {e}")
            raise
        post.id = row[0]
        post.created_at = row[5]
        post.updated_at = row[6]
        logger.info(f"Added post #{post.id} to subreddit #{post.subreddit_id} for user {post.user_id}")
        return post

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, post_id: int) -> Optional[Post]:
        """
        Fetch a single post by ID.

        Returns:
            A Post object or None if not found.
        """
        sql = f"SELECT {_COLUMNS} FROM posts WHERE id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (post_id,))
                row = cur.fetchone()
        except Exception as e:
            logger.error(f"Failed to fetch post #{post_id}: {e}")
            raise
        return self._row_to_post(row) if row else None

    def get_feed(self, limit: int = FEED_LIMIT) -> list[PostFeedEntry]:
        """
        Get the ranked post feed.

        Each entry carries the post's score (sum of its vote directions),
        the post, and summaries of its author and subreddit. Entries are
        ordered by score, highest first; ties go to the newest post.

        Args:
            limit: Maximum number of entries to return.
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(FEED_SQL, (limit,))
                rows = cur.fetchall()
        except Exception as e:
            logger.error(f"Failed to load the post feed: {e}")
            raise
        return [self._row_to_feed_entry(r) for r in rows]

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_post(row: tuple) -> Post:
        """Convert a database row tuple to a Post domain object."""
        return Post(
            id=row[0],
            user_id=row[1],
            subreddit_id=row[2],
            title=row[3],
            url=row[4],
            created_at=row[5],
            updated_at=row[6],
        )

    @classmethod
    def _row_to_feed_entry(cls, row: tuple) -> PostFeedEntry:
        """Split a flat FEED_SQL row into score, post, user and subreddit."""
        return PostFeedEntry(
            score=int(row[0]),
            post=cls._row_to_post(row[1:8]),
            user=UserSummary(
                id=row[8],
                username=row[9],
                created_at=row[10],
                updated_at=row[11],
            ),
            subreddit=SubredditSummary(
                id=row[12],
                name=row[13],
                description=row[14],
                created_at=row[15],
                updated_at=row[16],
            ),
        )
