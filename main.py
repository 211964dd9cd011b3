"""
main.py
-------
Bootstrap entry point for the Reddit data access layer.

Responsibilities:
    - Initialize the database connection pool.
    - Create the schema if it does not exist yet.
    - Log a short summary of what the database currently holds.
"""

from db.connection import close_pool, connection, init_pool
from db.init_db import create_tables
from services.reddit_service import RedditService
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Initialize the database and report the front page."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    try:
        with connection() as conn:
            create_tables(conn)

            # ── 2. Summary ────────────────────────────────
            reddit = RedditService(conn)
            subreddits = reddit.get_all_subreddits()
            feed = reddit.get_all_posts()
            logger.info(f"{len(subreddits)} recent subreddits, {len(feed)} posts on the front page")
            for entry in feed:
                logger.info(str(entry))
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    main()
