"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from utils.logger import get_logger

logger = get_logger(__name__)

# Constraint names referenced by the repositories when translating errors.
POSTS_SUBREDDIT_FK = "posts_subreddit_id_fkey"

SCHEMA_SQL = f"""
-- Users table: credentials are stored as bcrypt hashes only
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    username        VARCHAR(50) UNIQUE NOT NULL,
    password        VARCHAR(60) NOT NULL,
    created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at      TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

-- Subreddits table: topic communities, unique by name
CREATE TABLE IF NOT EXISTS subreddits (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(30) UNIQUE NOT NULL,
    description     VARCHAR(200),
    created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at      TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

-- Posts table: a link submitted by a user into a subreddit
CREATE TABLE IF NOT EXISTS posts (
    id              SERIAL PRIMARY KEY,
    user_id         INT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    subreddit_id    INT NOT NULL
                    CONSTRAINT {POSTS_SUBREDDIT_FK} REFERENCES subreddits(id) ON DELETE CASCADE,
    title           VARCHAR(300) NOT NULL,
    url             VARCHAR(2000),
    created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at      TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

-- Votes table: one row per (post, user); re-voting overwrites the direction
CREATE TABLE IF NOT EXISTS votes (
    post_id         INT NOT NULL REFERENCES posts(id) ON DELETE CASCADE,
    user_id         INT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    vote_direction  SMALLINT NOT NULL CHECK (vote_direction IN (-1, 0, 1)),
    created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    PRIMARY KEY (post_id, user_id)
);

-- Indexes for the feed joins and the subreddit listing
CREATE INDEX IF NOT EXISTS idx_posts_subreddit ON posts(subreddit_id);
CREATE INDEX IF NOT EXISTS idx_posts_user ON posts(user_id);
CREATE INDEX IF NOT EXISTS idx_subreddits_created ON subreddits(created_at DESC);
"""


def create_tables(conn) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        conn: An open psycopg2 connection; the caller keeps ownership.
    """
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import close_pool, connection, init_pool

    init_pool()
    try:
        with connection() as conn:
            create_tables(conn)
    finally:
        close_pool()
    print("Database schema created successfully.")
