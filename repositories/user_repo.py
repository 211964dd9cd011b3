"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from psycopg2 import errors

from models.user import User
from repositories.exceptions import DuplicateUsernameError
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, conn):
        self.conn = conn

    def add(self, username: str, password_hash: str) -> User:
        """
        Insert a new user.

        Args:
            username: Unique login name.
            password_hash: bcrypt hash of the password (never the plaintext).

        Returns:
            The new User with `id` and timestamps populated.

        Raises:
            DuplicateUsernameError: If the username is already taken.
        """
        sql = """
            INSERT INTO users (username, password, created_at, updated_at)
            VALUES (%s, %s, NOW(), NOW())
            RETURNING id, username, created_at, updated_at;
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (username, password_hash))
                row = cur.fetchone()
        except errors.UniqueViolation as e:
            logger.warning(f"Username '{username}' is already taken")
            raise DuplicateUsernameError(username) from e
        except Exception as e:
            logger.error(f"Failed to add user '{username}': {e}")
            raise
        user = self._row_to_user(row)
        logger.info(f"Added user #{user.id} ({user.username})")
        return user

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert an (id, username, created_at, updated_at) row to a User."""
        return User(
            id=row[0],
            username=row[1],
            created_at=row[2],
            updated_at=row[3],
        )
