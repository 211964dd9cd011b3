"""
repositories/exceptions.py
--------------------------
Domain-level errors raised by the data access layer.

Known PostgreSQL constraint violations are translated into these so callers
never have to inspect psycopg2 error codes. Anything not listed here reaches
the caller as the original psycopg2 exception.
"""


class RedditError(Exception):
    """Base class for all domain errors of this package."""


class InvalidVoteError(RedditError):
    """Raised when a vote direction is not one of -1, 0 or 1."""

    def __init__(self, direction=None):
        super().__init__(f"Bad vote: direction must be -1, 0 or 1 (got {direction!r})")
        self.direction = direction


class DuplicateUsernameError(RedditError):
    """Raised when the username is already taken."""

    def __init__(self, username: str):
        super().__init__("A user with this username already exists")
        self.username = username


class DuplicateSubredditError(RedditError):
    """Raised when a subreddit with the same name already exists."""

    def __init__(self, name: str):
        super().__init__("A subreddit with this name already exists")
        self.name = name


class PasswordTooLongError(RedditError):
    """Raised when a password is longer than bcrypt can hash (72 bytes)."""

    def __init__(self, max_bytes: int):
        super().__init__(f"Password must be at most {max_bytes} bytes")
        self.max_bytes = max_bytes


class SubredditNotFoundError(RedditError):
    """Raised when a post references a subreddit id that does not exist."""

    def __init__(self, subreddit_id: int):
        super().__init__("This subreddit does not exist")
        self.subreddit_id = subreddit_id


__all__ = [
    "RedditError",
    "InvalidVoteError",
    "DuplicateUsernameError",
    "DuplicateSubredditError",
    "SubredditNotFoundError",
    "PasswordTooLongError",
]
