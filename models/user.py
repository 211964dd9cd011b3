"""
models/user.py
--------------
Domain model for registered users.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """
    Represents a registered user.

    The password hash lives only in the users table; it is never loaded
    back into this object.

    Attributes:
        id: Database primary key (None for new records).
        username: Unique login name.
        created_at: Timestamp when the record was created.
        updated_at: Timestamp of the last change.
    """
    username: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"u/{self.username}"


@dataclass
class UserSummary:
    """Author details attached to each entry of the post feed."""
    id: int
    username: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
