"""
models/subreddit.py
-------------------
Domain model for subreddits (topic communities).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Subreddit:
    """
    Represents a subreddit.

    Attributes:
        id: Database primary key (None for new records).
        name: Unique community name.
        description: Optional free-text blurb.
        created_at: Timestamp when the record was created.
        updated_at: Timestamp of the last change.
    """
    name: str
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"r/{self.name}"


@dataclass
class SubredditSummary:
    """Subreddit details attached to each entry of the post feed."""
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
