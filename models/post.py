"""
models/post.py
--------------
Domain models for posts and for the ranked post feed.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.subreddit import SubredditSummary
from models.user import UserSummary


@dataclass
class Post:
    """
    Represents a link submitted by a user into a subreddit.

    Attributes:
        id: Database primary key (None for new records).
        user_id: Author (users.id).
        subreddit_id: Target community (subreddits.id).
        title: Headline shown in listings.
        url: Link target.
        created_at: Timestamp when the record was created.
        updated_at: Timestamp of the last change.
    """
    user_id: int
    subreddit_id: int
    title: str
    url: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.title} ({self.url})"


@dataclass
class PostFeedEntry:
    """
    One row of the post feed.

    Attributes:
        score: Sum of all vote directions on the post (0 when unvoted).
        post: The post itself.
        user: Summary of the post's author.
        subreddit: Summary of the subreddit the post belongs to.
    """
    score: int
    post: Post
    user: UserSummary
    subreddit: SubredditSummary

    def __str__(self) -> str:
        return f"[{self.score:+d}] {self.post.title} by {self.user.username} in r/{self.subreddit.name}"
