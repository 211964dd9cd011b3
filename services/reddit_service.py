"""
services/reddit_service.py
--------------------------
The data access facade used by the web backend.
Orchestrates password hashing, vote validation and the repositories,
all over a single connection supplied by the caller.
"""

from typing import Optional

from models.post import Post, PostFeedEntry
from models.subreddit import Subreddit
from models.vote import Vote, is_valid_direction
from repositories.exceptions import InvalidVoteError
from repositories.post_repo import PostRepository
from repositories.subreddit_repo import SubredditRepository
from repositories.user_repo import UserRepository
from repositories.vote_repo import VoteRepository
from security.passwords import hash_password
from utils.logger import get_logger

logger = get_logger(__name__)


class RedditService:
    """
    Entry point for every user, subreddit, post and vote operation.

    The connection is owned by the caller: this class never opens,
    closes or releases it. It is switched to autocommit on construction,
    so every operation is a single-statement transaction and the
    instance can be shared between threads. Pass a connection that is
    not inside an open transaction.

    Usage:
        with connection() as conn:
            reddit = RedditService(conn)
            user_id = reddit.create_user("alice", "s3cret")
    """

    def __init__(self, conn):
        conn.autocommit = True
        self.conn = conn
        self.users = UserRepository(conn)
        self.subreddits = SubredditRepository(conn)
        self.posts = PostRepository(conn)
        self.votes = VoteRepository(conn)

    # ── WRITES ────────────────────────────────────────────

    def create_user(self, username: str, password: str) -> int:
        """
        Register a user, storing only a bcrypt hash of the password.

        Returns:
            The new user's id.

        Raises:
            PasswordTooLongError: If the password exceeds 72 bytes. Nothing is
                sent to the database in that case.
            DuplicateUsernameError: If the username is already taken.
        """
        user = self.users.add(username, hash_password(password))
        return user.id

    def create_subreddit(self, name: str, description: Optional[str] = None) -> int:
        """
        Create a subreddit.

        Returns:
            The new subreddit's id.

        Raises:
            DuplicateSubredditError: If the name is already in use.
        """
        subreddit = self.subreddits.add(Subreddit(name=name, description=description))
        return subreddit.id

    def create_post(self, user_id: int, title: str, url: Optional[str], subreddit_id: int) -> int:
        """
        Submit a post to a subreddit.

        Returns:
            The new post's id.

        Raises:
            SubredditNotFoundError: If `subreddit_id` matches no subreddit.
        """
        post = self.posts.add(
            Post(user_id=user_id, subreddit_id=subreddit_id, title=title, url=url)
        )
        return post.id

    def create_vote(self, post_id: int, user_id: int, vote_direction: int) -> Vote:
        """
        Cast or change a vote. A second vote by the same user on the same
        post replaces the first one.

        Args:
            post_id: Post being voted on.
            user_id: Voter.
            vote_direction: 1 (up), 0 (cleared) or -1 (down).

        Returns:
            The vote as stored.

        Raises:
            InvalidVoteError: If the direction is not -1, 0 or 1. Nothing is
                sent to the database in that case.
        """
        if not is_valid_direction(vote_direction):
            logger.warning(f"Rejected vote with direction {vote_direction!r} on post #{post_id}")
            raise InvalidVoteError(vote_direction)
        return self.votes.upsert(
            Vote(post_id=post_id, user_id=user_id, vote_direction=vote_direction)
        )

    # ── READS ─────────────────────────────────────────────

    def get_all_posts(self) -> list[PostFeedEntry]:
        """Top 25 posts by score, highest first, with author and subreddit."""
        return self.posts.get_feed()

    def get_all_subreddits(self) -> list[Subreddit]:
        """The 25 most recently created subreddits, newest first."""
        return self.subreddits.get_recent()

    def get_post(self, post_id: int) -> Optional[Post]:
        return self.posts.get_by_id(post_id)

    def get_vote(self, post_id: int, user_id: int) -> Optional[Vote]:
        return self.votes.get(post_id, user_id)
