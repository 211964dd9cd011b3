"""
models/vote.py
--------------
Domain model for a user's vote on a post.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

UPVOTE = 1
NO_VOTE = 0
DOWNVOTE = -1
VALID_DIRECTIONS = (UPVOTE, NO_VOTE, DOWNVOTE)


def is_valid_direction(direction) -> bool:
    """
    True for the ints -1, 0 and 1 only.

    bool is an int subclass, so True/False are excluded explicitly. Floats
    such as 1.0 are rejected too, even though they compare equal to 1:
    a direction is stored in a SMALLINT and must arrive as an int.
    """
    return (
        isinstance(direction, int)
        and not isinstance(direction, bool)
        and direction in VALID_DIRECTIONS
    )


@dataclass
class Vote:
    """
    Represents the current vote of one user on one post.

    (post_id, user_id) identifies the vote; voting again replaces
    vote_direction instead of adding a row.
    """
    post_id: int
    user_id: int
    vote_direction: int  # -1 | 0 | 1
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_upvote(self) -> bool:
        return self.vote_direction == UPVOTE

    def is_downvote(self) -> bool:
        return self.vote_direction == DOWNVOTE
