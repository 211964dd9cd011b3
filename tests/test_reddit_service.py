"""Unit tests for RedditService against a mocked psycopg2 connection."""

import pytest
from psycopg2 import errors

from repositories.exceptions import (
    DuplicateUsernameError,
    InvalidVoteError,
    PasswordTooLongError,
)
from security.passwords import verify_password
from services.reddit_service import RedditService
from tests.conftest import NOW


def test_create_user_stores_hash_not_plaintext(conn, cursor):
    cursor.fetchone.return_value = (1, "alice", NOW, NOW)

    user_id = RedditService(conn).create_user("alice", "hunter2")

    assert user_id == 1
    username, stored = cursor.execute.call_args.args[1]
    assert username == "alice"
    assert stored != "hunter2"
    assert verify_password("hunter2", stored)
    assert not verify_password("wrong", stored)


def test_create_user_duplicate(conn, cursor):
    cursor.execute.side_effect = errors.UniqueViolation("duplicate key")

    with pytest.raises(DuplicateUsernameError):
        RedditService(conn).create_user("alice", "hunter2")


def test_create_subreddit_returns_id(conn, cursor):
    cursor.fetchone.return_value = (7, "python", None, NOW, NOW)
    assert RedditService(conn).create_subreddit("python") == 7


def test_create_post_returns_post_id(conn, cursor):
    cursor.fetchone.return_value = (42, 1, 3, "Hello", "https://example.com", NOW, NOW)

    assert RedditService(conn).create_post(1, "Hello", "https://example.com", 3) == 42


@pytest.mark.parametrize("direction", [2, -5, True, 0.5, "1", None])
def test_invalid_vote_never_touches_storage(conn, direction):
    with pytest.raises(InvalidVoteError, match="Bad vote"):
        RedditService(conn).create_vote(10, 1, direction)

    conn.cursor.assert_not_called()
    conn.commit.assert_not_called()


def test_valid_vote_is_upserted(conn, cursor):
    cursor.fetchone.return_value = (10, 1, 1, NOW, NOW)

    vote = RedditService(conn).create_vote(10, 1, 1)

    assert (vote.post_id, vote.user_id, vote.vote_direction) == (10, 1, 1)
    assert cursor.execute.call_args.args[1] == (10, 1, 1)


def test_vote_storage_errors_are_not_swallowed(conn, cursor):
    cursor.execute.side_effect = errors.ForeignKeyViolation("no such post")

    with pytest.raises(errors.ForeignKeyViolation):
        RedditService(conn).create_vote(999, 1, 1)


def test_reads_delegate_to_repositories(conn, cursor):
    cursor.fetchall.return_value = []
    service = RedditService(conn)

    assert service.get_all_posts() == []
    assert service.get_all_subreddits() == []
    assert cursor.execute.call_count == 2


def test_service_never_closes_the_connection(conn, cursor):
    cursor.fetchall.return_value = []
    RedditService(conn).get_all_posts()
    conn.close.assert_not_called()


def test_service_switches_connection_to_autocommit(conn):
    conn.autocommit = False

    RedditService(conn)

    assert conn.autocommit is True


def test_failed_read_does_not_poison_the_next_operation(conn, cursor):
    service = RedditService(conn)
    cursor.execute.side_effect = [
        errors.UndefinedTable('relation "posts" does not exist'),
        errors.UniqueViolation("duplicate key"),
    ]

    with pytest.raises(errors.UndefinedTable):
        service.get_all_posts()
    with pytest.raises(DuplicateUsernameError):
        service.create_user("alice", "hunter2")

    conn.rollback.assert_not_called()


def test_failed_write_never_rolls_back_the_shared_connection(conn, cursor):
    # a rollback here would discard another caller's in-flight write
    service = RedditService(conn)
    cursor.execute.side_effect = errors.ForeignKeyViolation("no such post")

    with pytest.raises(errors.ForeignKeyViolation):
        service.create_vote(999, 1, 1)

    conn.rollback.assert_not_called()
    conn.commit.assert_not_called()


def test_overlong_password_is_refused_before_storage(conn):
    with pytest.raises(PasswordTooLongError):
        RedditService(conn).create_user("alice", "x" * 73)

    conn.cursor.assert_not_called()
