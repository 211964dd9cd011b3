"""
Shared pytest fixtures.

`conn` is a MagicMock standing in for a psycopg2 connection; every
``with conn.cursor() as cur`` block yields the same scripted `cursor`.
`pg_conn` is a real connection to TEST_DATABASE_URL with a freshly
created schema (the test is skipped when the variable is not set).
"""

import os
from datetime import datetime, timezone
from unittest.mock import MagicMock

import psycopg2
import pytest

from db.init_db import create_tables

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def cursor():
    return MagicMock()


@pytest.fixture
def conn(cursor):
    connection = MagicMock()
    connection.cursor.return_value.__enter__.return_value = cursor
    return connection


@pytest.fixture
def pg_conn():
    url = os.environ.get("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL not set")

    connection = psycopg2.connect(url)
    with connection.cursor() as cur:
        cur.execute("DROP TABLE IF EXISTS votes, posts, subreddits, users CASCADE;")
    connection.commit()
    create_tables(connection)
    yield connection
    connection.rollback()
    connection.close()
