"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive a psycopg2 connection at construction, return domain
model objects, and translate known constraint violations into the errors
defined in `repositories.exceptions`.

The connection must be in autocommit mode (RedditService switches it on):
every statement is its own transaction, so a failed statement never leaves
the shared connection aborted and one caller's failure cannot roll back
another caller's write.
"""
