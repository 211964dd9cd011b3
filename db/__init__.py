"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool and the schema definition for
users, subreddits, posts and votes.
Repositories never reach for this module: they receive a connection.
"""
