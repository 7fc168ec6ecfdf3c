"""Session history table."""

VERSION = 1
NAME = "create_sessions"

STATEMENTS = [
    """
    CREATE TABLE sessions (
        id TEXT PRIMARY KEY,
        agent TEXT NOT NULL,
        cwd TEXT NOT NULL,
        started_at INTEGER NOT NULL,
        ended_at INTEGER,
        status TEXT NOT NULL DEFAULT 'active'
    )
    """,
    "CREATE INDEX idx_sessions_started ON sessions(started_at)",
]
