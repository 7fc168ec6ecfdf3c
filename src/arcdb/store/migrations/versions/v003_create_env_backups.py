"""Backups of environment files taken before edits."""

VERSION = 3
NAME = "create_env_backups"

STATEMENTS = [
    """
    CREATE TABLE env_backups (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        session_id TEXT REFERENCES sessions(id),
        file_path TEXT NOT NULL,
        content TEXT NOT NULL,
        checksum TEXT NOT NULL,
        created_at INTEGER NOT NULL
    )
    """,
    "CREATE INDEX idx_env_backups_path ON env_backups(file_path, created_at)",
]
