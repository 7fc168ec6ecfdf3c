"""External repositories cloned or referenced by sessions."""

VERSION = 2
NAME = "create_external_repos"

STATEMENTS = [
    """
    CREATE TABLE external_repos (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        url TEXT NOT NULL UNIQUE,
        local_path TEXT,
        default_branch TEXT,
        added_at INTEGER NOT NULL,
        last_synced_at INTEGER
    )
    """,
]
