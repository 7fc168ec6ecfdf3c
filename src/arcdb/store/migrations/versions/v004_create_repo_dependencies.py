"""Dependency edges between external repositories."""

VERSION = 4
NAME = "create_repo_dependencies"

STATEMENTS = [
    """
    CREATE TABLE repo_dependencies (
        repo_id INTEGER NOT NULL REFERENCES external_repos(id),
        depends_on_id INTEGER NOT NULL REFERENCES external_repos(id),
        kind TEXT NOT NULL DEFAULT 'runtime',
        recorded_at INTEGER NOT NULL,
        PRIMARY KEY (repo_id, depends_on_id)
    )
    """,
    "CREATE INDEX idx_repo_dependencies_target ON repo_dependencies(depends_on_id)",
]
