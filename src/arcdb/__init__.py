"""arc-db: maintenance utility for the arc SQLite database."""

__version__ = "1.0.0"
