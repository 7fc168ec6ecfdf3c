"""Applied-set store: the migration tracking table."""

from __future__ import annotations

import sqlite3

from loguru import logger

from ...core.exceptions import DatabaseError, StoreError
from ...core.types import AppliedRecord
from ..database import Database

TRACKING_TABLE = "schema_migrations"

TRACKING_TABLE_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {TRACKING_TABLE} (
    version INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    applied_at INTEGER NOT NULL
)
"""


class AppliedSetStore:
    """Repository for applied migration records.

    Records are only ever inserted. Each insert must happen inside the
    transaction that ran the migration's statements, so a record exists
    exactly when the migration's effects are committed.
    """

    def __init__(self, db: Database):
        """Initialize with database connection.

        Args:
            db: Database instance to use for operations.
        """
        self.db = db

    def ensure_tracking_table(self) -> None:
        """Create the tracking table if it does not exist.

        Raises:
            StoreError: If the table cannot be created.
        """
        try:
            if self.db.table_exists(TRACKING_TABLE):
                return
            self.db.execute(TRACKING_TABLE_SCHEMA)
        except DatabaseError as e:
            raise StoreError(f"Failed to create {TRACKING_TABLE}: {e}") from e

        logger.info(f"Created migration tracking table {TRACKING_TABLE}")

    def exists(self) -> bool:
        try:
            return self.db.table_exists(TRACKING_TABLE)
        except DatabaseError as e:
            raise StoreError(f"Failed to inspect {TRACKING_TABLE}: {e}") from e

    def load_applied(self) -> dict[int, AppliedRecord]:
        """Read all applied records, keyed by version.

        Returns an empty mapping when the tracking table does not exist yet.

        Raises:
            StoreError: If the table cannot be read.
        """
        if not self.exists():
            return {}

        try:
            cursor = self.db.execute(
                f"SELECT version, name, applied_at FROM {TRACKING_TABLE} ORDER BY version"
            )
            rows = cursor.fetchall()
        except DatabaseError as e:
            raise StoreError(f"Failed to read {TRACKING_TABLE}: {e}") from e

        return {
            row["version"]: AppliedRecord(
                version=row["version"],
                name=row["name"],
                applied_at=row["applied_at"],
            )
            for row in rows
        }

    def is_applied(self, cursor: sqlite3.Cursor, version: int) -> bool:
        """Check for a version's record using a transaction's cursor.

        Raises:
            StoreError: If the table cannot be read.
        """
        try:
            cursor.execute(
                f"SELECT 1 FROM {TRACKING_TABLE} WHERE version = ?", (version,)
            )
            return cursor.fetchone() is not None
        except sqlite3.Error as e:
            raise StoreError(f"Failed to read {TRACKING_TABLE}: {e}") from e

    def record_applied(
        self, cursor: sqlite3.Cursor, version: int, name: str, applied_at: int
    ) -> None:
        """Insert an applied record.

        Args:
            cursor: Cursor of the transaction that applied the migration.
            version: Migration version.
            name: Migration name at the time it was applied.
            applied_at: Commit timestamp in epoch seconds.

        Raises:
            StoreError: If the insert fails, including when the version is
                already recorded.
        """
        try:
            cursor.execute(
                f"INSERT INTO {TRACKING_TABLE} (version, name, applied_at) VALUES (?, ?, ?)",
                (version, name, applied_at),
            )
        except sqlite3.IntegrityError as e:
            raise StoreError(f"Migration {version:03d} is already recorded: {e}") from e
        except sqlite3.Error as e:
            raise StoreError(f"Failed to record migration {version:03d}: {e}") from e
