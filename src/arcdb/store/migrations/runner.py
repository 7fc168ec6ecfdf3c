"""Database migration runner for arc-db.

Applied migrations are tracked in the `schema_migrations` table, one row per
version. Each pending migration runs in its own immediate transaction
together with the insert of its tracking row, so a migration is either fully
applied and recorded, or leaves no trace at all. A failed run can therefore
be resumed by running again.
"""

from __future__ import annotations

import sqlite3
import time
from typing import Iterable, Mapping

from loguru import logger

from ...core.exceptions import (
    DatabaseError,
    MigrationError,
    MigrationExecutionError,
    StoreError,
)
from ..database import Database
from .catalog import Migration, MigrationCatalog, default_catalog
from .store import AppliedSetStore


def pending(catalog: Iterable[Migration], applied: Mapping[int, object]) -> list[Migration]:
    """Get the catalog migrations whose version is not in the applied set.

    Args:
        catalog: Migration definitions.
        applied: Mapping (or any container) keyed by applied version.

    Returns:
        Unapplied migrations sorted ascending by version.
    """
    return sorted(
        (m for m in catalog if m.version not in applied),
        key=lambda m: m.version,
    )


class MigrationRunner:
    """Applies pending migrations to a SQLite database.

    Example:
        with Database(path) as db:
            runner = MigrationRunner(db)
            applied = runner.apply_all()
            print(f"Applied {applied} migration(s)")
    """

    def __init__(self, db: Database, catalog: MigrationCatalog | None = None):
        """Initialize with database connection.

        Args:
            db: Connected database to migrate.
            catalog: Migrations to apply (default: the bundled catalog).

        Raises:
            CatalogError: If the bundled catalog is malformed.
        """
        self.db = db
        self.catalog = catalog if catalog is not None else default_catalog()
        self.store = AppliedSetStore(db)

    def get_pending(self) -> list[Migration]:
        """Get migrations that haven't been applied yet.

        Raises:
            StoreError: If the tracking table cannot be read.
        """
        return pending(self.catalog, self.store.load_applied())

    def is_up_to_date(self) -> bool:
        return not self.get_pending()

    def apply_all(self) -> int:
        """Apply all pending migrations.

        Returns:
            Number of migrations applied.

        Raises:
            StoreError: If the tracking table cannot be read or written.
            MigrationExecutionError: If a migration's statements fail.
        """
        return len(self.apply_pending())

    def apply_pending(self) -> list[Migration]:
        """Apply all pending migrations in ascending version order.

        Processing stops at the first failure. Migrations committed before
        it stay committed and are attached to the raised error as `applied`.

        Returns:
            The migrations committed by this run.

        Raises:
            StoreError: If the tracking table cannot be read or written.
            MigrationExecutionError: If a migration's statements fail.
        """
        self.store.ensure_tracking_table()
        todo = self.get_pending()

        if not todo:
            logger.debug(
                f"Database at version {self.catalog.latest_version()}, "
                "no migrations to apply"
            )
            return []

        applied: list[Migration] = []

        for migration in todo:
            logger.info(f"Applying migration {migration.version:03d}: {migration.name}")

            try:
                committed = self._apply_one(migration)
            except MigrationError as e:
                logger.error(f"Migration {migration.version:03d} failed: {e}")
                e.applied = list(applied)
                if e.version is None:
                    e.version = migration.version
                    e.name = migration.name
                raise
            except DatabaseError as e:
                logger.error(f"Migration {migration.version:03d} failed: {e}")
                raise StoreError(
                    f"Migration {migration.version:03d} {migration.name} failed: {e}",
                    applied=applied,
                    version=migration.version,
                    name=migration.name,
                ) from e

            if committed:
                applied.append(migration)
                logger.debug(f"Migration {migration.version:03d} applied successfully")

        logger.info(f"Applied {len(applied)} migration(s)")
        return applied

    def _apply_one(self, migration: Migration) -> bool:
        """Run one migration and record it in a single transaction.

        Returns:
            False if another process recorded the version first.
        """
        with self.db.transaction() as cursor:
            # The write lock is held from here on, so this check cannot race.
            if self.store.is_applied(cursor, migration.version):
                logger.warning(
                    f"Migration {migration.version:03d} was applied concurrently, skipping"
                )
                return False

            for index, statement in enumerate(migration.statements, start=1):
                try:
                    cursor.execute(statement)
                except sqlite3.Error as e:
                    raise MigrationExecutionError(
                        migration.version, migration.name, e, statement_index=index
                    ) from e

            self.store.record_applied(
                cursor, migration.version, migration.name, int(time.time())
            )

        return True
