"""Migration status reporting."""

from __future__ import annotations

from typing import Iterable, Mapping

from loguru import logger

from ...core.types import AppliedRecord, MigrationStatus
from ..database import Database
from .catalog import Migration, MigrationCatalog, default_catalog
from .store import AppliedSetStore


def build_report(
    catalog: Iterable[Migration], applied: Mapping[int, AppliedRecord]
) -> list[MigrationStatus]:
    """Join catalog and applied set into one entry per catalog migration.

    Args:
        catalog: Migration definitions.
        applied: Applied records keyed by version.

    Returns:
        Statuses sorted ascending by version.
    """
    report = []
    for migration in sorted(catalog, key=lambda m: m.version):
        record = applied.get(migration.version)
        report.append(
            MigrationStatus(
                version=migration.version,
                name=migration.name,
                is_applied=record is not None,
                applied_at=record.applied_at if record else None,
            )
        )
    return report


class StatusReporter:
    """Read-only view of applied and available migrations.

    The reporter never creates the tracking table; on a database that has
    never been migrated every migration is reported as not applied.
    """

    def __init__(self, db: Database, catalog: MigrationCatalog | None = None):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.store = AppliedSetStore(db)

    def report(self) -> list[MigrationStatus]:
        """Get the applied state of every catalog migration.

        Raises:
            StoreError: If the tracking table cannot be read.
        """
        statuses = build_report(self.catalog, self.store.load_applied())
        logger.debug(
            f"Migration status: {sum(s.is_applied for s in statuses)}/{len(statuses)} applied"
        )
        return statuses

    def applied_history(self) -> list[AppliedRecord]:
        """Get applied records sorted ascending by version.

        Includes records for versions no longer present in the catalog.

        Raises:
            StoreError: If the tracking table cannot be read.
        """
        applied = self.store.load_applied()
        return [applied[version] for version in sorted(applied)]
