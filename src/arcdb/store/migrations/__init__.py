"""Versioned schema migrations for arc-db.

Applied migrations are recorded in the `schema_migrations` tracking table.

Example:
    from arcdb.store.migrations import MigrationRunner

    runner = MigrationRunner(db)
    applied = runner.apply_all()
"""

from .catalog import Migration, MigrationCatalog, default_catalog
from .runner import MigrationRunner, pending
from .status import StatusReporter, build_report
from .store import TRACKING_TABLE, AppliedSetStore

__all__ = [
    "Migration",
    "MigrationCatalog",
    "default_catalog",
    "MigrationRunner",
    "pending",
    "StatusReporter",
    "build_report",
    "AppliedSetStore",
    "TRACKING_TABLE",
]
