"""Custom exceptions for arc-db."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..store.migrations.catalog import Migration


class ArcDBError(Exception):
    """Base exception for all arc-db errors."""

    pass


class ConfigError(ArcDBError):
    """Configuration value could not be parsed."""

    pass


class DatabaseError(ArcDBError):
    """Database operation failed."""

    pass


class ExportError(ArcDBError):
    """Table export failed."""

    pass


class MigrationError(ArcDBError):
    """Base exception for the migration engine.

    Attributes:
        applied: Migrations committed earlier in the run that failed.
        version: Version of the migration being applied when it failed, if any.
        name: Name of that migration, if any.
    """

    def __init__(
        self,
        message: str,
        applied: Sequence["Migration"] = (),
        version: int | None = None,
        name: str | None = None,
    ):
        super().__init__(message)
        self.applied = list(applied)
        self.version = version
        self.name = name


class CatalogError(MigrationError):
    """Migration catalog is malformed."""

    pass


class StoreError(MigrationError):
    """Tracking table could not be read or written."""

    pass


class MigrationExecutionError(MigrationError):
    """A migration's statements failed and were rolled back."""

    def __init__(
        self,
        version: int,
        name: str,
        cause: BaseException,
        statement_index: int | None = None,
    ):
        """Initialize exception with the failing migration's identity.

        Args:
            version: Version of the migration that failed.
            name: Name of the migration that failed.
            cause: Underlying database error.
            statement_index: 1-based position of the failing statement.
        """
        self.cause = cause
        self.statement_index = statement_index

        where = f" (statement {statement_index})" if statement_index else ""
        super().__init__(
            f"Migration {version:03d} {name} failed{where}: {cause}",
            version=version,
            name=name,
        )
