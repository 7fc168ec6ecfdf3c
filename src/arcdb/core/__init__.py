"""Core configuration, errors and types for arc-db."""

from .config import Config
from .exceptions import (
    ArcDBError,
    CatalogError,
    ConfigError,
    DatabaseError,
    ExportError,
    MigrationError,
    MigrationExecutionError,
    StoreError,
)
from .types import AppliedRecord, MigrationStatus, TableCount

__all__ = [
    "Config",
    "ArcDBError",
    "ConfigError",
    "DatabaseError",
    "ExportError",
    "MigrationError",
    "CatalogError",
    "StoreError",
    "MigrationExecutionError",
    "AppliedRecord",
    "MigrationStatus",
    "TableCount",
]
