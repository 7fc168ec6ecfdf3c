"""Type definitions for arc-db."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppliedRecord:
    """A row of the migration tracking table."""

    version: int
    name: str
    applied_at: int  # epoch seconds


@dataclass(frozen=True)
class MigrationStatus:
    """Applied state of one catalog migration."""

    version: int
    name: str
    is_applied: bool
    applied_at: Optional[int] = None


@dataclass
class TableCount:
    """Row count for a table reported by `arc-db info`."""

    table: str
    rows: int
