"""Routine maintenance operations: table counts and compaction."""

from typing import Iterable

from loguru import logger

from ..core.types import TableCount
from .database import Database


def quote_identifier(name: str) -> str:
    """Quote a table name for interpolation into SQL."""
    return '"' + name.replace('"', '""') + '"'


def table_counts(db: Database, tables: Iterable[str]) -> list[TableCount]:
    """Count rows in each existing table.

    Tables that do not exist are skipped.

    Args:
        db: Connected database.
        tables: Table names, reported in the given order.
    """
    counts = []
    for table in tables:
        if not db.table_exists(table):
            logger.debug(f"Skipping missing table {table}")
            continue
        cursor = db.execute(f"SELECT count(*) FROM {quote_identifier(table)}")
        counts.append(TableCount(table=table, rows=cursor.fetchone()[0]))
    return counts


def vacuum(db: Database) -> None:
    """Rebuild the database file to reclaim free pages."""
    db.execute("VACUUM")
    logger.info(f"VACUUM completed for {db.path}")
