"""JSONL export of database tables.

Each row becomes one line::

    {"table": "sessions", "row": {"id": "abc", ...}, "ts": 1700000000}
"""

import json
import sqlite3
import time
from typing import Any, Iterable, TextIO

from loguru import logger

from ..core.exceptions import DatabaseError, ExportError
from .database import Database
from .maintenance import quote_identifier


def parse_table_list(csv: str | None) -> list[str]:
    """Split a comma-separated table list, dropping blanks."""
    if not csv or not csv.strip():
        return []
    return [part.strip() for part in csv.split(",") if part.strip()]


def _to_json_value(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return value


def export_table(db: Database, table: str, out: TextIO) -> int:
    """Write every row of a table to `out` as JSON lines.

    A missing table is skipped and counts as zero rows.

    Returns:
        Number of rows written.

    Raises:
        ExportError: If the table cannot be read or written out.
    """
    try:
        if not db.table_exists(table):
            logger.warning(f"Table {table} does not exist, skipping export")
            return 0
        cursor = db.execute(f"SELECT * FROM {quote_identifier(table)}")
        columns = [col[0] for col in cursor.description]

        rows = 0
        for values in cursor:
            row = {col: _to_json_value(val) for col, val in zip(columns, values)}
            record = {"table": table, "row": row, "ts": int(time.time())}
            out.write(json.dumps(record) + "\n")
            rows += 1
    except (DatabaseError, sqlite3.Error, OSError, TypeError, ValueError) as e:
        raise ExportError(f"export {table}: {e}") from e

    logger.debug(f"Exported {rows} row(s) from {table}")
    return rows


def export_tables(db: Database, tables: Iterable[str], out: TextIO) -> int:
    """Export several tables in order.

    Returns:
        Total number of rows written.
    """
    return sum(export_table(db, table, out) for table in tables)
