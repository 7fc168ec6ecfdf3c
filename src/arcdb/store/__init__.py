"""SQLite storage layer for arc-db."""

from .database import Database
from .export import export_table, export_tables, parse_table_list
from .maintenance import table_counts, vacuum

__all__ = [
    "Database",
    "export_table",
    "export_tables",
    "parse_table_list",
    "table_counts",
    "vacuum",
]
