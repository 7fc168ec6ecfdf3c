"""Export command for arc-db CLI."""

import sys

from ...core.config import Config
from ...store.database import Database
from ...store.export import export_tables, parse_table_list


def handle_export(args, config: Config) -> None:
    """Handle export command.

    Args:
        args: Parsed command arguments with tables and out.
        config: Application configuration.
    """
    tables = parse_table_list(args.tables) or list(config.export_tables)
    out_path = args.out.strip()

    db = Database(config.db_path, timeout=config.busy_timeout)
    db.connect()

    try:
        if not out_path:
            export_tables(db, tables, sys.stdout)
            return

        with open(out_path, "w", encoding="utf-8") as out:
            export_tables(db, tables, out)
        print(f"Exported {len(tables)} tables to {out_path}")
    finally:
        db.close()
