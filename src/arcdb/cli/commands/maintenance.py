"""Info, vacuum and path commands for arc-db CLI."""

from ...core.config import Config
from ...store.database import Database
from ...store.maintenance import table_counts, vacuum


def _open(config: Config) -> Database:
    db = Database(config.db_path, timeout=config.busy_timeout)
    db.connect()
    return db


def handle_info(args, config: Config) -> None:
    """Handle info command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    db = _open(config)

    try:
        print(f"DB path: {config.db_path}")
        print(f"SQLite version: {db.sqlite_version()}")
        print()

        for count in table_counts(db, config.info_tables):
            print(f"{count.table + ':':<20} {count.rows}")
    finally:
        db.close()


def handle_vacuum(args, config: Config) -> None:
    """Handle vacuum command."""
    db = _open(config)

    try:
        vacuum(db)
        print(f"VACUUM completed for {config.db_path}")
    finally:
        db.close()


def handle_path(args, config: Config) -> None:
    """Handle path command."""
    print(config.db_path)
