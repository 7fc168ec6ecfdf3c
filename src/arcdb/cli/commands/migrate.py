"""Migration commands for arc-db CLI."""

import sys

from ...core.config import Config
from ...core.exceptions import MigrationError
from ...core.types import AppliedRecord, MigrationStatus
from ...store.database import Database
from ...store.migrations import MigrationRunner, StatusReporter, build_report, default_catalog


def handle_migrate(args, config: Config) -> None:
    """Handle migrate subcommands.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Raises:
        MigrationError: If the catalog is malformed or a run fails.
    """
    if args.migrate_cmd == "status":
        _status(config, pretty=args.pretty)
    elif args.migrate_cmd == "up":
        db = Database(config.db_path, timeout=config.busy_timeout)
        db.connect()
        try:
            _up(db)
        finally:
            db.close()


def _status(config: Config, pretty: bool) -> None:
    # A missing file has nothing applied; it is not created.
    if config.db_path.exists():
        db = Database(config.db_path, timeout=config.busy_timeout, read_only=True)
        db.connect()
        try:
            reporter = StatusReporter(db)
            statuses = reporter.report()
            history = reporter.applied_history()
        finally:
            db.close()
    else:
        statuses = build_report(default_catalog(), {})
        history = []

    print(f"DB path: {config.db_path}")
    print()

    if pretty:
        _print_table(statuses)
    else:
        _print_list(statuses, history)


def _print_table(statuses: list[MigrationStatus]) -> None:
    rows = [("VERSION", "NAME", "APPLIED")]
    rows += [
        (f"{s.version:03d}", s.name, "yes" if s.is_applied else "no") for s in statuses
    ]
    widths = [max(len(row[i]) for row in rows) for i in range(2)]

    for version, name, applied in rows:
        print(f"{version:<{widths[0]}}  {name:<{widths[1]}}  {applied}")


def _print_list(statuses: list[MigrationStatus], history: list[AppliedRecord]) -> None:
    print("Applied:")
    if not history:
        print("  (none)")
    for record in history:
        print(f"  {record.version:03d} {record.name}")

    print()
    print("Available:")
    for status in statuses:
        mark = " (applied)" if status.is_applied else ""
        print(f"  {status.version:03d} {status.name}{mark}")


def _up(db: Database) -> None:
    runner = MigrationRunner(db)

    try:
        applied = runner.apply_pending()
    except MigrationError as e:
        for migration in e.applied:
            print(f"Applied {migration.version:03d} {migration.name}")
        print(f"{len(e.applied)} migration(s) applied before failure.", file=sys.stderr)
        if e.version is not None:
            print(f"Failed at {e.version:03d} {e.name}", file=sys.stderr)
        raise

    for migration in applied:
        print(f"Applied {migration.version:03d} {migration.name}")
    print(f"{len(applied)} migration(s) applied.")
