"""CLI entry point for arc-db."""

import argparse
import sys
from typing import NoReturn, Sequence

from .. import __version__
from ..core.config import Config
from ..core.logging import configure_logging
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="arc-db",
        description="Database operations including info, migrations, vacuum, and export",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("info", help="Show database info and table counts")

    # Migration commands
    migrate_parser = subparsers.add_parser("migrate", help="Migration commands")
    migrate_subparsers = migrate_parser.add_subparsers(dest="migrate_cmd", required=True)

    status_parser = migrate_subparsers.add_parser(
        "status", help="Show applied and available migrations"
    )
    status_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Show migrations in a formatted table",
    )
    migrate_subparsers.add_parser("up", help="Apply pending migrations")

    subparsers.add_parser("vacuum", help="Run VACUUM on the database")

    export_parser = subparsers.add_parser("export", help="Export tables to JSONL")
    export_parser.add_argument("--tables", default="", help="Comma-separated table list")
    export_parser.add_argument(
        "--out", default="", help="Output file path (default: stdout)"
    )

    subparsers.add_parser("path", help="Print database file path")

    return parser


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
        configure_logging("DEBUG" if args.verbose else config.log_level)

        if args.command == "info":
            commands.handle_info(args, config)
        elif args.command == "migrate":
            commands.handle_migrate(args, config)
        elif args.command == "vacuum":
            commands.handle_vacuum(args, config)
        elif args.command == "export":
            commands.handle_export(args, config)
        elif args.command == "path":
            commands.handle_path(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
