"""Command-line interface for pg_br."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pg_br.commands import backup_command, list_command, remove_command, restore_command
from pg_br.core.config import load_config
from pg_br.core.errors import PgBrError
from pg_br.core.logging import setup_logging
from pg_br.services.registry import BackupRegistry

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130

USAGE = """Usage:
  pg_br backup [database_name] [backup_name] - Backup PostgreSQL database
  pg_br ls                                   - List all backups from destination
  pg_br restore [database_name]              - Restore database from backup file
  pg_br remove                               - Remove backup files from destination

Missing arguments are asked for interactively."""

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pg_br",
        description="Backup and restore PostgreSQL databases with pg_dump/pg_restore.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show usage")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    backup = subparsers.add_parser("backup", help="Backup a database")
    backup.add_argument("database", nargs="?", help="Database to dump")
    backup.add_argument("backup_name", nargs="?", help="Backup file name without .dump")

    subparsers.add_parser("ls", aliases=["list"], help="List backups")

    restore = subparsers.add_parser("restore", help="Restore a database from a backup")
    restore.add_argument("database", nargs="?", help="Database to restore into")

    subparsers.add_parser("remove", help="Remove backup files")
    subparsers.add_parser("help", help="Show usage")

    return parser


def _dispatch(args: argparse.Namespace, registry: BackupRegistry) -> int:
    if args.command == "backup":
        return backup_command(registry, args.database, args.backup_name)
    if args.command in ("ls", "list"):
        return list_command(registry)
    if args.command == "restore":
        return restore_command(registry, args.database)
    return remove_command(registry)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit status."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    if args.help or args.command in (None, "help"):
        print(USAGE)
        return EXIT_SUCCESS

    registry = BackupRegistry(load_config())
    try:
        return _dispatch(args, registry)
    except PgBrError as exc:
        print(f"✗ {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except OSError as exc:
        logger.error("command_failed | command=%s error=%s", args.command, exc)
        print(f"✗ {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except (KeyboardInterrupt, EOFError):
        print("\nOperation cancelled.", file=sys.stderr)
        return EXIT_CANCELLED


def run() -> None:
    sys.exit(main())
