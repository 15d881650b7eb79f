"""Interactive prompts. Each one blocks on a single line of operator input."""

from __future__ import annotations

import os
from typing import List, Optional, Sequence

from pg_br.core.errors import BackupNameError, DatabaseNameError, SelectionError
from pg_br.schemas.backups import BACKUP_SUFFIX, BackupArtifact
from pg_br.services.selection import parse_single_selection, select_artifacts


def _print_numbered(title: str, labels: Sequence[str]) -> None:
    print(f"\n{title}")
    for index, label in enumerate(labels, start=1):
        print(f"  {index}. {label}")
    print()


def prompt_file_selection(
    artifacts: Sequence[BackupArtifact],
    labels: Optional[Sequence[str]] = None,
) -> BackupArtifact:
    """Ask for exactly one backup file."""
    if labels is None:
        labels = [artifact.name for artifact in artifacts]
    _print_numbered("Available backup files:", labels)
    answer = input("Select a backup file (enter number): ")
    return artifacts[parse_single_selection(answer, len(artifacts)) - 1]


def prompt_multi_file_selection(
    artifacts: Sequence[BackupArtifact],
    labels: Optional[Sequence[str]] = None,
) -> List[BackupArtifact]:
    """Ask for any number of backup files using indices and ranges.

    *labels* replaces the file names in the numbered list; the selection is
    evaluated against *artifacts* in the order shown.
    """
    if labels is None:
        labels = [artifact.name for artifact in artifacts]
    _print_numbered("Available backup files:", labels)
    answer = input('Select files to remove (e.g., "1,3,5" or "1-3,5"): ')
    return select_artifacts(answer, artifacts)


def prompt_confirmation(paths: Sequence[str]) -> bool:
    """Confirm a removal; only the literal answer ``yes`` accepts."""
    print("\nFiles to be removed:")
    for path in paths:
        print(f"  - {os.path.basename(path) or path}")
    print()
    answer = input("Are you sure you want to remove these files? (yes/no): ")
    return answer.strip().lower() == "yes"


def prompt_overwrite_confirmation(file_name: str) -> bool:
    """Ask before replacing an existing backup; Enter means yes."""
    answer = input(f"Backup file '{file_name}' already exists. Overwrite? (Y/n): ")
    return answer.strip().lower() in ("", "y", "yes")


def prompt_database_selection(databases: Sequence[str]) -> str:
    if not databases:
        raise SelectionError("No databases available to select.")
    _print_numbered("Available databases:", databases)
    answer = input("Select a database (enter number): ")
    return databases[parse_single_selection(answer, len(databases)) - 1]


def prompt_backup_name() -> str:
    """Ask for the backup name, without the ``.dump`` suffix."""
    name = input("Enter a name for the backup: ").strip()
    if name.endswith(BACKUP_SUFFIX):
        name = name[: -len(BACKUP_SUFFIX)]
    validate_backup_name(name)
    return name


def validate_backup_name(name: str) -> None:
    if not name:
        raise BackupNameError("Backup name cannot be empty.")
    if "/" in name or os.sep in name or name in (".", ".."):
        raise BackupNameError(f"Invalid backup name: {name}")


def validate_database_name(name: str) -> None:
    """Reject names that would leave the backup root or nest directories."""
    if not name:
        raise DatabaseNameError("Database name cannot be empty.")
    if "/" in name or os.sep in name or name in (".", ".."):
        raise DatabaseNameError(f"Invalid database name: {name}")
