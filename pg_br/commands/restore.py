"""``pg_br restore``: restore a database from one of its backups."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pg_br.core.postgres import list_databases, run_pg_restore
from pg_br.prompts import (
    prompt_database_selection,
    prompt_file_selection,
    validate_database_name,
)
from pg_br.schemas.backups import BackupArtifact
from pg_br.services.registry import BackupRegistry


def restore_candidates(
    registry: BackupRegistry, database: str
) -> Tuple[List[BackupArtifact], List[str]]:
    """Backups of *database* followed by the root-level (ungrouped) backups."""
    root = registry.backup_root()
    artifacts = registry.list_for_database(database, root)
    labels = [artifact.name for artifact in artifacts]
    for artifact in registry.list_flat(root):
        artifacts.append(artifact)
        labels.append(f"[ungrouped] {artifact.name}")
    return artifacts, labels


def _restorable_databases(registry: BackupRegistry) -> List[str]:
    databases = list(registry.list_grouped())
    # ungrouped dumps carry no database name, so any server database is a target
    if registry.list_flat():
        databases = sorted(set(databases) | set(list_databases()))
    return databases


def restore_command(registry: BackupRegistry, database: Optional[str] = None) -> int:
    if not database:
        database = prompt_database_selection(_restorable_databases(registry))
        print(f"Selected database: {database}")
    validate_database_name(database)

    print(f"Preparing to restore database '{database}'...")

    artifacts, labels = restore_candidates(registry, database)
    if not artifacts:
        print(f"No backup files found for database '{database}'.")
        print('Use "pg_br ls" to check available backups.')
        return 0

    selected = prompt_file_selection(artifacts, labels)
    print(f"\nSelected backup file: {selected.path}")
    print(f"Restoring to database '{database}'...")
    run_pg_restore(database, selected.path)
    print(f"✓ Database '{database}' restored successfully from {selected.path}")
    return 0
