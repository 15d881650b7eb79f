"""``pg_br backup``: dump a database into the grouped backup layout."""

from __future__ import annotations

import logging
import os
from typing import Optional

from pg_br.core.postgres import list_databases, run_pg_dump
from pg_br.prompts import (
    prompt_backup_name,
    prompt_database_selection,
    prompt_overwrite_confirmation,
    validate_backup_name,
    validate_database_name,
)
from pg_br.schemas.backups import BACKUP_SUFFIX
from pg_br.services.registry import BackupRegistry

logger = logging.getLogger(__name__)


def backup_command(
    registry: BackupRegistry,
    database: Optional[str] = None,
    backup_name: Optional[str] = None,
) -> int:
    if not database:
        database = prompt_database_selection(list_databases())
        print(f"Selected database: {database}")
    validate_database_name(database)

    if not backup_name:
        backup_name = prompt_backup_name()
    else:
        backup_name = backup_name.strip()
        if backup_name.endswith(BACKUP_SUFFIX):
            backup_name = backup_name[: -len(BACKUP_SUFFIX)]
    validate_backup_name(backup_name)

    if registry.config.destination:
        print(f"Using configured backup destination: {registry.backup_root()}")
    else:
        print("No config found, using current directory")

    backup_dir = registry.database_dir(database)
    if not os.path.exists(backup_dir):
        print(f"Creating backup directory: {backup_dir}")
        os.makedirs(backup_dir, exist_ok=True)

    file_name = f"{backup_name}{BACKUP_SUFFIX}"
    backup_path = os.path.join(backup_dir, file_name)
    if os.path.exists(backup_path) and not prompt_overwrite_confirmation(file_name):
        print("Backup cancelled.")
        return 0

    print(f"Creating backup of database '{database}' as '{file_name}'...")
    run_pg_dump(database, backup_path)
    print(f"✓ Backup created successfully: {backup_path}")
    return 0
