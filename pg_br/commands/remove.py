"""``pg_br remove``: delete backups chosen by the operator."""

from __future__ import annotations

import logging
import os
from typing import List, Tuple

from pg_br.prompts import prompt_confirmation, prompt_multi_file_selection
from pg_br.schemas.backups import BackupArtifact
from pg_br.services.registry import BackupRegistry

logger = logging.getLogger(__name__)


def removal_candidates(registry: BackupRegistry) -> Tuple[List[BackupArtifact], List[str]]:
    """Artifacts in display order with their labels.

    Grouped backups come first, by database name, then backups stored
    directly in the root.
    """
    root = registry.backup_root()
    artifacts: List[BackupArtifact] = []
    labels: List[str] = []
    for group in registry.database_groups(root):
        for artifact in group.artifacts:
            artifacts.append(artifact)
            labels.append(f"[{group.name}] {artifact.name}")
    for artifact in registry.list_flat(root):
        artifacts.append(artifact)
        labels.append(artifact.name)
    return artifacts, labels


def remove_command(registry: BackupRegistry) -> int:
    print("Preparing to remove backup files...")

    artifacts, labels = removal_candidates(registry)
    if not artifacts:
        print("No backup files found in the destination directory.")
        print('Use "pg_br ls" to check available backups.')
        return 0

    selected = prompt_multi_file_selection(artifacts, labels)
    if not selected:
        print("No files selected.")
        return 0

    paths = [artifact.path for artifact in selected]
    if not prompt_confirmation(paths):
        print("Operation cancelled.")
        return 0

    print("\nRemoving selected files...")
    removed = 0
    failed = 0
    for path in paths:
        file_name = os.path.basename(path)
        try:
            os.remove(path)
        except OSError as exc:
            logger.warning("backup_remove_failed | path=%s error=%s", path, exc)
            print(f"✗ Failed to remove: {file_name}")
            failed += 1
        else:
            logger.info("backup_removed | path=%s", path)
            print(f"✓ Removed: {file_name}")
            removed += 1

    print(f"\nOperation completed: {removed} removed, {failed} failed.")
    return 1 if failed else 0
