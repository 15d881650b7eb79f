"""``pg_br ls``: print every backup under the backup root."""

from __future__ import annotations

import os
from typing import List

from pg_br.schemas.backups import BackupArtifact
from pg_br.services.registry import BackupRegistry

SEPARATOR = "─" * 50


def _print_artifacts(artifacts: List[BackupArtifact]) -> None:
    for index, artifact in enumerate(artifacts):
        print(f"   📁 {artifact.display_name}")
        print(f"      Size: {artifact.size_mb:.2f} MB")
        print(f"      Created: {artifact.created:%Y-%m-%d %H:%M:%S}")
        if index < len(artifacts) - 1:
            print()


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def list_command(registry: BackupRegistry) -> int:
    root = registry.backup_root()
    print(f"Listing backups from: {root}")
    print()

    if not os.path.exists(root):
        print("No backup directory found.")
        return 0

    groups = registry.database_groups(root)
    ungrouped = registry.list_flat(root)
    total = sum(len(group.artifacts) for group in groups) + len(ungrouped)
    if total == 0:
        print("No backup files found.")
        return 0

    print(f"Found {total} backup(s) across {len(groups)} database(s):")
    print()

    sections = [
        (f"🗂️  Database: {group.name}", group.artifacts) for group in groups
    ]
    if ungrouped:
        sections.append(("🗂️  Ungrouped backups", ungrouped))

    for index, (title, artifacts) in enumerate(sections):
        print(f"{title} ({len(artifacts)} backup{_plural(len(artifacts))})")
        print()
        _print_artifacts(artifacts)
        if index < len(sections) - 1:
            print()
            print(SEPARATOR)
            print()
    return 0
