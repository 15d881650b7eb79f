"""Service for discovering backup artifacts on disk."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Dict, List, Optional

from pg_br.core.errors import RegistryError
from pg_br.schemas.backups import BACKUP_SUFFIX, BackupArtifact, DatabaseGroup
from pg_br.schemas.config import Config

logger = logging.getLogger(__name__)


def _created_at(stat: os.stat_result) -> float:
    """Creation time where the platform records it, modification time otherwise."""
    return getattr(stat, "st_birthtime", None) or stat.st_mtime


def _sort_key(artifact: BackupArtifact):
    return (-artifact.created.timestamp(), artifact.name)


class BackupRegistry:
    """Lists ``.dump`` files under the configured backup root.

    Layout:
    - flat: ``<root>/<backup>.dump``
    - grouped: ``<root>/<database>/<backup>.dump``

    Nothing is cached; every call reads the filesystem again.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()

    def backup_root(self) -> str:
        """Absolute configured destination, or the current working directory."""
        if self.config.destination:
            return os.path.abspath(self.config.destination)
        return os.getcwd()

    def database_dir(self, database: str, root: Optional[str] = None) -> str:
        """Directory holding the backups of *database* in the grouped layout."""
        return os.path.join(root or self.backup_root(), database)

    def list_flat(self, root: Optional[str] = None) -> List[BackupArtifact]:
        """Backups stored directly in *root*, newest first."""
        return self._scan_directory(root or self.backup_root())

    def list_for_database(self, database: str, root: Optional[str] = None) -> List[BackupArtifact]:
        """Backups of a single database, newest first."""
        return self._scan_directory(self.database_dir(database, root))

    def list_grouped(self, root: Optional[str] = None) -> Dict[str, List[BackupArtifact]]:
        """Backups per database subdirectory.

        Subdirectories without any backup are left out and keys are ordered by
        database name.
        """
        root = root or self.backup_root()
        if not os.path.exists(root):
            return {}

        try:
            with os.scandir(root) as entries:
                databases = sorted(entry.name for entry in entries if entry.is_dir())
        except OSError as exc:
            raise RegistryError(root, exc) from exc

        grouped: Dict[str, List[BackupArtifact]] = {}
        for database in databases:
            artifacts = self._scan_directory(os.path.join(root, database))
            if artifacts:
                grouped[database] = artifacts
        return grouped

    def database_groups(self, root: Optional[str] = None) -> List[DatabaseGroup]:
        return [
            DatabaseGroup(name=name, artifacts=artifacts)
            for name, artifacts in self.list_grouped(root).items()
        ]

    def _scan_directory(self, directory: str) -> List[BackupArtifact]:
        if not os.path.exists(directory):
            return []

        try:
            with os.scandir(directory) as it:
                entries = [
                    entry
                    for entry in it
                    if entry.name.endswith(BACKUP_SUFFIX) and entry.is_file()
                ]
        except OSError as exc:
            raise RegistryError(directory, exc) from exc

        artifacts: List[BackupArtifact] = []
        for entry in entries:
            try:
                stat = entry.stat()
            except OSError as exc:
                # The file may have been removed since the directory was read
                logger.warning("backup_stat_failed | path=%s error=%s", entry.path, exc)
                continue
            artifacts.append(
                BackupArtifact(
                    name=entry.name,
                    path=os.path.abspath(entry.path),
                    size=stat.st_size,
                    created=datetime.fromtimestamp(_created_at(stat)),
                    modified=datetime.fromtimestamp(stat.st_mtime),
                )
            )

        artifacts.sort(key=_sort_key)
        logger.debug("backup_scan | directory=%s found=%s", directory, len(artifacts))
        return artifacts
