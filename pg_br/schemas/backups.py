"""Schemas for backup artifacts found on disk."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

BACKUP_SUFFIX = ".dump"


class BackupArtifact(BaseModel):
    """A backup file recognized by its ``.dump`` suffix."""

    name: str = Field(..., description="File basename including the suffix")
    path: str = Field(..., description="Absolute path to the backup file")
    size: int = Field(..., description="File size in bytes")
    created: datetime = Field(..., description="Creation timestamp, used for ordering")
    modified: datetime = Field(..., description="Last modification timestamp")

    @property
    def display_name(self) -> str:
        if self.name.endswith(BACKUP_SUFFIX):
            return self.name[: -len(BACKUP_SUFFIX)]
        return self.name

    @property
    def size_mb(self) -> float:
        return self.size / (1024 * 1024)


class DatabaseGroup(BaseModel):
    """Backups of a single source database (one subdirectory of the root)."""

    name: str = Field(..., description="Database name, equal to the subdirectory name")
    artifacts: List[BackupArtifact] = Field(default_factory=list)
