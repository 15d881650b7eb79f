"""Pydantic schemas for pg_br."""

from .backups import BACKUP_SUFFIX, BackupArtifact, DatabaseGroup
from .config import Config

__all__ = [
    "BACKUP_SUFFIX",
    "BackupArtifact",
    "DatabaseGroup",
    "Config",
]
