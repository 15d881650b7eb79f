"""Service layer for pg_br.

Exposes:
- BackupRegistry
- parse_selection / parse_single_selection / select_artifacts
"""

from .registry import BackupRegistry
from .selection import parse_selection, parse_single_selection, select_artifacts

__all__ = [
    "BackupRegistry",
    "parse_selection",
    "parse_single_selection",
    "select_artifacts",
]
