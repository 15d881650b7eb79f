"""Domain exceptions for pg_br."""

from __future__ import annotations

from typing import Optional


class PgBrError(RuntimeError):
    """Base exception for every expected pg_br failure."""


class RegistryError(PgBrError):
    """Raised when an existing backup directory cannot be enumerated."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        message = f"Cannot read backup directory {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class SelectionError(PgBrError):
    """Raised when operator input does not select valid backups."""

    def __init__(self, message: str, token: Optional[str] = None) -> None:
        self.token = token
        super().__init__(message)


class InvalidSelectionError(SelectionError):
    """A single index is out of range."""


class InvalidRangeError(SelectionError):
    """A ``start-end`` range is malformed or out of range."""


class SelectionFormatError(SelectionError):
    """A token is neither an index nor a range."""


class BackupNameError(PgBrError):
    """Raised for an unusable backup name."""


class ExternalToolError(PgBrError):
    """Raised when pg_dump, pg_restore or psql fails."""

    def __init__(self, tool: str, message: str, returncode: Optional[int] = None) -> None:
        self.tool = tool
        self.returncode = returncode
        super().__init__(f"{tool} failed: {message}")


class DatabaseNameError(PgBrError):
    """Raised for a database name that cannot be a backup subdirectory."""
