"""Command implementations invoked by the CLI."""

from .backup import backup_command
from .list import list_command
from .remove import remove_command
from .restore import restore_command

__all__ = [
    "backup_command",
    "list_command",
    "remove_command",
    "restore_command",
]
