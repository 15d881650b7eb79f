"""Root conftest for tests directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

import pytest

import pg_br.services.registry as registry_module
from pg_br.schemas.config import Config
from pg_br.services.registry import BackupRegistry

BASE_TIME = 1_700_000_000


@pytest.fixture()
def home(tmp_path: Path, monkeypatch) -> Path:
    """Point the home directory at a temporary folder."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture()
def creation_clock(monkeypatch) -> None:
    """Use st_mtime as the creation time so tests can control ordering with os.utime."""
    monkeypatch.setattr(registry_module, "_created_at", lambda stat: stat.st_mtime)


@pytest.fixture()
def write_dump(creation_clock) -> Callable[..., Path]:
    """Create a backup file whose creation time is BASE_TIME + offset seconds."""

    def _write(path: Path, offset: int = 0, content: bytes = b"PGDMP") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        stamp = BASE_TIME + offset
        os.utime(path, (stamp, stamp))
        return path

    return _write


@pytest.fixture()
def backup_root(tmp_path: Path) -> Path:
    root = tmp_path / "backups"
    root.mkdir()
    return root


@pytest.fixture()
def registry(backup_root: Path) -> BackupRegistry:
    return BackupRegistry(Config(destination=str(backup_root)))


@pytest.fixture()
def answers(monkeypatch) -> Callable[..., list]:
    """Feed scripted answers to input(); returns the list of prompts shown."""

    def _script(*replies: str) -> list:
        queue = list(replies)
        asked: list = []

        def fake_input(prompt: Optional[str] = "") -> str:
            asked.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return asked

    return _script
