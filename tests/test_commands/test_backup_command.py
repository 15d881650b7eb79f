"""Tests for the backup command."""

import subprocess
from pathlib import Path

import pytest

from pg_br.commands import backup as backup_module
from pg_br.commands.backup import backup_command
from pg_br.core.errors import BackupNameError, DatabaseNameError, ExternalToolError
from pg_br.schemas.config import Config
from pg_br.services.registry import BackupRegistry


class DummyCompleted:
    def __init__(self, returncode=0, stdout="", stderr=""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


@pytest.fixture()
def pg_dump_calls(monkeypatch):
    """Fake pg_dump that writes the file named after -f."""
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        if cmd[0] == "pg_dump":
            Path(cmd[cmd.index("-f") + 1]).write_bytes(b"PGDMP")
        return DummyCompleted()

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls


def test_backup_writes_grouped_layout(registry, backup_root: Path, pg_dump_calls, capsys):
    assert backup_command(registry, "shop", "nightly") == 0

    artifact = backup_root / "shop" / "nightly.dump"
    assert artifact.read_bytes() == b"PGDMP"
    assert pg_dump_calls[0][-1] == "shop"
    out = capsys.readouterr().out
    assert f"Using configured backup destination: {backup_root}" in out
    assert f"Creating backup directory: {backup_root / 'shop'}" in out
    assert f"✓ Backup created successfully: {artifact}" in out
    assert [a.name for a in registry.list_for_database("shop")] == ["nightly.dump"]


def test_backup_creates_missing_root(tmp_path: Path, pg_dump_calls):
    root = tmp_path / "deep" / "er"
    registry = BackupRegistry(Config(destination=str(root)))
    backup_command(registry, "shop", "nightly")
    assert (root / "shop" / "nightly.dump").exists()


def test_backup_without_config_uses_cwd(tmp_path: Path, monkeypatch, pg_dump_calls, capsys):
    monkeypatch.chdir(tmp_path)
    backup_command(BackupRegistry(), "shop", "nightly")
    assert (tmp_path / "shop" / "nightly.dump").exists()
    assert "No config found, using current directory" in capsys.readouterr().out


def test_backup_name_suffix_is_not_doubled(registry, backup_root: Path, pg_dump_calls):
    backup_command(registry, "shop", "nightly.dump")
    assert (backup_root / "shop" / "nightly.dump").exists()


def test_backup_rejects_path_in_name(registry, pg_dump_calls):
    with pytest.raises(BackupNameError):
        backup_command(registry, "shop", "../escape")
    assert pg_dump_calls == []


def test_existing_backup_overwrite_declined(registry, backup_root: Path, pg_dump_calls, answers, capsys):
    existing = backup_root / "shop" / "nightly.dump"
    existing.parent.mkdir()
    existing.write_bytes(b"old")
    answers("n")

    assert backup_command(registry, "shop", "nightly") == 0
    assert existing.read_bytes() == b"old"
    assert pg_dump_calls == []
    assert "Backup cancelled." in capsys.readouterr().out


def test_existing_backup_overwrite_accepted(registry, backup_root: Path, pg_dump_calls, answers):
    existing = backup_root / "shop" / "nightly.dump"
    existing.parent.mkdir()
    existing.write_bytes(b"old")
    answers("")

    assert backup_command(registry, "shop", "nightly") == 0
    assert existing.read_bytes() == b"PGDMP"


def test_interactive_backup(registry, backup_root: Path, monkeypatch, pg_dump_calls, answers, capsys):
    monkeypatch.setattr(backup_module, "list_databases", lambda: ["blog", "shop"])
    answers("2", "weekly")

    assert backup_command(registry) == 0
    assert (backup_root / "shop" / "weekly.dump").exists()
    assert "Selected database: shop" in capsys.readouterr().out


def test_pg_dump_failure_propagates(registry, monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: DummyCompleted(returncode=1))
    with pytest.raises(ExternalToolError):
        backup_command(registry, "shop", "nightly")


@pytest.mark.parametrize("database", ["..", ".", "a/b", "../escape"])
def test_backup_rejects_database_outside_root(registry, backup_root: Path, pg_dump_calls, database):
    with pytest.raises(DatabaseNameError):
        backup_command(registry, database, "nightly")
    assert pg_dump_calls == []
    assert not (backup_root.parent / "nightly.dump").exists()
    assert list(backup_root.iterdir()) == []


def test_backup_name_argument_is_stripped(registry, backup_root: Path, pg_dump_calls):
    backup_command(registry, "shop", "  nightly.dump ")
    assert [p.name for p in (backup_root / "shop").iterdir()] == ["nightly.dump"]


def test_blank_backup_name_argument_is_rejected(registry, backup_root: Path, pg_dump_calls):
    with pytest.raises(BackupNameError):
        backup_command(registry, "shop", "   ")
    assert pg_dump_calls == []
    assert not (backup_root / "shop").exists()
