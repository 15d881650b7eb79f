"""Invocation of the PostgreSQL client binaries.

`pg_dump` writes custom-format archives (``-Fc``) that `pg_restore` reads
back. Both run against the local server; credentials and the port come from
the usual ``PG*`` environment variables and ``~/.pgpass``.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import List

from pg_br.core.errors import ExternalToolError

PG_HOST = "localhost"
TEMPLATE_DATABASES = {"template0", "template1"}

logger = logging.getLogger(__name__)


def _run(cmd: List[str], *, capture: bool = False) -> subprocess.CompletedProcess:
    tool = cmd[0]
    try:
        proc = subprocess.run(
            cmd,
            check=False,
            stdout=subprocess.PIPE if capture else None,
            stderr=subprocess.PIPE if capture else None,
            text=True,
        )
    except OSError as exc:
        logger.error("%s_exec_error | error=%s", tool, exc)
        raise ExternalToolError(tool, str(exc)) from exc

    if proc.returncode != 0:
        err = (proc.stderr or "").strip() if capture else ""
        message = err or f"exited with status {proc.returncode}"
        raise ExternalToolError(tool, message, returncode=proc.returncode)
    return proc


def run_pg_dump(database: str, artifact_path: str) -> str:
    """Dump *database* into *artifact_path* and return the path."""
    cmd = [
        "pg_dump",
        "-Fc",
        "--no-acl",
        "--no-owner",
        "-h",
        PG_HOST,
        "-f",
        artifact_path,
        database,
    ]
    logger.info("pg_dump_start | database=%s artifact=%s", database, artifact_path)
    _run(cmd)
    if not os.path.exists(artifact_path):
        raise ExternalToolError("pg_dump", f"backup file was not created: {artifact_path}")
    logger.info(
        "pg_dump_success | database=%s artifact=%s bytes=%s",
        database,
        artifact_path,
        os.path.getsize(artifact_path),
    )
    return artifact_path


def run_pg_restore(database: str, artifact_path: str) -> None:
    """Restore *artifact_path* into *database*, dropping existing objects first."""
    if not os.path.exists(artifact_path):
        raise FileNotFoundError(f"Artifact not found: {artifact_path}")

    cmd = [
        "pg_restore",
        "--verbose",
        "--clean",
        "--no-acl",
        "--no-owner",
        "-h",
        PG_HOST,
        "-d",
        database,
        artifact_path,
    ]
    logger.info("pg_restore_start | database=%s artifact=%s", database, artifact_path)
    _run(cmd)
    logger.info("pg_restore_success | database=%s artifact=%s", database, artifact_path)


def list_databases() -> List[str]:
    """Return the names of the non-template databases on the local server."""
    proc = _run(["psql", "-h", PG_HOST, "-lqtA"], capture=True)
    names: List[str] = []
    for line in (proc.stdout or "").splitlines():
        # continuation lines of a multi-line access privileges column
        if "|" not in line:
            continue
        name = line.split("|", 1)[0].strip()
        if not name or name in TEMPLATE_DATABASES or name in names:
            continue
        names.append(name)
    return names
