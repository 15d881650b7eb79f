"""Schema for the user configuration file."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """Settings read from ``~/.pg_br.yml``."""

    destination: Optional[str] = Field(
        None, description="Directory holding backups; current directory when unset"
    )

    model_config = ConfigDict(extra="ignore")
