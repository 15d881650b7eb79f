"""Loading of the optional per-user configuration file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from pg_br.core.paths import expand_path
from pg_br.schemas.config import Config

CONFIG_FILENAME = ".pg_br.yml"

logger = logging.getLogger(__name__)


def config_path(home: Optional[Path] = None) -> Path:
    """Return the location of the configuration file."""
    base = Path(home) if home is not None else Path.home()
    return base / CONFIG_FILENAME


def load_config(home: Optional[Path] = None) -> Config:
    """Load ``~/.pg_br.yml``.

    Any problem reading or parsing the file is reported as a warning and an
    empty configuration is returned, so callers can always proceed.
    """
    path = config_path(home)
    if not path.exists():
        return Config()

    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        if data is None:
            return Config()
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping, got {type(data).__name__}")
        config = Config.model_validate(data)
    except (OSError, yaml.YAMLError, ValidationError, ValueError) as exc:
        logger.warning("config_load_failed | path=%s error=%s", path, exc)
        return Config()

    if not config.destination:
        return Config()
    return Config(destination=expand_path(config.destination))
