"""Diagnostic logging for pg_br.

Listings, progress lines and prompts are printed to stdout; everything that
goes through `logging` lands on stderr so it can be silenced or redirected
independently. `pg_br.cli.main` calls `setup_logging` once per invocation.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Set the root log level, installing a stderr handler if none exists.

    An explicit *level* (``--verbose`` passes ``DEBUG``) wins over
    `PG_BR_LOG_LEVEL`; without either only warnings and errors are shown.
    """
    log_level = (level or os.getenv("PG_BR_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    root_logger.setLevel(log_level)
