"""Logging setup for fintrend."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from fintrend_config import get_settings


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure console logging once per process.

    The level of the ``fintrend`` loggers comes from settings (LOG_LEVEL).
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("fintrend").setLevel(log_level)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
