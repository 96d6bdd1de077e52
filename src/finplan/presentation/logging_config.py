"""Process-wide logging setup shared by the API and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from finplan_config.settings import Settings, get_settings

NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg", "httpx", "httpcore")

_configured_level: Optional[int] = None


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure application logging.

    Console output with timestamps and module names, the level of the
    ``finplan`` loggers taken from ``settings`` (the cached process
    settings when omitted), and WARNING for noisy third-party libraries.
    Calling it again with the level already in place does nothing.
    """
    global _configured_level  # NOQA: PLW0603

    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if log_level == _configured_level:
        return

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("finplan").setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _configured_level = log_level
