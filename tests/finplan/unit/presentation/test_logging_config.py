"""Tests for the logging setup."""

import logging

from finplan.presentation.api.app import create_app
from finplan.presentation.logging_config import configure_logging
from finplan_config.settings import Settings


def _settings(log_level: str) -> Settings:
    return Settings(
        _env_file=None,
        database_dsn="sqlite+aiosqlite:///:memory:",
        log_level=log_level,
    )


def test_create_app_applies_its_settings_log_level():
    create_app(_settings("DEBUG"))
    assert logging.getLogger("finplan").level == logging.DEBUG

    create_app(_settings("warning"))
    assert logging.getLogger("finplan").level == logging.WARNING


def test_noisy_libraries_stay_at_warning():
    configure_logging(_settings("DEBUG"))

    assert logging.getLogger("finplan").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
