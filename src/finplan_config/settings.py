"""Application settings loaded from environment variables.

Lookup order for values:
1. OS environment variables
2. the file named by FINPLAN_ENV_FILE
3. config/.env.dev, then config/.env
4. field defaults

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "FINPLAN_ENV_FILE"
ENV_FILE_NAMES = (".env.dev", ".env")
_ROOT_MARKERS = ("config", "pyproject.toml")


def _find_project_root() -> Path:
    """Nearest ancestor holding a ``config/`` directory or ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _env_file_candidates() -> list[Path]:
    candidates = []
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _find_project_root() / path)
    candidates.extend(get_config_dir() / name for name in ENV_FILE_NAMES)
    return candidates


def _resolve_env_file_path() -> Optional[Path]:
    return next((path for path in _env_file_candidates() if path.is_file()), None)


class Settings(BaseSettings):
    """Application configuration.

    Either ``DATABASE_DSN`` or ``POSTGRES_PASSWORD`` must be provided before
    ``database_url`` is read; everything else has a default.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "finplan"
    debug: bool = False

    # PostgreSQL (POSTGRES_ prefix)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: Optional[SecretStr] = None
    postgres_db: str = "finplan"

    # Full URL override, e.g. sqlite+aiosqlite:///./finplan.db
    database_dsn: Optional[str] = None
    database_echo: bool = False

    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level

    @property
    def database_url(self) -> str:
        if self.database_dsn:
            return self.database_dsn
        if self.postgres_password is None:
            msg = "Either DATABASE_DSN or POSTGRES_PASSWORD must be configured"
            raise ValueError(msg)
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def database_backend(self) -> str:
        """Dialect name of the configured database, e.g. ``sqlite``."""
        return self.database_url.split(":", 1)[0].split("+", 1)[0]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
