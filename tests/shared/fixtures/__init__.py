"""Shared pytest fixtures for all test suites."""

from tests.shared.fixtures.database import (
    db_session,
    postgres_container,
    postgres_engine,
    session_maker,
    sqlite_engine,
)
from tests.shared.fixtures.factories import TestUserFactory

__all__ = [
    "db_session",
    "postgres_container",
    "postgres_engine",
    "session_maker",
    "sqlite_engine",
    "TestUserFactory",
]
