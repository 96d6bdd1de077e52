"""
Fixtures for repository tests on a temporary SQLite database.

Each test gets its own database file, so tests never see each other's rows.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest
from sqlalchemy import event

# Import shared database fixtures
from tests.shared.fixtures.database import db_session, session_maker, sqlite_engine

__all__ = ["db_session", "session_maker", "sqlite_engine"]


@dataclass
class StatementLog:
    """SQL statements seen on an engine, with ``COMMIT`` for each commit."""

    statements: list[str] = field(default_factory=list)

    def count(self, prefix: str) -> int:
        return sum(1 for s in self.statements if s.startswith(prefix))

    def clear(self) -> None:
        self.statements.clear()


@pytest.fixture
def statement_log(sqlite_engine) -> Iterator[StatementLog]:
    log = StatementLog()
    sync_engine = sqlite_engine.sync_engine

    def _on_execute(conn, cursor, statement, parameters, context, executemany):
        log.statements.append(" ".join(statement.split()))

    def _on_commit(conn):
        log.statements.append("COMMIT")

    event.listen(sync_engine, "before_cursor_execute", _on_execute)
    event.listen(sync_engine, "commit", _on_commit)
    yield log
    event.remove(sync_engine, "before_cursor_execute", _on_execute)
    event.remove(sync_engine, "commit", _on_commit)
