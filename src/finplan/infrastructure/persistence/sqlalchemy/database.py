"""Engine and session construction.

There is no module-level engine: callers build one from settings and pass
sessions to repositories explicitly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from finplan_config.settings import get_settings

if TYPE_CHECKING:
    from finplan_config.settings import Settings

logger = logging.getLogger(__name__)


def create_engine(database_url: str, echo: bool = False, **kwargs: Any) -> AsyncEngine:
    """Create an async engine for ``database_url``.

    SQLite connections get foreign keys enabled and explicit BEGIN handling
    so SAVEPOINTs and rollbacks behave as on PostgreSQL.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        kwargs.setdefault("pool_pre_ping", True)

    engine = create_async_engine(database_url, echo=echo, **kwargs)

    if url.get_backend_name() == "sqlite":
        _configure_sqlite(engine)

    logger.debug("Created database engine for %s", url.render_as_string())
    return engine


def create_engine_from_settings(
    settings: Optional[Settings] = None,
    **kwargs: Any,
) -> AsyncEngine:
    settings = settings or get_settings()
    return create_engine(settings.database_url, echo=settings.database_echo, **kwargs)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


def _configure_sqlite(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, _connection_record) -> None:
        # let SQLAlchemy emit BEGIN itself instead of the driver's implicit one
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN")
