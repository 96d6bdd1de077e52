"""SQLAlchemy persistence adapter."""

from finplan.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_engine_from_settings,
    create_session_maker,
)
from finplan.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)

__all__ = [
    "create_engine",
    "create_engine_from_settings",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
