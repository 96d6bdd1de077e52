"""Create or drop the aggregate tables."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Registers every table on Base.metadata
import finplan.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from finplan.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """Create whichever budget, debt and goal tables are missing.

    Running it against an existing schema is a no-op; stored rows are kept.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "Schema ready on %s (%d tables)",
        engine.dialect.name,
        len(Base.metadata.tables),
    )


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop every table together with its rows. Test and dev resets only."""
    logger.warning(
        "Dropping %d tables on %s",
        len(Base.metadata.tables),
        engine.dialect.name,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
