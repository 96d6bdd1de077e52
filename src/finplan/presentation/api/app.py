"""FastAPI application factory.

Only the health endpoint is served; budget, debt and goal use-cases are
exposed through the application layer and wired per deployment.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from finplan.infrastructure.persistence.sqlalchemy import (
    create_engine_from_settings,
    create_session_maker,
    create_tables,
)
from finplan.presentation.api.exception_handlers import setup_exception_handlers
from finplan.presentation.logging_config import configure_logging
from finplan_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The engine is created on startup from ``settings`` and disposed on
    shutdown; it is exposed as ``app.state.engine`` together with
    ``app.state.session_maker``.

    Parameters
    ----------
    settings
        Settings to use; defaults to the cached process settings.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "Starting %s API v%s on %s...",
            settings.app_name,
            API_VERSION,
            settings.database_backend,
        )
        engine = create_engine_from_settings(settings)
        await create_tables(engine)
        app.state.engine = engine
        app.state.session_maker = create_session_maker(engine)
        yield

        logger.info("Shutting down %s API...", settings.app_name)
        await engine.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title=settings.app_name,
        version=API_VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )
    setup_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "ok", "version": API_VERSION}

    return app
