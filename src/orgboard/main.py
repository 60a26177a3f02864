"""FastAPI application factory and lifespan management."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orgboard import __version__
from orgboard.config import settings
from orgboard.db.engine import create_all_tables, create_db_engine, create_session_factory
from orgboard.logging_config import configure_logging
from orgboard.services.activity_logger import ActivityLogger

# Configure logging at import time
_json_logs = os.environ.get("ORGBOARD_LOCAL", "0") != "1"
configure_logging(log_level=settings.log_level, json_output=_json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the connection pool and the audit writer for the process lifetime."""
    db_url = settings.effective_database_url
    engine = create_db_engine(db_url)

    # SQLite (local dev) has no Alembic migrations
    if "sqlite" in db_url:
        await create_all_tables(engine)
        logger.info("SQLite tables created (local mode)")

    app.state.db_engine = engine
    app.state.db_session_factory = create_session_factory(engine)
    app.state.activity_logger = ActivityLogger(app.state.db_session_factory)

    logger.info("OrgBoard API started (db=%s)", "sqlite" if "sqlite" in db_url else "postgresql")
    yield

    # Let in-flight audit writes land before the pool goes away
    await app.state.activity_logger.drain()
    await engine.dispose()
    logger.info("OrgBoard API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="OrgBoard API",
        version=__version__,
        description="Multi-tenant project and task management backend.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Order matters: last added = first executed
    from orgboard.api.middleware.auth import AuthMiddleware
    from orgboard.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(AuthMiddleware)
    app.add_middleware(TraceIdMiddleware)

    from orgboard.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from orgboard.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
