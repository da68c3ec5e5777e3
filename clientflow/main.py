# clientflow/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from clientflow.api.backup import router as backup_router
from clientflow.api.clients import router as clients_router
from clientflow.api.payments import router as payments_router
from clientflow.api.reports import router as reports_router
from clientflow.api.tasks import router as tasks_router
from clientflow.config import Settings, configure_logging, get_settings
from clientflow.db.engine import create_db_engine
from clientflow.db.migrations import init_schema
from clientflow.errors import register_error_handlers
from clientflow.static import mount_frontend

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)

    engine = create_db_engine(settings.database_url)
    version = init_schema(engine)
    app.state.engine = engine
    logger.info("Database %s ready (schema v%s)", settings.database_url, version)

    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database connection closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="ClientFlow API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_error_handlers(app)

    app.include_router(reports_router)
    app.include_router(clients_router)
    app.include_router(tasks_router)
    app.include_router(payments_router)
    app.include_router(backup_router)

    static_dir = Path(settings.static_dir)
    if settings.is_production and static_dir.is_dir():
        mount_frontend(app, static_dir)

    return app


app = create_app()
