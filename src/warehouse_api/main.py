"""
Application factory and process entry point.

    uvicorn --factory warehouse_api.main:create_app    # or the `warehouse-api` console script
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from warehouse_api import models  # noqa: F401  (registers every table on Base.metadata)
from warehouse_api.api.v1 import api_router
from warehouse_api.api.v1.error_handlers import register_exception_handlers
from warehouse_api.config.settings import Settings, get_settings
from warehouse_api.core.cancellation import RequestCancellationMiddleware
from warehouse_api.core.logging import RequestIDMiddleware, setup_logging, stop_queue_logging
from warehouse_api.database.base import Base
from warehouse_api.database.session import dispose_engine, get_engine
from warehouse_api.utils.logging import get_project_name, get_project_version

logger = logging.getLogger(__name__)


def _lifespan(settings: Settings):

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.DB_CREATE_TABLES:
            async with get_engine().begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("app.startup.tables_created")
        logger.info("app.startup", extra={"env": settings.ENV, "host": settings.HOST})
        try:
            yield
        finally:
            await dispose_engine()
            logger.info("app.shutdown")
            stop_queue_logging()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=get_project_name(),
        version=get_project_version(),
        description="Warehouse management API",
        servers=[{"url": f"http://{settings.HOST}"}],
        lifespan=_lifespan(settings),
    )

    # last added runs first: the cancellable task wraps the whole request
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RequestCancellationMiddleware, timeout=settings.REQUEST_TIMEOUT_SECONDS)

    register_exception_handlers(app)
    app.include_router(api_router)
    return app


def run() -> None:
    uvicorn.run("warehouse_api.main:create_app", factory=True, host="0.0.0.0", port=8080)
