"""Joyas API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Request logging middleware wraps every route
    - Global error handlers map JoyasError → {"error": message} responses
    - Connection pool built once in the lifespan, stored on app.state, disposed on shutdown

Design Decisions:
    - create_app() factory: tests build a fresh app and attach their own pool
    - Lifespan over @app.on_event: cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from joyas_api import __version__
from joyas_api.api.error_handlers import register_error_handlers
from joyas_api.api.middleware import RequestLoggingMiddleware
from joyas_api.api.routes import health, items
from joyas_api.config import Settings, get_settings
from joyas_api.infrastructure.database import create_db_manager
from joyas_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = create_db_manager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Servidor corriendo en el puerto {settings.port}")
    yield
    await app.state.db_manager.dispose()
    logger.info("Joyas API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Joyas API", version=__version__, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router)
    app.include_router(items.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run(
        "joyas_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
