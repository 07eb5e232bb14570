"""Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → {"message"} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database handle created once in the lifespan, stored on app.state, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - app.state over a module global: dependencies read it per request, tests
      override the repository dependencies instead of patching a singleton
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_api import __version__
from catalog_api.api.error_handlers import register_error_handlers
from catalog_api.api.routes import courses, health, semesters
from catalog_api.config import get_settings
from catalog_api.infrastructure.database import init_db
from catalog_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.database = init_db(settings.mongodb_uri, settings.database_name)
    logger.info("Catalog API started")
    yield
    logger.info("Catalog API shutting down")
    await app.state.database.close()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Catalog API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(courses.router)
    app.include_router(semesters.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
