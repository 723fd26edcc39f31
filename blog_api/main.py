"""FastAPI application factory and server entry point.

Run with:
    blog-api
or:
    uvicorn blog_api.main:create_app --factory --port 5000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.v1.api import api_router
from blog_api.api.v1.endpoints import system
from blog_api.config import Settings, get_settings
from blog_api.core.error_handler import register_error_handlers
from blog_api.core.logging_config import setup_logging
from blog_api.core.middleware import register_middleware
from blog_api.database import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    logger.info(f"Blog API started in {settings.ENVIRONMENT} mode")
    yield
    app.state.db.dispose()
    logger.info("Blog API shut down")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application from explicit settings.

    Args:
        settings: Validated settings; loaded from the environment when omitted
        database: Engine/session factory; built from ``settings.DATABASE_URL`` when omitted

    Returns:
        FastAPI: Configured application
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = database or Database(settings.DATABASE_URL, echo=settings.LOG_LEVEL == "debug")

    register_middleware(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )
    register_error_handlers(app)

    # Welcome and health are served at the root as well as under /api/v1
    app.include_router(system.router)
    app.include_router(api_router)

    return app


def run() -> None:
    """Start the HTTP server on the configured port."""
    settings = get_settings()
    app = create_app(settings)
    logger.info(f"Server starting on port {settings.PORT} in {settings.ENVIRONMENT} mode")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.replace("warn", "warning"))


if __name__ == "__main__":
    run()
