"""
FastAPI Application
===================

Main FastAPI app setup with all routes and error handlers.
Startup: Settings → MongoDB connection → DI container
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from staff_directory import __version__
from staff_directory.api.v1 import health_router, register_error_handlers, teacher_router, user_router
from staff_directory.core.config import get_settings
from staff_directory.core.logging import configure_logging
from staff_directory.di.base_container import BaseContainer
from staff_directory.di.container import DIContainer
from staff_directory.infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """
    Open the database connection before serving and close it on shutdown.

    When a container was injected (tests), nothing is connected here.
    Any connection failure propagates, so the server never starts
    without a working store.
    """
    connection: Optional[MongoConnection] = None
    if application.state.container is None:
        settings = get_settings()
        connection = MongoConnection(settings.database_url, settings.database_name).connect()
        application.state.container = DIContainer(settings, connection)
        logger.info("Staff directory ready")

    yield

    if connection is not None:
        connection.close()
        application.state.container = None


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: Prebuilt DI container; when omitted, one is built
            against MongoDB at startup

    Returns:
        Configured FastAPI application instance
    """
    application = FastAPI(
        title="Staff Directory API",
        description="Read-only lookup of teacher and user records",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container

    # Register API routers
    application.include_router(teacher_router, prefix="/api/v1/teachers")
    application.include_router(user_router, prefix="/api/v1/users")
    application.include_router(health_router, prefix="/api/v1")

    register_error_handlers(application)

    return application


def run() -> None:
    """Run the API server with settings from the environment."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting staff directory on %s:%s", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


# Create application instance
app = create_application()


if __name__ == "__main__":
    run()
