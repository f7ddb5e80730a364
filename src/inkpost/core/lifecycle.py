"""Application lifecycle management.

This module handles application startup and shutdown events. Startup builds
the ``ServiceContext`` (database, HTTP client, token service, password hasher,
identity verifier), checks the database and creates missing tables; shutdown
releases the HTTP client and the engine.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from inkpost.core.config.settings import settings
from inkpost.core.logging import logger
from inkpost.infrastructure.dependency_injection.service_context import ServiceContext


def create_lifespan_manager():
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager that handles startup and shutdown events.

        Args:
            app (FastAPI): The FastAPI application instance

        Raises:
            RuntimeError: If database is unavailable during startup
        """
        # Startup
        services = ServiceContext.from_settings(settings)
        if not await services.database.check_health():
            logger.error("database_unavailable_on_startup")
            await services.close()
            raise RuntimeError("Database unavailable")
        await services.database.create_tables()
        app.state.services = services
        logger.info("application_startup", env=settings.APP_ENV, version=settings.VERSION)

        yield

        # Shutdown
        await services.close()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
