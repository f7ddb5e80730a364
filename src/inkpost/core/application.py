"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a properly configured FastAPI application
with all necessary middleware, exception handlers, and routers registered.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from inkpost.adapters.api.v1 import api_router
from inkpost.core.config.settings import settings
from inkpost.core.handlers import register_exception_handlers
from inkpost.core.lifecycle import create_lifespan_manager
from inkpost.core.middleware import configure_middleware


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    The blogging client calls the endpoints at the root path (``/signup``,
    ``/create-blog``, ...), so the router is mounted without a prefix.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Blogging platform API: accounts, publishing and the latest-blogs feed.",
        lifespan=create_lifespan_manager(),
        default_response_class=JSONResponse,
    )

    configure_middleware(app)
    register_exception_handlers(app)
    app.include_router(api_router)

    return app
