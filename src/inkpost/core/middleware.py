"""Middleware configuration for the FastAPI application.

The blogging client is served from a different origin than the API, so the
only middleware needed is CORS.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inkpost.core.config.settings import settings


def configure_middleware(app: FastAPI) -> None:
    """Configure all middleware for the FastAPI application.

    Args:
        app (FastAPI): The FastAPI application instance
    """
    wildcard = "*" in settings.ALLOWED_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        # Browsers reject credentialed responses for a wildcard origin
        allow_credentials=not wildcard,
        allow_methods=["*"],
        allow_headers=["*"],
    )
