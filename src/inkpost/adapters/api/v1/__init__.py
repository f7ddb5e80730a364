"""API v1 router configuration.

The blogging client calls every endpoint at the root path, so nothing here
adds a version prefix.
"""

from fastapi import APIRouter

from .auth import router as auth_router
from .blogs import router as blogs_router
from .health import router as health_router

api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(auth_router)
api_router.include_router(blogs_router)
