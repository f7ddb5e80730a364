"""Blog router package: publishing and the latest-blogs feed."""

from fastapi import APIRouter

from .routes import create_blog as create_blog_route
from .routes import latest_blogs as latest_blogs_route

router = APIRouter(tags=["blogs"])

router.include_router(create_blog_route.router, prefix="/create-blog")
router.include_router(latest_blogs_route.router, prefix="/latest-blogs")

__all__ = ["router"]
