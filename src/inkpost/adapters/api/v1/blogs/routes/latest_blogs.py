"""/latest-blogs route module."""

from fastapi import APIRouter

from inkpost.adapters.api.v1.blogs.schemas import LatestBlogsResponse
from inkpost.core.config.settings import LATEST_BLOGS_LIMIT
from inkpost.infrastructure.dependency_injection.auth_dependencies import PublishServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=LatestBlogsResponse,
    response_model_by_alias=True,
    summary="Newest published blogs",
)
async def latest_blogs(publish_service: PublishServiceDep):
    """Return the five newest non-draft blogs, newest first."""
    return {"blogs": await publish_service.list_latest(LATEST_BLOGS_LIMIT)}
