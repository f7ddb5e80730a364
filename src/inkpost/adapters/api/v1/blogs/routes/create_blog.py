"""/create-blog route module."""

import uuid

import structlog
from fastapi import APIRouter

from inkpost.adapters.api.v1.blogs.schemas import CreateBlogRequest, CreateBlogResponse
from inkpost.core.dependencies.auth import CurrentUserId
from inkpost.infrastructure.dependency_injection.auth_dependencies import PublishServiceDep

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=CreateBlogResponse,
    summary="Publish a blog or save a draft",
    description=(
        "Requires a bearer access token. The author is always the token's user. "
        "Published blogs count towards the author's total_posts; drafts do not."
    ),
)
async def create_blog(
    payload: CreateBlogRequest,
    author_id: CurrentUserId,
    publish_service: PublishServiceDep,
):
    request_logger = logger.bind(
        correlation_id=str(uuid.uuid4()),
        endpoint="create_blog",
        author_id=author_id,
    )
    request_logger.info("Blog submission", draft=payload.draft, tag_count=len(payload.tags))

    blog_id = await publish_service.publish(author_id, payload.to_draft())

    request_logger.info("Blog submission stored", blog_id=blog_id)
    return {"id": blog_id}
