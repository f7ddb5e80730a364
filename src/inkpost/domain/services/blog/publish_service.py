"""Publishing blogs and reading the latest-blogs feed."""

from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from inkpost.core.config.settings import (
    BLOG_DESCRIPTION_LIMIT,
    BLOG_TAG_LIMIT,
    LATEST_BLOGS_LIMIT,
)
from inkpost.core.exceptions import DatabaseError, ValidationError
from inkpost.domain.entities.blog import Blog
from inkpost.domain.interfaces.repositories import IBlogRepository, IUserRepository
from inkpost.domain.services.blog.slug import make_blog_id
from inkpost.domain.value_objects.blog_draft import BlogDraft

logger = get_logger(__name__)

TOTAL_POSTS_UPDATE_FAILED = "Failed to update total posts number"


class PublishService:
    """
    Service that validates and stores blogs for an authenticated author.

    The blog row and the author's ``total_posts`` increment are written in a
    single transaction on ``db_session``: either both land or neither does,
    so ``total_posts`` always equals the author's count of published blogs.

    Attributes:
        db_session (AsyncSession): Request-scoped session owning the transaction.
        blog_repository (IBlogRepository): Blog store.
        user_repository (IUserRepository): Credential store, for the counter.
    """

    def __init__(
        self,
        db_session: AsyncSession,
        blog_repository: IBlogRepository,
        user_repository: IUserRepository,
    ):
        self.db_session = db_session
        self.blog_repository = blog_repository
        self.user_repository = user_repository

    @staticmethod
    def validate(draft: BlogDraft) -> None:
        """Check a draft in order and raise on the first problem found.

        Drafts only need a title; everything else is required to publish.

        Raises:
            ValidationError: With a message naming the missing field.
        """
        if not draft.title:
            raise ValidationError("You must provide a title")

        if draft.draft:
            return

        if not draft.des or len(draft.des) > BLOG_DESCRIPTION_LIMIT:
            raise ValidationError(
                f"You must provide blog description under {BLOG_DESCRIPTION_LIMIT} characters"
            )
        if not draft.banner:
            raise ValidationError("You must provide blog banner to publish it")
        if not draft.content:
            raise ValidationError("There must be some blog content to publish it")
        if not draft.tags or len(draft.tags) > BLOG_TAG_LIMIT:
            raise ValidationError(
                f"Provide tags in order to publish the blog, Maximum {BLOG_TAG_LIMIT}"
            )

    async def publish(self, author_id: int, draft: BlogDraft) -> str:
        """
        Validate and store a blog, counting it towards the author's posts.

        Args:
            author_id (int): Id of the authenticated caller. Never taken from
                the request body.
            draft (BlogDraft): Author-supplied fields.

        Returns:
            str: The new blog id.

        Raises:
            ValidationError: If the draft is incomplete.
            DatabaseError: If the blog or the counter cannot be written. The
                transaction is rolled back, so nothing is persisted.
        """
        self.validate(draft)

        blog_id = make_blog_id(draft.title)
        blog = Blog(
            blog_id=blog_id,
            title=draft.title,
            banner=draft.banner,
            des=draft.des,
            content=list(draft.content),
            tags=draft.normalized_tags(),
            author_id=author_id,
            draft=draft.draft,
        )
        delta = 0 if draft.draft else 1

        try:
            await self.blog_repository.add(blog)
            author = await self.user_repository.increment_total_posts(author_id, delta)
            if author is None:
                logger.error("Publishing author does not exist", author_id=author_id)
                raise DatabaseError(TOTAL_POSTS_UPDATE_FAILED)
            total_posts = author.total_posts
            await self.db_session.commit()
        except DatabaseError:
            await self.db_session.rollback()
            raise
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            logger.error("Publish transaction failed", author_id=author_id, error=str(e))
            raise DatabaseError(TOTAL_POSTS_UPDATE_FAILED) from e

        logger.info(
            "Blog stored",
            blog_id=blog_id,
            author_id=author_id,
            draft=draft.draft,
            total_posts=total_posts,
        )
        return blog_id

    async def list_latest(self, limit: int = LATEST_BLOGS_LIMIT) -> List[Dict[str, Any]]:
        """Return the newest published blogs with their author's public profile."""
        rows = await self.blog_repository.list_latest(limit)
        return [
            {
                "blog_id": blog.blog_id,
                "title": blog.title,
                "des": blog.des,
                "banner": blog.banner,
                "activity": blog.activity,
                "tags": blog.tags,
                "publishedAt": blog.published_at,
                "author": {
                    "personal_info": {
                        "profile_img": author.profile_img,
                        "username": author.username,
                        "fullname": author.fullname,
                    }
                },
            }
            for blog, author in rows
        ]
