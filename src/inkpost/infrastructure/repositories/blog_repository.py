"""Blog Repository implementation using SQLAlchemy."""

from typing import List, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from inkpost.core.exceptions import DatabaseError
from inkpost.domain.entities.blog import Blog
from inkpost.domain.entities.user import User
from inkpost.domain.interfaces.repositories import IBlogRepository

logger = get_logger(__name__)


class BlogRepository(IBlogRepository):
    """SQLAlchemy implementation of ``IBlogRepository``.

    ``add`` only flushes: the publish service commits the blog together with
    the author's counter update.
    """

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def add(self, blog: Blog) -> Blog:
        self.db_session.add(blog)
        try:
            await self.db_session.flush()
        except SQLAlchemyError as e:
            logger.error(
                "Error storing blog",
                blog_id=blog.blog_id,
                author_id=blog.author_id,
                error=str(e),
                error_type=type(e).__name__,
                operation="add",
            )
            raise DatabaseError("Failed to save the blog") from e
        return blog

    async def list_latest(self, limit: int) -> List[Tuple[Blog, User]]:
        statement = (
            select(Blog, User)
            .join(User, Blog.author_id == User.id)
            .where(Blog.draft.is_(False))
            .order_by(Blog.published_at.desc())
            .limit(limit)
        )
        try:
            result = await self.db_session.execute(statement)
        except SQLAlchemyError as e:
            logger.error(
                "Error listing latest blogs",
                limit=limit,
                error=str(e),
                error_type=type(e).__name__,
                operation="list_latest",
            )
            raise DatabaseError("Failed to load latest blogs") from e
        return [(blog, author) for blog, author in result.all()]

    async def count_by_author(self, author_id: int, include_drafts: bool = True) -> int:
        statement = select(func.count()).select_from(Blog).where(Blog.author_id == author_id)
        if not include_drafts:
            statement = statement.where(Blog.draft.is_(False))
        try:
            result = await self.db_session.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Error counting blogs", author_id=author_id, error=str(e))
            raise DatabaseError("Failed to count blogs") from e
        return result.scalar_one()
