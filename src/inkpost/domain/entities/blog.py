from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, List, Optional

from sqlalchemy import JSON, DateTime
from sqlmodel import Column, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from inkpost.domain.entities.user import User


class Blog(SQLModel, table=True):
    """Represents a blog document written by a single user.

    The ``blog_id`` slug is derived from the title when the blog is created
    and never changes afterwards. Drafts are stored with relaxed completeness
    rules and do not count towards the author's ``total_posts``.

    Attributes:
        blog_id: Human-readable unique identity (title slug + random token).
        title: Blog title, never empty.
        banner: Banner image URL.
        des: Short description, at most 200 characters for published blogs.
        content: Opaque list of editor blocks.
        tags: Lower-cased topic tags.
        author_id: The creating user, taken from the access token.
        total_likes / total_comments / total_reads / total_parent_comments:
            Engagement counters, untouched by the publish flow.
        draft: Whether the blog is an unpublished draft.
        published_at: Creation timestamp.
    """

    __tablename__ = "blogs"

    blog_id: str = Field(primary_key=True, max_length=255)
    title: str
    banner: str = Field(default="")
    des: str = Field(default="")
    content: List[Any] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    author_id: int = Field(foreign_key="users.id", index=True, nullable=False)
    total_likes: int = Field(default=0, ge=0)
    total_comments: int = Field(default=0, ge=0)
    total_reads: int = Field(default=0, ge=0)
    total_parent_comments: int = Field(default=0, ge=0)
    draft: bool = Field(default=False)
    published_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    author: Optional["User"] = Relationship(back_populates="blogs")

    __table_args__ = (
        Index("ix_blogs_draft_published_at", "draft", "published_at"),
        {"extend_existing": True},
    )

    @property
    def activity(self) -> dict:
        return {
            "total_likes": self.total_likes,
            "total_comments": self.total_comments,
            "total_reads": self.total_reads,
            "total_parent_comments": self.total_parent_comments,
        }
