"""Request-payload Pydantic models for blog endpoints."""

from typing import Any, List

from pydantic import BaseModel, Field

from inkpost.domain.value_objects.blog_draft import BlogDraft


class CreateBlogRequest(BaseModel):
    """Payload expected by ``POST /create-blog``.

    Completeness is checked by the publish service, not here, so every
    field is optional at the schema level.
    """

    title: str = Field("", examples=["Hello, World!"])
    banner: str = Field("", examples=["https://cdn.example.com/banners/hello.png"])
    des: str = Field("", examples=["A first post."])
    content: List[Any] = Field(
        default_factory=list,
        examples=[[{"type": "paragraph", "data": {"text": "Hi there"}}]],
    )
    tags: List[str] = Field(default_factory=list, examples=[["Intro", "Meta"]])
    draft: bool = Field(False, examples=[False])

    def to_draft(self) -> BlogDraft:
        return BlogDraft(
            title=self.title,
            banner=self.banner,
            des=self.des,
            content=list(self.content),
            tags=list(self.tags),
            draft=self.draft,
        )
