"""Response Pydantic models for blog endpoints."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CreateBlogResponse(BaseModel):
    id: str = Field(..., examples=["Hello-World-3fJ9kQ2xZp1mN8sT4vW6yA"])


class BlogActivity(BaseModel):
    total_likes: int = 0
    total_comments: int = 0
    total_reads: int = 0
    total_parent_comments: int = 0


class AuthorPersonalInfo(BaseModel):
    profile_img: str
    username: str
    fullname: str


class BlogAuthor(BaseModel):
    personal_info: AuthorPersonalInfo


class LatestBlog(BaseModel):
    """One entry of the latest-blogs feed, with the author's public profile."""

    model_config = ConfigDict(populate_by_name=True)

    blog_id: str
    title: str
    des: str
    banner: str
    activity: BlogActivity
    tags: List[str]
    published_at: datetime = Field(..., alias="publishedAt")
    author: BlogAuthor


class LatestBlogsResponse(BaseModel):
    blogs: List[LatestBlog]
