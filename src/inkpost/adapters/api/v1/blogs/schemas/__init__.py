"""Blog API schemas package."""

# flake8: noqa: F401 – re-export

from .requests import CreateBlogRequest
from .responses import CreateBlogResponse, LatestBlog, LatestBlogsResponse
