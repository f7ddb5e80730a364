"""Domain entities. Both tables are imported here so that SQLModel can resolve
the ``User.blogs`` / ``Blog.author`` relationship regardless of import order."""

from inkpost.domain.entities.blog import Blog
from inkpost.domain.entities.user import User

__all__ = ["Blog", "User"]
