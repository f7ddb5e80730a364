from inkpost.infrastructure.repositories.blog_repository import BlogRepository
from inkpost.infrastructure.repositories.user_repository import UserRepository

__all__ = ["BlogRepository", "UserRepository"]
