"""Repository interfaces for abstracting data persistence in the domain layer.

The domain services talk to these abstract ports; the SQLModel adapters in
``inkpost.infrastructure.repositories`` implement them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from inkpost.domain.entities.blog import Blog
from inkpost.domain.entities.user import User


class IUserRepository(ABC):
    """An interface defining the contract for user persistence operations."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieves a user by their unique identifier."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieves a user by their email address (case-insensitively)."""
        raise NotImplementedError

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Checks whether a username is already taken."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persists a new user and commits.

        Raises:
            DuplicateUserError: If the store's unique constraint on email or
                username rejects the row.
        """
        raise NotImplementedError

    @abstractmethod
    async def increment_total_posts(self, user_id: int, delta: int) -> Optional[User]:
        """Atomically adds ``delta`` to the user's ``total_posts``.

        Runs inside the caller's transaction and does not commit.

        Returns:
            The updated user, or ``None`` if no user has that id.
        """
        raise NotImplementedError


class IBlogRepository(ABC):
    """An interface defining the contract for blog persistence operations."""

    @abstractmethod
    async def add(self, blog: Blog) -> Blog:
        """Stages a new blog and flushes it, leaving the commit to the caller."""
        raise NotImplementedError

    @abstractmethod
    async def list_latest(self, limit: int) -> List[Tuple[Blog, User]]:
        """Returns published blogs with their authors, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def count_by_author(self, author_id: int, include_drafts: bool = True) -> int:
        """Counts the blogs owned by an author."""
        raise NotImplementedError
