"""User Repository implementation using SQLAlchemy.

This module provides the repository for ``User`` persistence, abstracting
database access behind ``IUserRepository`` so the auth and publish services
never build queries themselves. Emails are logged masked.
"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from inkpost.core.exceptions import DatabaseError, DuplicateUserError
from inkpost.core.logging import mask_email
from inkpost.domain.entities.user import User
from inkpost.domain.interfaces.repositories import IUserRepository

logger = get_logger(__name__)

USER_LOOKUP_FAILED = "Failed to look up user"
EMAIL_TAKEN = "Email already exists"
USERNAME_TAKEN = "Username already exists"


class UserRepository(IUserRepository):
    """SQLAlchemy implementation of ``IUserRepository``.

    Driver errors are logged with context and surfaced as ``DatabaseError``
    so they never reach the client verbatim. Unique-constraint violations on
    insert become ``DuplicateUserError``.
    """

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            return await self.db_session.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(
                "Error retrieving user by ID",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
                operation="get_by_id",
            )
            raise DatabaseError(USER_LOOKUP_FAILED) from e

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email. The lookup is case-insensitive because emails
        are stored lower-cased."""
        normalized = (email or "").strip().lower()
        try:
            result = await self.db_session.execute(select(User).where(User.email == normalized))
            user = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(
                "Error retrieving user by email",
                email=mask_email(normalized),
                error=str(e),
                error_type=type(e).__name__,
                operation="get_by_email",
            )
            raise DatabaseError(USER_LOOKUP_FAILED) from e

        logger.debug(
            "User lookup by email completed",
            email=mask_email(normalized),
            found=user is not None,
            operation="get_by_email",
        )
        return user

    async def exists_by_username(self, username: str) -> bool:
        try:
            result = await self.db_session.execute(
                select(User.id).where(User.username == username).limit(1)
            )
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(
                "Error checking username",
                username=username,
                error=str(e),
                operation="exists_by_username",
            )
            raise DatabaseError(USER_LOOKUP_FAILED) from e

    async def create(self, user: User) -> User:
        """Insert and commit a new user.

        Raises:
            DuplicateUserError: If the email or username unique constraint
                rejects the row, including when a concurrent signup won the
                username race. The message names whichever of the two is
                taken.
            DatabaseError: For any other store failure.
        """
        user.email = user.email.strip().lower()
        self.db_session.add(user)
        try:
            await self.db_session.commit()
        except IntegrityError as e:
            await self.db_session.rollback()
            # constraint names differ per dialect, so ask which row is taken
            email_taken = await self.get_by_email(user.email) is not None
            logger.warning(
                "User rejected by unique constraint",
                email=mask_email(user.email),
                username=user.username,
                conflict="email" if email_taken else "username",
                operation="create",
            )
            if email_taken:
                raise DuplicateUserError(EMAIL_TAKEN) from e
            raise DuplicateUserError(USERNAME_TAKEN) from e
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            logger.error(
                "Error creating user",
                email=mask_email(user.email),
                error=str(e),
                error_type=type(e).__name__,
                operation="create",
            )
            raise DatabaseError("Failed to create user") from e

        await self.db_session.refresh(user)
        logger.info("User created", user_id=user.id, username=user.username, operation="create")
        return user

    async def increment_total_posts(self, user_id: int, delta: int) -> Optional[User]:
        """Add ``delta`` to ``total_posts`` with a single UPDATE, without committing.

        Returns:
            The refreshed user, or ``None`` when no row has ``user_id``.
        """
        try:
            result = await self.db_session.execute(
                update(User)
                .where(User.id == user_id)
                .values(total_posts=User.total_posts + delta)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None
            user = await self.db_session.get(User, user_id, populate_existing=True)
        except SQLAlchemyError as e:
            logger.error(
                "Error updating total posts",
                user_id=user_id,
                delta=delta,
                error=str(e),
                error_type=type(e).__name__,
                operation="increment_total_posts",
            )
            raise DatabaseError("Failed to update total posts number") from e

        logger.debug(
            "Total posts updated",
            user_id=user_id,
            delta=delta,
            total_posts=user.total_posts,
            operation="increment_total_posts",
        )
        return user
