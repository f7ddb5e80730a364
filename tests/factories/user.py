"""Factory for generating fake user data for testing."""

from datetime import datetime, timezone
from typing import Optional

from faker import Faker

from inkpost.domain.entities.user import User

fake = Faker()


def create_fake_user(
    id: Optional[int] = None,
    fullname: Optional[str] = None,
    email: Optional[str] = None,
    password: Optional[str] = None,
    username: Optional[str] = None,
    google_auth: bool = False,
    total_posts: int = 0,
    joined_at: Optional[datetime] = None,
) -> User:
    """Create a fake User entity for testing.

    Args:
        id (Optional[int]): User ID, defaults to a random integer.
        fullname (Optional[str]): Display name, defaults to a fake name.
        email (Optional[str]): Email, defaults to a fake lower-cased email.
        password (Optional[str]): Stored hash. Defaults to a fake bcrypt-looking
            string for password accounts and ``None`` for Google accounts.
        username (Optional[str]): Username, defaults to the email local part.
        google_auth (bool): Whether the account was created through Google.
        total_posts (int): Published blog count.
        joined_at (Optional[datetime]): Creation timestamp, defaults to now.

    Returns:
        User: A fake User entity.
    """
    email = email if email is not None else fake.unique.email().lower()
    if password is None and not google_auth:
        password = "$2b$10$" + fake.pystr(min_chars=53, max_chars=53)
    return User(
        id=id if id is not None else fake.random_int(min=1, max=10000),
        fullname=fullname if fullname is not None else fake.name(),
        email=email,
        password=password,
        username=username if username is not None else email.split("@")[0],
        google_auth=google_auth,
        total_posts=total_posts,
        joined_at=joined_at if joined_at is not None else datetime.now(timezone.utc),
    )
