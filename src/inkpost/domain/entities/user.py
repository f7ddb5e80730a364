import secrets
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime
from sqlmodel import Column, Field, Relationship, SQLModel, String

if TYPE_CHECKING:  # pragma: no cover
    from inkpost.domain.entities.blog import Blog

AVATAR_COLLECTIONS = ["notionists-neutral", "adventurer-neutral", "fun-emoji"]
AVATAR_SEEDS = [
    "Garfield", "Tinkerbell", "Annie", "Loki", "Cleo", "Angel", "Bob", "Mia",
    "Coco", "Gracie", "Bear", "Bella", "Abby", "Harley", "Cali", "Leo", "Luna",
    "Jack", "Felix", "Kiki",
]


def default_profile_img() -> str:
    """Pick a generated DiceBear avatar for accounts created without one."""
    collection = secrets.choice(AVATAR_COLLECTIONS)
    seed = secrets.choice(AVATAR_SEEDS)
    return f"https://api.dicebear.com/6.x/{collection}/svg?seed={seed}"


class User(SQLModel, table=True):
    """Represents a User entity and acts as an Aggregate Root.

    A user is created either by password signup or by the first sign-in with
    a verified Google identity. Federated accounts carry ``google_auth=True``
    and no password hash.

    Attributes:
        id: The unique identifier for the user (primary key).
        fullname: Display name, at least three characters.
        email: Unique, lower-cased email address.
        password: Bcrypt hash. Null for users who only authenticate via Google.
        username: Unique handle derived from the email local part.
        profile_img: Avatar URL.
        google_auth: Marks an account created through Google sign-in.
        total_posts: Number of published (non-draft) blogs by this user.
        total_reads: Aggregate read counter.
        joined_at: The timestamp of when the account was created.
        blogs: Blogs authored by this user, drafts included.
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    fullname: str = Field(max_length=120)
    email: str = Field(
        sa_column=Column(String, unique=True, index=True, nullable=False),
    )
    password: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Bcrypt-hashed password. Null for users authenticating via Google.",
    )
    username: str = Field(
        sa_column=Column(String, unique=True, index=True, nullable=False),
    )
    profile_img: str = Field(default_factory=default_profile_img)
    google_auth: bool = Field(default=False)
    total_posts: int = Field(default=0, ge=0)
    total_reads: int = Field(default=0, ge=0)
    joined_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    blogs: List["Blog"] = Relationship(back_populates="author")

    @property
    def has_password(self) -> bool:
        return bool(self.password)
