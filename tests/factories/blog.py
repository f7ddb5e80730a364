"""Factory for generating fake blog data for testing."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from faker import Faker

from inkpost.domain.entities.blog import Blog
from inkpost.domain.value_objects.blog_draft import BlogDraft

fake = Faker()


def create_fake_blog_payload(**overrides: Any) -> Dict[str, Any]:
    """Create a complete ``/create-blog`` request body; ``overrides`` replace fields."""
    payload = {
        "title": fake.sentence(nb_words=4),
        "banner": fake.image_url(),
        "des": fake.text(max_nb_chars=150),
        "content": [{"type": "paragraph", "data": {"text": fake.paragraph()}}],
        "tags": [fake.word().capitalize() for _ in range(3)],
        "draft": False,
    }
    payload.update(overrides)
    return payload


def create_fake_draft(**overrides: Any) -> BlogDraft:
    return BlogDraft(**create_fake_blog_payload(**overrides))


def create_fake_blog(
    author_id: int,
    blog_id: Optional[str] = None,
    title: Optional[str] = None,
    tags: Optional[List[str]] = None,
    draft: bool = False,
    published_at: Optional[datetime] = None,
) -> Blog:
    """Create a fake Blog entity owned by ``author_id``."""
    return Blog(
        blog_id=blog_id if blog_id is not None else fake.slug() + "-" + fake.pystr(min_chars=22, max_chars=22),
        title=title if title is not None else fake.sentence(nb_words=4),
        banner=fake.image_url(),
        des=fake.text(max_nb_chars=150),
        content=[{"type": "paragraph", "data": {"text": fake.paragraph()}}],
        tags=tags if tags is not None else ["python", "fastapi"],
        author_id=author_id,
        draft=draft,
        published_at=published_at if published_at is not None else datetime.now(timezone.utc),
    )
