import re
import secrets

from inkpost.core.config.settings import BLOG_ID_TOKEN_BYTES

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")
_WHITESPACE_RUN = re.compile(r"\s+")


def slugify_title(title: str) -> str:
    """Replace non-alphanumerics with spaces and join the words with hyphens.

    >>> slugify_title("Hello, World!")
    'Hello-World'
    """
    spaced = _NON_ALPHANUMERIC.sub(" ", title)
    return _WHITESPACE_RUN.sub("-", spaced.strip())


def make_blog_id(title: str, token_bytes: int = BLOG_ID_TOKEN_BYTES) -> str:
    """Build the permanent blog id: the title slug plus a random URL-safe token.

    Collisions are not re-checked; the primary key rejects one if it happens.
    """
    slug = slugify_title(title)
    token = secrets.token_urlsafe(token_bytes)
    return f"{slug}-{token}" if slug else token
