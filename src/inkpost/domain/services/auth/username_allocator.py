"""Username allocation for newly created accounts."""

import secrets
import string

from structlog import get_logger

from inkpost.core.config.settings import USERNAME_SUFFIX_LENGTH
from inkpost.domain.interfaces.repositories import IUserRepository

logger = get_logger(__name__)

SUFFIX_ALPHABET = string.ascii_letters + string.digits + "_-"


class UsernameAllocator:
    """Derives a handle from an email address.

    The local part of the email is used as-is when free; otherwise a short
    random suffix is appended. The lookup is a single probe with no re-check,
    so the unique constraint on ``users.username`` remains the authority and a
    lost race surfaces as ``DuplicateUserError`` from the repository.
    """

    def __init__(self, user_repository: IUserRepository, suffix_length: int = USERNAME_SUFFIX_LENGTH):
        self.user_repository = user_repository
        self.suffix_length = suffix_length

    def _suffix(self) -> str:
        return "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(self.suffix_length))

    async def allocate(self, email: str) -> str:
        candidate = email.split("@")[0]
        if await self.user_repository.exists_by_username(candidate):
            username = candidate + self._suffix()
            logger.debug("Username taken, appended suffix", candidate=candidate, username=username)
            return username
        return candidate
