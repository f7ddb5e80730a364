"""Bcrypt password hashing through passlib.

Bcrypt is CPU-bound, so both operations run in Starlette's threadpool to keep
the event loop free while a hash is computed.
"""

from typing import Optional

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool
from structlog import get_logger

from inkpost.core.config.settings import BCRYPT_WORK_FACTOR
from inkpost.domain.interfaces.services import IPasswordHasher

logger = get_logger(__name__)


class PasswordHasher(IPasswordHasher):
    """passlib ``CryptContext`` configured for bcrypt.

    Attributes:
        pwd_context (CryptContext): Passlib context for bcrypt password hashing.
    """

    def __init__(self, rounds: int = BCRYPT_WORK_FACTOR):
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    async def hash(self, password: str) -> str:
        return await run_in_threadpool(self.pwd_context.hash, password)

    async def verify(self, password: str, hashed: Optional[str]) -> bool:
        """Check a password against a stored hash, failing closed.

        Accounts created through Google have no hash, and a corrupted column
        makes passlib raise; both verify as ``False``.
        """
        if not hashed:
            return False
        try:
            return await run_in_threadpool(self.pwd_context.verify, password, hashed)
        except (ValueError, TypeError) as e:
            logger.warning("Stored password hash could not be verified", error=str(e))
            return False
