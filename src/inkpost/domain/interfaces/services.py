"""Service interfaces for collaborators of the domain services.

These interfaces define contracts for token signing, password hashing and
external identity verification, enabling dependency inversion and better
testability.
"""

from abc import ABC, abstractmethod
from typing import Optional

from inkpost.domain.value_objects.verified_identity import VerifiedIdentity


class ITokenService(ABC):
    """Interface for issuing and verifying access tokens."""

    @abstractmethod
    def issue(self, user_id: int) -> str:
        """Mint a signed token bound to ``user_id``."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: Optional[str]) -> int:
        """Return the user id a token is bound to.

        Raises:
            AuthenticationError: If the token is absent.
            PermissionError: If the signature or payload is invalid.
        """
        raise NotImplementedError


class IPasswordHasher(ABC):
    """Interface for the irreversible, salted password transform."""

    @abstractmethod
    async def hash(self, password: str) -> str:
        raise NotImplementedError

    @abstractmethod
    async def verify(self, password: str, hashed: Optional[str]) -> bool:
        """Check ``password`` against ``hashed``. Never raises; a missing or
        malformed hash verifies as ``False``."""
        raise NotImplementedError


class IIdentityVerifier(ABC):
    """Interface for the external identity provider."""

    @abstractmethod
    async def verify(self, id_token: str) -> VerifiedIdentity:
        """Validate an ID token and return the profile it vouches for.

        Raises:
            IdentityVerificationError: If the token cannot be verified.
        """
        raise NotImplementedError
