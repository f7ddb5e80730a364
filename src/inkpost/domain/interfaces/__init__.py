"""Domain ports. Concrete adapters live in ``inkpost.infrastructure``."""

from inkpost.domain.interfaces.repositories import IBlogRepository, IUserRepository
from inkpost.domain.interfaces.services import (
    IIdentityVerifier,
    IPasswordHasher,
    ITokenService,
)

__all__ = [
    "IBlogRepository",
    "IUserRepository",
    "IIdentityVerifier",
    "IPasswordHasher",
    "ITokenService",
]
