from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from inkpost.domain.interfaces.services import ITokenService
from inkpost.infrastructure.dependency_injection.auth_dependencies import get_token_service

__all__ = ["get_current_user_id", "CurrentUserId"]

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    token_service: Annotated[ITokenService, Depends(get_token_service)],
) -> int:
    """Return the user id bound to the request's bearer token.

    The token alone is trusted; the user row is not loaded here. A missing
    header raises ``AuthenticationError`` (401) and a token that fails
    verification raises ``PermissionError`` (403).
    """
    token = credentials.credentials if credentials else None
    return token_service.verify(token)


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
