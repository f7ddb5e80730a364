from typing import Any, Mapping, Optional

from jwt import PyJWTError
from jwt import decode as jwt_decode
from jwt import encode as jwt_encode
from structlog import get_logger

from inkpost.core.exceptions import AuthenticationError, PermissionError
from inkpost.domain.interfaces.services import ITokenService

logger = get_logger(__name__)

NO_ACCESS_TOKEN = "No access token"
INVALID_ACCESS_TOKEN = "Access token is invalid"


class TokenService(ITokenService):
    """Service for issuing and verifying access tokens.

    Tokens are HS256-signed JWTs whose only claim is ``sub``, the user id as
    a string. They carry no expiry and are never rotated or revoked; any
    holder of a validly signed token acts as that user.

    Attributes:
        secret (str): Shared signing key.
        algorithm (str): JWT signing algorithm.
    """

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def issue(self, user_id: int) -> str:
        """Create a signed access token bound to ``user_id``."""
        token = jwt_encode({"sub": str(user_id)}, self.secret, algorithm=self.algorithm)
        logger.debug("Access token issued", user_id=user_id)
        return token

    def verify(self, token: Optional[str]) -> int:
        """Validate a token and return the user id it is bound to.

        Args:
            token (Optional[str]): The encoded token, without the ``Bearer`` prefix.

        Returns:
            int: The id from the ``sub`` claim.

        Raises:
            AuthenticationError: If no token was supplied.
            PermissionError: If the signature does not verify or the payload
                has no usable ``sub`` claim.
        """
        if not token or not token.strip():
            raise AuthenticationError(NO_ACCESS_TOKEN)

        try:
            payload: Mapping[str, Any] = jwt_decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub"]},
            )
        except PyJWTError as e:
            logger.warning("Access token rejected", error=str(e))
            raise PermissionError(INVALID_ACCESS_TOKEN) from e

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as e:
            logger.warning("Access token carries a malformed subject")
            raise PermissionError(INVALID_ACCESS_TOKEN) from e
