"""Authentication settings: session token signing and Google identity verification.
"""

import logging
from typing import List, Union

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class AuthSettings(BaseSettings):
    """Defines settings for access tokens and the external identity provider.

    Security Note:
        - SECRET_ACCESS_KEY signs every access token. Tokens carry no expiry,
          so rotating this key is the only way to revoke them.
        - GOOGLE_AUTH_LINK_PASSWORD_ACCOUNTS controls whether a verified Google
          identity may sign into an account that was created with a password.
          The default keeps the historical behaviour (linking allowed).
    """

    SECRET_ACCESS_KEY: SecretStr = Field(..., min_length=32)
    JWT_ALGORITHM: str = "HS256"

    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_JWKS_URL: str = "https://www.googleapis.com/oauth2/v3/certs"
    GOOGLE_TOKEN_ISSUERS: Union[str, List[str]] = Field(
        default="https://accounts.google.com,accounts.google.com"
    )
    GOOGLE_HTTP_TIMEOUT_SECONDS: float = Field(gt=0, default=5.0)
    GOOGLE_AUTH_LINK_PASSWORD_ACCOUNTS: bool = True

    @field_validator("GOOGLE_TOKEN_ISSUERS", mode="before")
    @classmethod
    def split_issuers(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v
