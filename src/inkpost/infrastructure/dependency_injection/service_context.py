"""Process-wide collaborators built once by the application lifespan."""

from dataclasses import dataclass

import httpx

from inkpost.core.config.settings import Settings
from inkpost.domain.interfaces.services import IIdentityVerifier, IPasswordHasher, ITokenService
from inkpost.domain.services.auth.token import TokenService
from inkpost.infrastructure.database.async_db import Database
from inkpost.infrastructure.services.authentication.google_identity import GoogleIdentityVerifier
from inkpost.infrastructure.services.authentication.password_hashing import PasswordHasher


@dataclass
class ServiceContext:
    """Everything a request handler needs that outlives a single request.

    Stored on ``app.state.services``; per-request objects (sessions,
    repositories, domain services) are built from it by the dependency
    factories.
    """

    settings: Settings
    database: Database
    http_client: httpx.AsyncClient
    token_service: ITokenService
    password_hasher: IPasswordHasher
    identity_verifier: IIdentityVerifier

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceContext":
        database = Database(
            settings.DATABASE_URL,
            echo=settings.DEBUG and settings.APP_ENV == "development",
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
        )
        http_client = httpx.AsyncClient(timeout=settings.GOOGLE_HTTP_TIMEOUT_SECONDS)
        return cls(
            settings=settings,
            database=database,
            http_client=http_client,
            token_service=TokenService(
                settings.SECRET_ACCESS_KEY.get_secret_value(),
                algorithm=settings.JWT_ALGORITHM,
            ),
            password_hasher=PasswordHasher(),
            identity_verifier=GoogleIdentityVerifier(
                client_id=settings.GOOGLE_CLIENT_ID,
                jwks_url=settings.GOOGLE_JWKS_URL,
                issuers=settings.GOOGLE_TOKEN_ISSUERS,
                http_client=http_client,
            ),
        )

    async def close(self) -> None:
        await self.http_client.aclose()
        await self.database.dispose()
