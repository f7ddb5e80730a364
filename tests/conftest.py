import os

# Settings are read at import time, so the test environment has to be in
# place before anything from inkpost is imported.
os.environ["APP_ENV"] = "test"
os.environ["LOG_JSON"] = "false"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./inkpost-test.db")
os.environ.setdefault("SECRET_ACCESS_KEY", "inkpost-test-secret-key-0123456789abcdef")
os.environ.setdefault("GOOGLE_CLIENT_ID", "inkpost-test.apps.googleusercontent.com")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from inkpost.core.application import create_application
from inkpost.core.config.settings import settings
from inkpost.core.exceptions import IdentityVerificationError
from inkpost.domain.interfaces.services import IIdentityVerifier
from inkpost.domain.services.auth.token import TokenService
from inkpost.domain.value_objects.verified_identity import VerifiedIdentity
from inkpost.infrastructure.database.async_db import Database
from inkpost.infrastructure.dependency_injection.auth_dependencies import get_identity_verifier


class FakeIdentityVerifier(IIdentityVerifier):
    """Maps known ID tokens to identities; every other token is rejected."""

    def __init__(self):
        self.identities = {}

    def register(self, token: str, identity: VerifiedIdentity) -> None:
        self.identities[token] = identity

    async def verify(self, id_token: str) -> VerifiedIdentity:
        try:
            return self.identities[id_token]
        except KeyError:
            raise IdentityVerificationError("Invalid ID token") from None


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'inkpost.db'}"


@pytest_asyncio.fixture
async def database(db_url):
    db = Database(db_url)
    await db.create_tables()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def token_service():
    return TokenService(settings.SECRET_ACCESS_KEY.get_secret_value())


@pytest.fixture
def identity_verifier():
    return FakeIdentityVerifier()


@pytest.fixture
def app(monkeypatch, db_url, identity_verifier):
    monkeypatch.setattr(settings, "DATABASE_URL", db_url)
    application = create_application()
    application.dependency_overrides[get_identity_verifier] = lambda: identity_verifier
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
