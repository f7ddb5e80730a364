import pytest

from inkpost.core.config.settings import BCRYPT_WORK_FACTOR
from inkpost.infrastructure.services.authentication.password_hashing import PasswordHasher


@pytest.fixture
def hasher():
    return PasswordHasher()


@pytest.mark.asyncio
async def test_hash_uses_configured_work_factor(hasher):
    hashed = await hasher.hash("Abcde1f")
    # bcrypt format: $2b$<rounds>$<salt+digest>
    assert int(hashed.split("$")[2]) == BCRYPT_WORK_FACTOR


@pytest.mark.asyncio
async def test_hash_is_salted(hasher):
    assert await hasher.hash("Abcde1f") != await hasher.hash("Abcde1f")


@pytest.mark.asyncio
async def test_verify_round_trip(hasher):
    hashed = await hasher.hash("Abcde1f")
    assert await hasher.verify("Abcde1f", hashed) is True
    assert await hasher.verify("Abcde1g", hashed) is False


@pytest.mark.asyncio
@pytest.mark.parametrize("stored", [None, "", "not-a-bcrypt-hash"])
async def test_verify_fails_closed(hasher, stored):
    assert await hasher.verify("Abcde1f", stored) is False
