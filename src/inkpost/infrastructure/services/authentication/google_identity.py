"""Google ID-token verification.

The token is a JWT signed by Google. Its signature is checked against
Google's published JSON Web Key Set, then ``iss``, ``aud`` and ``exp`` are
validated with authlib before the profile claims are trusted.
"""

from typing import Any, Dict, List

import httpx
from authlib.jose import JsonWebKey, JsonWebToken
from authlib.jose.errors import JoseError
from structlog import get_logger

from inkpost.core.exceptions import IdentityVerificationError
from inkpost.domain.interfaces.services import IIdentityVerifier
from inkpost.domain.value_objects.verified_identity import VerifiedIdentity

logger = get_logger(__name__)


class GoogleIdentityVerifier(IIdentityVerifier):
    """Verifies Google-issued ID tokens.

    The key set is fetched on every verification; Google rotates its keys
    and sign-ins are rare enough that caching is not needed.

    Attributes:
        client_id (str): Expected ``aud`` claim.
        jwks_url (str): Location of Google's signing keys.
        issuers (List[str]): Accepted ``iss`` values.
        http_client (httpx.AsyncClient): Shared client owned by the lifespan.
    """

    def __init__(
        self,
        client_id: str,
        jwks_url: str,
        issuers: List[str],
        http_client: httpx.AsyncClient,
    ):
        self.client_id = client_id
        self.jwks_url = jwks_url
        self.issuers = issuers
        self.http_client = http_client
        self._jwt = JsonWebToken(["RS256"])

    async def _fetch_key_set(self) -> Dict[str, Any]:
        try:
            response = await self.http_client.get(self.jwks_url)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Could not fetch Google signing keys", error=str(e))
            raise IdentityVerificationError("Could not fetch identity provider keys") from e

    async def verify(self, id_token: str) -> VerifiedIdentity:
        if not id_token:
            raise IdentityVerificationError("No ID token provided")
        if not self.client_id:
            logger.error("GOOGLE_CLIENT_ID is not configured")
            raise IdentityVerificationError("Identity provider is not configured")

        claims_options = {
            "iss": {"essential": True, "values": self.issuers},
            "aud": {"essential": True, "value": self.client_id},
            "exp": {"essential": True},
        }
        key_set_data = await self._fetch_key_set()
        try:
            key_set = JsonWebKey.import_key_set(key_set_data)
            claims = self._jwt.decode(id_token, key=key_set, claims_options=claims_options)
            claims.validate()
            identity = VerifiedIdentity.from_claims(dict(claims))
        except (JoseError, ValueError, KeyError) as e:
            logger.warning("Google ID token rejected", error=str(e))
            raise IdentityVerificationError("Invalid ID token") from e

        logger.debug("Google ID token verified", email=identity.mask_for_logging())
        return identity
