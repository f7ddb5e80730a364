"""Verified Identity Value Object.

The profile an external identity provider vouches for after checking an ID
token: the email the account is keyed on, plus display name and avatar.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

GOOGLE_AVATAR_SMALL = "s96-c"
GOOGLE_AVATAR_LARGE = "s384-c"


@dataclass(frozen=True)
class VerifiedIdentity:
    """Immutable profile returned by an ``IIdentityVerifier``.

    Attributes:
        email: Verified email address, lower-cased.
        name: Display name reported by the provider.
        picture: Avatar URL, if the provider sent one.
    """

    email: str
    name: str
    picture: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "VerifiedIdentity":
        """Build an identity from decoded ID-token claims.

        Raises:
            ValueError: If the claims carry no email address, or the provider
                does not vouch for it through ``email_verified``.
        """
        email = (claims.get("email") or "").strip().lower()
        if not email:
            raise ValueError("ID token does not carry an email claim")
        if claims.get("email_verified") not in (True, "true"):
            raise ValueError("ID token email is not verified")
        name = claims.get("name") or email.split("@")[0]
        return cls(email=email, name=name, picture=claims.get("picture"))

    def large_picture(self) -> Optional[str]:
        """Return the avatar URL rewritten to the 384px Google variant."""
        if not self.picture:
            return self.picture
        return self.picture.replace(GOOGLE_AVATAR_SMALL, GOOGLE_AVATAR_LARGE)

    def mask_for_logging(self) -> str:
        return self.email[:3] + "***" if len(self.email) > 3 else self.email
