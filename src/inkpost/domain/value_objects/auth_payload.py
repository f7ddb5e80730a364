"""Auth Payload Value Object.

Every authentication entry point (signup, signin, Google sign-in) answers
with the same shape; the client stores it and renders from it.
"""

from dataclasses import asdict, dataclass

from inkpost.domain.entities.user import User


@dataclass(frozen=True)
class AuthPayload:
    profile_img: str
    username: str
    fullname: str
    access_token: str

    @classmethod
    def for_user(cls, user: User, access_token: str) -> "AuthPayload":
        return cls(
            profile_img=user.profile_img,
            username=user.username,
            fullname=user.fullname,
            access_token=access_token,
        )

    def to_dict(self) -> dict:
        return asdict(self)
