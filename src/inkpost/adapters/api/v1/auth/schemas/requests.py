"""Request-payload Pydantic models for authentication endpoints.

Fields default to empty strings so that a missing field reaches the service
and gets the same message as an empty one.
"""

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Payload expected by ``POST /signup``."""

    model_config = ConfigDict(populate_by_name=True)

    fullname: str = Field("", alias="fullName", examples=["Jane Doe"])
    email: str = Field("", examples=["jane@example.com"])
    password: str = Field("", examples=["Abcde1f"])


class SigninRequest(BaseModel):
    """Payload expected by ``POST /signin``."""

    email: str = Field("", examples=["jane@example.com"])
    password: str = Field("", examples=["Abcde1f"])


class GoogleAuthRequest(BaseModel):
    """Payload expected by ``POST /google-auth``. The token is a Google ID token."""

    access_token: str = Field("", examples=["eyJhbGciOiJSUzI1NiIsImtpZCI6..."])
