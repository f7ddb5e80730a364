"""Response Pydantic models for authentication endpoints."""

from pydantic import BaseModel, Field


class AuthResponse(BaseModel):
    """Response returned by signup, signin and google-auth."""

    profile_img: str = Field(..., examples=["https://api.dicebear.com/6.x/fun-emoji/svg?seed=Luna"])
    username: str = Field(..., examples=["jane"])
    fullname: str = Field(..., examples=["Jane Doe"])
    access_token: str = Field(..., examples=["eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."])
