"""Authentication API schemas package."""

# flake8: noqa: F401 – re-export

from .requests import GoogleAuthRequest, SigninRequest, SignupRequest
from .responses import AuthResponse
