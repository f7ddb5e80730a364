"""Authentication router package: signup, signin and Google sign-in."""

from fastapi import APIRouter

from .routes import google_auth as google_auth_route
from .routes import signin as signin_route
from .routes import signup as signup_route

router = APIRouter(tags=["auth"])

router.include_router(signup_route.router, prefix="/signup")
router.include_router(signin_route.router, prefix="/signin")
router.include_router(google_auth_route.router, prefix="/google-auth")

__all__ = ["router"]
