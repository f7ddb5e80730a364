"""/signup route module."""

import uuid

import structlog
from fastapi import APIRouter, Request, status

from inkpost.adapters.api.v1.auth.schemas import AuthResponse, SignupRequest
from inkpost.core.logging import mask_email
from inkpost.infrastructure.dependency_injection.auth_dependencies import AuthServiceDep

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a password account",
    description="Validates the signup form, creates the account and returns an access token.",
)
async def signup(request: Request, payload: SignupRequest, auth_service: AuthServiceDep):
    """Register a new user.

    Validation failures and an already registered email come back as
    ``403 {"error": ...}`` through the exception handlers.
    """
    request_logger = logger.bind(
        correlation_id=str(uuid.uuid4()),
        endpoint="signup",
        client_ip=request.client.host if request.client else "unknown",
    )
    request_logger.info("Signup attempt", email=mask_email(payload.email))

    result = await auth_service.signup(payload.fullname, payload.email, payload.password)

    request_logger.info("Signup succeeded", username=result.username)
    return result.to_dict()
