"""/google-auth route module.

The client completes Google sign-in in the browser and posts the resulting ID
token here. The first sign-in for an email creates the account.
"""

import uuid

import structlog
from fastapi import APIRouter, Request

from inkpost.adapters.api.v1.auth.schemas import AuthResponse, GoogleAuthRequest
from inkpost.infrastructure.dependency_injection.auth_dependencies import AuthServiceDep

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=AuthResponse,
    summary="Sign in with a Google ID token",
    description=(
        "Verifies the token with Google, creates the account on first use and "
        "returns an access token. A token Google rejects yields 500."
    ),
)
async def google_auth(request: Request, payload: GoogleAuthRequest, auth_service: AuthServiceDep):
    request_logger = logger.bind(
        correlation_id=str(uuid.uuid4()),
        endpoint="google_auth",
        client_ip=request.client.host if request.client else "unknown",
    )
    request_logger.info("Google sign-in attempt", has_token=bool(payload.access_token))

    result = await auth_service.google_auth(payload.access_token)

    request_logger.info("Google sign-in succeeded", username=result.username)
    return result.to_dict()
