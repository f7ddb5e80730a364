"""/signin route module."""

import uuid

import structlog
from fastapi import APIRouter, Request

from inkpost.adapters.api.v1.auth.schemas import AuthResponse, SigninRequest
from inkpost.core.logging import mask_email
from inkpost.infrastructure.dependency_injection.auth_dependencies import AuthServiceDep

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=AuthResponse,
    summary="Sign in with email and password",
)
async def signin(request: Request, payload: SigninRequest, auth_service: AuthServiceDep):
    request_logger = logger.bind(
        correlation_id=str(uuid.uuid4()),
        endpoint="signin",
        client_ip=request.client.host if request.client else "unknown",
    )
    request_logger.info("Signin attempt", email=mask_email(payload.email))

    result = await auth_service.signin(payload.email, payload.password)

    request_logger.info("Signin succeeded", username=result.username)
    return result.to_dict()
