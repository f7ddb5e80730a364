from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from inkpost.core.config.settings import settings
from inkpost.infrastructure.dependency_injection.auth_dependencies import ServiceContextDep

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    env: str
    version: str
    database: str
    timestamp: datetime


@router.get("", response_model=HealthResponse)
async def health_check(services: ServiceContextDep):
    """
    Report whether the API can reach its database.

    Always answers 200; ``status`` is ``degraded`` when the database probe fails.
    """
    db_healthy = await services.database.check_health()
    return HealthResponse(
        status="ok" if db_healthy else "degraded",
        env=settings.APP_ENV,
        version=settings.VERSION,
        database="healthy" if db_healthy else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
