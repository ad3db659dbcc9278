"""
Users API Backend - Health Check Route
=======================================

What:  Liveness endpoint for monitoring and load balancer health checks.
How:   The service has no external dependencies (no database, no upstream
       APIs), so being able to answer is the whole check. It never fails and
       does not look at the user store.
"""

from fastapi import APIRouter

from userapi import __version__
from userapi.schemas.user import HealthData, HealthResponse
from userapi.store import utc_now_rfc3339

# Reported to clients as-is; monitoring dashboards key off this name.
SERVICE_NAME = "go-backend-api"

router = APIRouter(prefix="/api/v1", tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse.success(
        "API is healthy",
        HealthData(
            timestamp=utc_now_rfc3339(),
            version=__version__,
            service=SERVICE_NAME,
        ),
    )
