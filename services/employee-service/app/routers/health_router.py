"""
Health check router.

Provides liveness and readiness endpoints. Readiness probes the
employee directory.
"""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..dependencies import get_employee_service
from ..domain.exceptions import DirectoryUnavailableException
from ..services.employee_service import EmployeeService

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    service: str = "employee-service"
    version: str = "1.0.0"


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    ready: bool
    checks: dict
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health_check():
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    """
    return HealthResponse(status="healthy", timestamp=_now())


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
    summary="Readiness check",
)
async def readiness_check(
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Readiness check.

    Returns 200 if the employee directory answers, 503 otherwise.
    """
    try:
        await service.list_all()
        checks = {"employee_directory": "healthy"}
    except DirectoryUnavailableException as error:
        logger.warning("Readiness check failed", reason=error.reason)
        checks = {"employee_directory": "unhealthy"}

    ready = all(check == "healthy" for check in checks.values())
    body = ReadinessResponse(ready=ready, checks=checks, timestamp=_now())

    if not ready:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(),
        )
    return body
