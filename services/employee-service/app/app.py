"""
Main FastAPI application for the employee service.

This file wires together all layers:
- Domain: Employee entities and exceptions
- Infrastructure: Remote employee directory client
- Services: Business operations
- Routers: HTTP endpoints
"""

import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .dependencies import set_employee_service
from .domain.exceptions import (
    DirectoryUnavailableException,
    EmployeeServiceException,
    InvalidEmployeeInputException,
    UpstreamRejectedException,
)
from .infrastructure.http_directory_client import HttpDirectoryClient
from .logging_config import (
    clear_request_id,
    get_request_id,
    set_request_id,
    setup_logging,
)
from .metrics import metrics_endpoint, track_request_metrics
from .models import ErrorResponse
from .routers import employee_router, health_router
from .services.employee_service import EmployeeService

setup_logging(
    log_level=settings.LOG_LEVEL,
    service_name=settings.SERVICE_NAME,
    use_json=settings.LOG_JSON,
)

logger = structlog.get_logger(__name__)


def create_employee_service() -> EmployeeService:
    """
    Create the employee service with its directory client.

    Returns:
        Configured EmployeeService instance
    """
    directory_client = HttpDirectoryClient(
        base_url=settings.DIRECTORY_API_URL,
        timeout=settings.REQUEST_TIMEOUT,
    )
    return EmployeeService(directory_client=directory_client)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Employee Service", directory=settings.DIRECTORY_API_URL)

    employee_service = create_employee_service()
    set_employee_service(employee_service)
    logger.info("Employee service initialized")

    yield

    logger.info("Shutting down Employee Service")
    await employee_service.directory_client.close()
    set_employee_service(None)
    logger.info("Employee Service shut down complete")


app = FastAPI(
    title=settings.APP_NAME,
    description="Employee directory facade over the remote employee API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


def _route_label(request: Request) -> str:
    """Matched route template, so path parameters never become label values."""
    route = request.scope.get("route")
    return getattr(route, "path", "unmatched")


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Bind a request ID, log the request and record metrics."""
    request_id = set_request_id(request.headers.get("X-Request-ID"))
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        # The global exception handler answers and clears the context.
        track_request_metrics(
            request.method,
            _route_label(request),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            time.perf_counter() - start_time,
        )
        raise

    duration = time.perf_counter() - start_time
    response.headers["X-Request-ID"] = request_id

    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(duration * 1000, 2),
    )
    track_request_metrics(request.method, _route_label(request), response.status_code, duration)

    clear_request_id()
    return response


app.include_router(employee_router.router)
app.include_router(health_router.router)


@app.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": "1.0.0",
        "status": "operational",
        "employees": "/api/v1/employees",
        "health": "/health",
        "ready": "/ready",
    }


def _error_response(
    request: Request, status_code: int, error: str, exc: EmployeeServiceException
) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        message=exc.message,
        details=exc.details,
        request_id=get_request_id(),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(InvalidEmployeeInputException)
async def invalid_input_handler(request: Request, exc: InvalidEmployeeInputException):
    """Caller supplied invalid employee data."""
    logger.warning("Invalid employee input", field=exc.field, reason=exc.reason)
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "invalid_input", exc)


@app.exception_handler(UpstreamRejectedException)
async def upstream_rejected_handler(request: Request, exc: UpstreamRejectedException):
    """Directory explicitly rejected the request."""
    logger.error("Directory rejected request", operation=exc.operation, reason=exc.reason)
    return _error_response(request, status.HTTP_502_BAD_GATEWAY, "upstream_rejected", exc)


@app.exception_handler(DirectoryUnavailableException)
async def directory_unavailable_handler(
    request: Request, exc: DirectoryUnavailableException
):
    """Directory could not be reached or answered badly."""
    logger.error(
        "Employee directory unavailable",
        operation=exc.operation,
        reason=exc.reason,
        upstream_status=exc.status_code,
    )
    return _error_response(
        request, status.HTTP_503_SERVICE_UNAVAILABLE, "directory_unavailable", exc
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    request_id = get_request_id()
    clear_request_id()

    response = JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "request_id": request_id,
        },
    )
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
