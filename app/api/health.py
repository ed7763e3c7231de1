"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.database import async_session_factory, ping

logger = structlog.get_logger()

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


async def check_database() -> bool:
    """Probe the database with a trivial query.

    Returns:
        True if the database answered.
    """
    try:
        async with async_session_factory() as session:
            await ping(session)
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database readiness probe failed", error=str(e))
        return False
    return True


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    from app.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=settings.api_version,
    )


@router.get("/ready", response_model=None)
async def readiness_check(
    database_ok: Annotated[bool, Depends(check_database)],
) -> dict[str, str] | JSONResponse:
    """Check if service is ready to accept requests.

    Returns:
        Readiness status, or 503 when the database is unreachable.
    """
    if not database_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Database unavailable"},
        )
    return {"status": "ready"}
