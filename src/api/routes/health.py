"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    success: bool = True
    message: str
    timestamp: str


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Liveness probe for load balancers.

    Returns service status without checking dependencies.
    """
    return HealthResponse(
        message="Server is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
