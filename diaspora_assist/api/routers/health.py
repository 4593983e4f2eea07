"""
Health check API endpoint.

Routes: GET /health

Dependencies: fastapi
System role: Health check HTTP API (also the keep-alive ping target)
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

_STARTED_AT = time.monotonic()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    uptime: float


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check with process uptime in seconds."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=round(time.monotonic() - _STARTED_AT, 3),
    )
