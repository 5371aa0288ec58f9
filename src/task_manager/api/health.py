"""Health check endpoint implementation."""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from .. import __version__
from ..context import ServerContext
from ..models import HealthResponse
from .dependencies import get_context

router = APIRouter()

_start_time = time.time()


def format_uptime(start_time: float) -> str:
    """Format uptime as human readable string."""
    uptime_seconds = int(time.time() - start_time)
    days = uptime_seconds // 86400
    hours = (uptime_seconds % 86400) // 3600
    minutes = (uptime_seconds % 3600) // 60
    seconds = uptime_seconds % 60

    return f"{days}d {hours}h {minutes}m {seconds}s"


@router.get("/health", response_model=HealthResponse)
async def health_check(context: ServerContext = Depends(get_context)) -> HealthResponse:
    """
    Health check endpoint.

    Returns service status, version, uptime, current timestamp and the number
    of tasks held by the registry.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime=format_uptime(_start_time),
        timestamp=datetime.now(timezone.utc),
        task_count=len(context.registry),
    )


@router.get("/health/simple")
async def simple_health_check() -> Dict[str, Any]:
    """Simple health check for load balancers."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
