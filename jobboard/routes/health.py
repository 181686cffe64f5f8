"""
Job Board — Health Check Route
===============================

What:  Liveness/readiness endpoint for container health checks and load balancers.
How:   Runs SELECT 1 against the database file and reports uptime and version.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from jobboard import __version__
from jobboard.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request):
    """
    Check that the process is serving and the database file is usable.

    Not protected by the API key so orchestrators can probe it.
    """
    database = request.app.state.database
    connected = await database.ping()

    payload = HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if not connected:
        logger.warning("Health check: database unreachable")
        return JSONResponse(status_code=503, content=payload.model_dump())
    return payload
