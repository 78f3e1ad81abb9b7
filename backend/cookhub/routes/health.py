"""
CookHub Backend — Health Check Route
======================================

What:  Liveness/readiness endpoint for container health checks.
How:   Pings the Store with `SELECT 1`.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503)
"""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from cookhub import __version__
from cookhub.database import Store, get_store
from cookhub.schemas.common import HealthResponse

router = APIRouter(tags=["Health"])

# Module load time, reported as uptime
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Service health check",
)
async def health_check(store: Store = Depends(get_store)):
    connected = await store.ping()
    body = HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if not connected:
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
