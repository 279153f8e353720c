"""
Phonebook Backend — Health Check Route
========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the active contact store and reports uptime.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from phonebook import __version__
from phonebook.schemas.contact import HealthResponse
from phonebook.stores import ContactStore, get_contact_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(store: ContactStore = Depends(get_contact_store)) -> JSONResponse:
    """
    Check the health of the service and its store.

    SELECT 1 for the database store; the memory store is always reachable.
    """
    if store.backend_name == "memory":
        store_status = "in-memory"
        overall = "healthy"
    elif await store.ping():
        store_status = "connected"
        overall = "healthy"
    else:
        store_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: store unreachable")

    payload = HealthResponse(
        status=overall,
        version=__version__,
        store=store_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=payload.model_dump(),
    )
