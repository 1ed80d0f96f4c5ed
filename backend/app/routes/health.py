"""
Basic Resource — Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Checks that the templates directory exists and the `hello` template
       loads, and reports how many routes are registered.

    Status levels:
    - healthy:   Templates available (HTTP 200)
    - unhealthy: Templates missing (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Request, Response

from app import __version__
from app.schemas.hello import HealthResponse
from app.services.route_catalog import collect_routes
from app.services.template_service import template_engine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Templates unavailable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    templates_status = "available"
    overall = "healthy"

    if not template_engine.is_available("hello"):
        templates_status = "unavailable"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: templates unavailable in %s", template_engine.directory)

    return HealthResponse(
        status=overall,
        version=__version__,
        templates=templates_status,
        routes=len(collect_routes(request.app)),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
