"""
Basic Resource — Route Catalog Handlers
=========================================

What:  Exposes the application's route table, URL-to-route lookup and
       route completion for template attributes.
Who:   Editor tooling that resolves `hx-get` / `action` URLs in templates
       to the handler serving them.

    GET /routes                              full table
    GET /routes/lookup?url=...&method=       single route, 404 when none matches
    GET /routes/complete?attribute=&prefix=  suggestions for an attribute value
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query, Request

from app.exceptions import NotFoundError, ValidationError
from app.schemas.hello import ErrorResponse
from app.schemas.route import CompletionItem, Route
from app.services.route_catalog import collect_routes, complete_routes, find_route

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["Routes"])


@router.get(
    "",
    response_model=List[Route],
    summary="List every API route",
)
async def list_routes(request: Request) -> List[Route]:
    return collect_routes(request.app)


@router.get(
    "/lookup",
    response_model=Route,
    responses={
        400: {"description": "Blank URL", "model": ErrorResponse},
        404: {"description": "No route serves this URL", "model": ErrorResponse},
    },
    summary="Find the route serving a URL",
    description=(
        "Path variables are ignored on both sides, so a template URL such as "
        "`/hello/customer/{id}` matches the route `/hello/customer/{name}`."
    ),
)
async def lookup_route(
    request: Request,
    url: str = Query(description="URL as written in a template attribute"),
    method: Optional[str] = Query(default=None, description="HTTP method filter (e.g. GET)"),
) -> Route:
    if not url.strip():
        raise ValidationError(message="Query parameter 'url' must not be blank", field="url")

    route = find_route(collect_routes(request.app), url.strip(), method)
    if route is None:
        raise NotFoundError(resource="route", resource_id=url.strip(), context={"method": method})
    return route


@router.get(
    "/complete",
    response_model=List[CompletionItem],
    summary="Suggest routes for a template attribute value",
    description=(
        "Returns every route when `attribute` holds a URL (`action`, `hx-get`, "
        "`hx-post`, `hx-put`, `hx-patch`, `hx-delete`), otherwise an empty list. "
        "`insert_text` is the path minus the already written `prefix`."
    ),
)
async def complete(
    request: Request,
    attribute: str = Query(description="Attribute name, e.g. hx-get"),
    prefix: str = Query(default="", description="Value already written in the attribute"),
) -> List[CompletionItem]:
    return complete_routes(collect_routes(request.app), attribute, prefix)
