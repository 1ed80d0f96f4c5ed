"""
Basic Resource — Route Catalog
================================

What:  Extracts the route table of the application and matches URLs against it.
Why:   Templates reference routes by URL (`hx-get="/hello/customer/{id}"`,
       `action="/hello"`). Knowing which handler serves such a URL needs the
       full table: method, path, produced media type, parameter types and
       handler location.
How:   Walks `app.routes`, keeping FastAPI `APIRoute`s (docs and openapi
       routes are plain Starlette routes and are skipped). Parameter types
       come from the handler's type hints.
Who:   GET /routes, GET /routes/lookup, GET /routes/complete and
       `python -m app --get-routes`.

Matching:
    Path variables are stripped from both sides before comparing, so
    "/{id}/select/{toSelect}" in a template matches a route declared as
    "/{first_param}/select/{second_param}".
"""

import inspect
import json
import logging
import re
import typing
from typing import Dict, Iterable, List, Optional

from fastapi import FastAPI
from fastapi.routing import APIRoute

from app.schemas.route import (
    CompletionItem,
    ParameterType,
    Route,
    RouteLocation,
    RouteParameter,
)

logger = logging.getLogger(__name__)

# `{name}` or `{name:converter}` in a route path
_PATH_PARAM = re.compile(r"{([^}:]+)(?::[^}]*)?}")

_TYPE_MAP: Dict[type, ParameterType] = {
    str: ParameterType.STRING,
    int: ParameterType.INT,
    bool: ParameterType.BOOLEAN,
}

# HTML / htmx attributes whose value is a route URL
ROUTE_ATTRIBUTES = frozenset({
    "action",
    "hx-get",
    "hx-post",
    "hx-put",
    "hx-patch",
    "hx-delete",
})


def is_route_attribute(name: Optional[str]) -> bool:
    """True when an attribute with this name holds a route URL."""
    return name is not None and name in ROUTE_ATTRIBUTES


def without_vars(url: str) -> str:
    """
    Remove every `{...}` placeholder from a path.

    >>> without_vars("/{id}/select/{participant.uuid}")
    '//select/'
    """
    out = []
    open_ = False
    for c in url:
        if c == "{":
            open_ = True
        elif c == "}":
            open_ = False
        elif not open_:
            out.append(c)
    return "".join(out)


def _parameter(name: str, annotation) -> RouteParameter:
    param_type = _TYPE_MAP.get(annotation)
    if param_type is not None:
        return RouteParameter(name=name, type=param_type)
    type_name = getattr(annotation, "__name__", None) or str(annotation)
    return RouteParameter(name=name, type=ParameterType.UNKNOWN, type_name=type_name)


def _route_parameters(route: APIRoute) -> List[RouteParameter]:
    try:
        hints = typing.get_type_hints(route.endpoint)
    except (NameError, TypeError):
        hints = {}
    return [_parameter(name, hints.get(name, str)) for name in _PATH_PARAM.findall(route.path)]


def _media_type(route: APIRoute) -> Optional[str]:
    # FastAPI wraps the app-level default response class in a DefaultPlaceholder
    response_class = getattr(route.response_class, "value", route.response_class)
    return getattr(response_class, "media_type", None)


def _implementation(route: APIRoute) -> Optional[RouteLocation]:
    endpoint = inspect.unwrap(route.endpoint)
    try:
        source_file = inspect.getsourcefile(endpoint)
        _, line = inspect.getsourcelines(endpoint)
    except (OSError, TypeError):
        return None
    if source_file is None:
        return None
    return RouteLocation(file=source_file, line=line)


def collect_routes(app: FastAPI) -> List[Route]:
    """
    Build the route table of an application.

    One entry per (method, path); HEAD and OPTIONS added implicitly by the
    framework are not listed. Sorted by path, then method.
    """
    routes = []
    for api_route in app.routes:
        if not isinstance(api_route, APIRoute):
            continue
        parameters = _route_parameters(api_route)
        implementation = _implementation(api_route)
        media_type = _media_type(api_route)
        for method in sorted(api_route.methods or ()):
            if method in ("HEAD", "OPTIONS"):
                continue
            routes.append(
                Route(
                    method=method,
                    path=api_route.path,
                    name=api_route.name,
                    produces=media_type,
                    parameters=[p.model_copy() for p in parameters],
                    implementation=implementation,
                )
            )
    routes.sort(key=lambda r: (r.path, r.method))
    logger.debug("Collected %d routes", len(routes))
    return routes


def find_route(
    routes: Iterable[Route],
    url: str,
    method: Optional[str] = None,
) -> Optional[Route]:
    """
    Find the route serving `url`, ignoring path variables on both sides.

    Returns None when nothing matches.
    """
    target = without_vars(url)
    wanted_method = method.upper() if method else None
    for route in routes:
        if wanted_method and route.method != wanted_method:
            continue
        if without_vars(route.path) == target:
            return route
    return None


def routes_as_json(routes: Iterable[Route], indent: Optional[int] = 2) -> str:
    return json.dumps([route.model_dump(mode="json") for route in routes], indent=indent)


def _strip_prefix(path: str, prefix: str) -> str:
    # Repeated prefixes are all removed: "//x" minus "/" is "x"
    if not prefix:
        return path
    while path.startswith(prefix):
        path = path[len(prefix):]
    return path


def complete_routes(
    routes: Iterable[Route],
    attribute: Optional[str],
    already_written: str = "",
) -> List[CompletionItem]:
    """
    Suggest routes for the value of a template attribute.

    Every route is offered; `insert_text` is what remains to be typed
    after `already_written`. Attributes that do not hold a URL
    (`hx-trigger`, `class`, ...) get no suggestions.
    """
    if not is_route_attribute(attribute):
        return []
    return [
        CompletionItem(
            label=route.path,
            detail=route.detail,
            insert_text=_strip_prefix(route.path, already_written),
        )
        for route in routes
    ]
