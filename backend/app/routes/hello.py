"""
Basic Resource — Greeting Route Handlers
==========================================

What:  The /hello resource: a static greeting, a greeting for a named
       customer, and a JSON view of the same template context.
How:   Each handler receives the injected `hello` template, binds data into
       a TemplateInstance and hands it to `render_html()` or returns its
       context as JSON.

Route table:
    GET  /hello                           text/html
    GET  /hello/customer/{name}           text/html
    PUT  /hello/customer/{name}/{sufix}   application/json
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.config import settings
from app.schemas.hello import ErrorResponse, GreetingContext
from app.services.template_service import Template, TemplateInstance, get_template

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hello", tags=["Hello"])


def render_html(instance: TemplateInstance) -> HTMLResponse:
    return HTMLResponse(content=instance.render())


@router.get(
    "",
    response_class=HTMLResponse,
    responses={500: {"description": "Template missing or broken", "model": ErrorResponse}},
    summary="Static greeting",
)
async def hello(template: Template = Depends(get_template("hello"))) -> HTMLResponse:
    """Render the greeting for the default name (`micmine` unless configured)."""
    return render_html(template.data("name", settings.default_name))


@router.get(
    "/customer/{name}",
    response_class=HTMLResponse,
    responses={500: {"description": "Template missing or broken", "model": ErrorResponse}},
    summary="Greeting for a customer",
)
async def customer(
    name: str,
    template: Template = Depends(get_template("hello")),
) -> HTMLResponse:
    """
    Render the greeting with the path segment bound to `name`.

    The segment is echoed verbatim into the context; autoescaping takes
    care of markup on render.
    """
    logger.debug("Greeting customer %r", name)
    return render_html(template.data("name", name))


@router.put(
    "/customer/{name}/{sufix}",
    response_model=GreetingContext,
    responses={500: {"description": "Template missing", "model": ErrorResponse}},
    summary="Greeting context for a customer with a suffix",
)
async def customer_other(
    name: str,
    sufix: int,
    template: Template = Depends(get_template("hello")),
) -> GreetingContext:
    """
    Return the binding context of the greeting as JSON.

    `sufix` must be an integer; anything else is rejected with 422 by
    FastAPI before this handler runs.
    """
    instance = template.data("name", name).data("sufix", sufix)
    return GreetingContext(**instance.context)
