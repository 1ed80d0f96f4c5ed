"""
Basic Resource — Pydantic Request/Response Schemas
===================================================

What:  Pydantic models defining the JSON contract of the greeting resource.
Why:   Automatic serialization and OpenAPI doc generation.
Who:   Used by route handlers as return types.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class GreetingContext(BaseModel):
    """
    What:  The binding context of a `hello` template instance, as JSON.
    Who:   Returned by PUT /hello/customer/{name}/{sufix}.
    """
    name: str = Field(description="Name bound into the greeting")
    sufix: int = Field(description="Integer suffix taken from the path")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "template_error",
            "message": "Template 'hello' is not available",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    templates: str = Field(description="Template availability: available, unavailable")
    routes: int = Field(description="Number of API routes registered")
    uptime_seconds: float = Field(description="Seconds since service started")
