"""
Basic Resource — Custom Exception Hierarchy
=============================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and routes; caught by global handlers.

Exception Hierarchy:
    BasicResourceError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── TemplateNotFoundError    → 500 Internal Server Error
    └── TemplateRenderError      → 500 Internal Server Error

Path parameter type errors (e.g. a non-integer `sufix`) never reach this
hierarchy: FastAPI rejects them with 422 before the handler runs.
"""

from typing import Any, Dict, Optional


class BasicResourceError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the handler allows)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BasicResourceError):
    """
    Raised when client input fails a business rule.

    HTTP:    400 Bad Request
    When:    A template binding key is empty, a path segment is blank.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(BasicResourceError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found
    When:    Route lookup by URL finds nothing.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class TemplateNotFoundError(BasicResourceError):
    """
    Raised when an injected template has no file behind it.

    HTTP:    500 Internal Server Error

    A missing template is a deployment defect, not something the client
    can fix, so it maps to 500 rather than 404.
    """

    def __init__(
        self,
        template: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["template"] = template
        super().__init__(message=f"Template '{template}' is not available", context=ctx)
        self.template = template


class TemplateRenderError(BasicResourceError):
    """
    Raised when Jinja2 fails while rendering a template instance.

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Template rendering failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
