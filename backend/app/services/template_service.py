"""
Basic Resource — Template Service
===================================

What:  Loads named HTML templates and binds data into renderable instances.
Why:   Routes return a template instance rather than a string; the rendering
       step stays in one place with consistent escaping and error translation.
How:   A Jinja2 Environment rooted at settings.templates_dir. `Template` wraps
       one loaded file; `Template.data()` produces a `TemplateInstance` that
       collects bindings and renders on demand.
Who:   Injected into route handlers through the `get_template()` dependency.
When:  Per request: one instance per response, templates cached by Jinja2.

Usage:
    instance = template_engine.get_template("hello").data("name", "micmine")
    instance.context   # {"name": "micmine"}
    instance.render()  # "<!DOCTYPE html>..."
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from app.config import settings
from app.exceptions import TemplateNotFoundError, TemplateRenderError, ValidationError

logger = logging.getLogger(__name__)

# Template names map to files with this suffix: "hello" → "hello.html"
TEMPLATE_SUFFIX = ".html"


class TemplateInstance:
    """
    A template plus its named data bindings.

    `data()` returns self so bindings chain:
        template.data("name", name).data("sufix", sufix)
    """

    def __init__(self, template: "Template"):
        self.template = template
        self._bindings: Dict[str, Any] = {}

    def data(self, key: str, value: Any) -> "TemplateInstance":
        if not key:
            raise ValidationError(message="Template binding key must not be empty", field="key")
        self._bindings[key] = value
        return self

    @property
    def context(self) -> Dict[str, Any]:
        """Copy of the current bindings (mutating it does not affect the instance)."""
        return dict(self._bindings)

    def render(self) -> str:
        return self.template.render(self.context)

    def __repr__(self) -> str:
        return f"TemplateInstance(template={self.template.name!r}, data={self._bindings!r})"


class Template:
    """A loaded, named template. Immutable; every `data()` call starts a new instance."""

    def __init__(self, name: str, jinja_template):
        self.name = name
        self._jinja_template = jinja_template

    def instance(self) -> TemplateInstance:
        return TemplateInstance(self)

    def data(self, key: str, value: Any) -> TemplateInstance:
        return self.instance().data(key, value)

    def render(self, context: Dict[str, Any]) -> str:
        """
        Render with the given context.

        Raises:
            TemplateRenderError: Jinja2 failed (undefined filter, bad syntax at
                render time). The original error is kept in the context for logs.
        """
        try:
            return self._jinja_template.render(**context)
        except TemplateError as e:
            logger.error("Rendering template '%s' failed: %s", self.name, e)
            raise TemplateRenderError(
                message=f"Template '{self.name}' could not be rendered",
                context={"template": self.name, "error": str(e)},
            ) from e


class TemplateEngine:
    """
    Owns the Jinja2 environment.

    Autoescaping is on for .html files, so path segments echoed into a
    template (GET /hello/customer/{name}) are escaped.
    """

    def __init__(self, directory: Optional[str] = None):
        self.directory = Path(directory or settings.templates_dir).resolve()
        self.environment = Environment(
            loader=FileSystemLoader(str(self.directory)),
            autoescape=select_autoescape(["html", "xml"]),
        )
        logger.info("TemplateEngine initialized with directory=%s", self.directory)

    def get_template(self, name: str) -> Template:
        """
        Resolve a template by name.

        Raises:
            TemplateNotFoundError: no `<name>.html` in the templates directory.
            TemplateRenderError: the file exists but does not compile.
        """
        filename = f"{name}{TEMPLATE_SUFFIX}"
        try:
            jinja_template = self.environment.get_template(filename)
        except TemplateNotFound as e:
            logger.error("Template '%s' not found in %s", filename, self.directory)
            raise TemplateNotFoundError(
                template=name,
                context={"directory": str(self.directory)},
            ) from e
        except TemplateSyntaxError as e:
            logger.error("Template '%s' has a syntax error at line %s: %s", filename, e.lineno, e.message)
            raise TemplateRenderError(
                message=f"Template '{name}' could not be compiled",
                context={"template": name, "line": e.lineno, "error": e.message},
            ) from e
        return Template(name, jinja_template)

    def is_available(self, name: str) -> bool:
        """Lightweight check used by the health endpoint."""
        if not self.directory.is_dir():
            return False
        try:
            self.get_template(name)
        except (TemplateNotFoundError, TemplateRenderError, TemplateError):
            return False
        return True


# Singleton instance
template_engine = TemplateEngine()


def get_template(name: str) -> Callable[[], Template]:
    """
    Build a FastAPI dependency that injects the named template.

    Usage:
        hello: Template = Depends(get_template("hello"))
    """

    def dependency() -> Template:
        return template_engine.get_template(name)

    dependency.__name__ = f"template_{name}"
    return dependency
