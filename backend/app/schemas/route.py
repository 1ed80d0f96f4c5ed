"""
Route catalog schemas.

A `Route` describes one HTTP method + path binding of the application,
with the types of its path parameters and where its handler lives.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ParameterType(str, Enum):
    """
    Supported parameter types, in matching order.

    Types outside this list are reported as UNKNOWN with the
    annotation's name kept in `RouteParameter.type_name`.
    """
    STRING = "STRING"
    INT = "INT"
    BOOLEAN = "BOOLEAN"
    UNKNOWN = "UNKNOWN"


class RouteParameter(BaseModel):
    name: str
    source: str = Field(default="path", description="Where the value is bound from")
    type: ParameterType
    type_name: Optional[str] = Field(default=None, description="Annotation name for UNKNOWN types")

    @property
    def label(self) -> str:
        if self.type is ParameterType.UNKNOWN and self.type_name:
            return f"{self.name}:UNKNOWN({self.type_name})"
        return f"{self.name}:{self.type.value}"


class RouteLocation(BaseModel):
    """Source location of a handler function."""
    file: str
    line: int


class Route(BaseModel):
    method: str
    path: str
    name: str = Field(description="Handler function name")
    produces: Optional[str] = Field(default=None, description="Response media type")
    parameters: List[RouteParameter] = Field(default_factory=list)
    implementation: Optional[RouteLocation] = None

    @property
    def detail(self) -> str:
        """Short description, e.g. 'GET: name:STRING'."""
        return f"{self.method}: " + ", ".join(p.label for p in self.parameters)


class CompletionItem(BaseModel):
    """One route suggestion for a URL-valued template attribute."""
    label: str = Field(description="Full route path")
    detail: str = Field(description="Method and parameter summary")
    insert_text: str = Field(description="Path with the already written prefix removed")
