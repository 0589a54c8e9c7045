"""Data models for parsed API documents and the flattened endpoint records.

The loader builds an :class:`ApiDocument`; the extractor projects each of
its operations into an immutable :class:`EndpointRecord` for rendering.
"""

from pydantic import BaseModel, ConfigDict


class Param(BaseModel):
    """A single declared parameter (query, path, header, or cookie)."""

    name: str
    location: str  # query / path / header / cookie / formData
    param_type: str | None = None  # schema type, None when undeclared
    description: str | None = None


class RequestBody(BaseModel):
    """A declared request body."""

    description: str | None = None
    content_types: list[str] = []


class ApiOperation(BaseModel):
    """One HTTP-method-bound operation on a path, as declared."""

    method: str  # lowercase key from the path item
    path: str
    summary: str | None = None
    description: str | None = None
    parameters: list[Param] = []
    request_body: RequestBody | None = None
    responses: dict[str, str | None] = {}  # {status_code: description}


class Diagnostic(BaseModel):
    """A structural problem found while parsing, with its location."""

    message: str
    pointer: str = "#"

    def __str__(self) -> str:
        return f"{self.pointer}: {self.message}"


class ApiDocument(BaseModel):
    """A parsed API description: its operations in declaration order."""

    version: str | None = None
    title: str | None = None
    operations: list[ApiOperation] = []
    diagnostics: list[Diagnostic] = []


class EndpointRecord(BaseModel):
    """A render-ready endpoint. Every field holds text, never None."""

    model_config = ConfigDict(frozen=True)

    method: str  # GET / POST / PUT / DELETE / PATCH ...
    path: str  # /users/{id}
    description: str
    parameters: tuple[str, ...] = ()
    response: str
