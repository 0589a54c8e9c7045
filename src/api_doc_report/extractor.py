"""Flatten a parsed API document into render-ready endpoint records."""

import logging
from pathlib import Path

from api_doc_report.errors import SpecParseError
from api_doc_report.parser.base import ApiDocument, ApiOperation, EndpointRecord, Param
from api_doc_report.parser.swagger import parse_openapi

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description provided"
NO_PARAM_DESCRIPTION = "No description"
NO_RESPONSE = "No response info"
UNKNOWN_TYPE = "unknown"


def extract(spec_path: Path, strict: bool = False) -> list[EndpointRecord]:
    """Load a specification file and return one record per (path, operation).

    Diagnostics are logged as warnings. In strict mode any diagnostic aborts
    extraction with SpecParseError; otherwise records are built from
    whatever could be parsed.
    """
    return extract_records(parse_openapi(spec_path), strict=strict, source=spec_path)


def extract_records(document: ApiDocument, strict: bool = False, source: Path | str = "document") -> list[EndpointRecord]:
    """Build records from an already parsed document, applying the strict/lenient policy."""
    for diagnostic in document.diagnostics:
        logger.warning("%s: %s", source, diagnostic)

    if strict and document.diagnostics:
        details = "\n".join(f"  {d}" for d in document.diagnostics)
        raise SpecParseError(
            f"{source} has {len(document.diagnostics)} problem(s):\n{details}",
            diagnostics=document.diagnostics,
        )

    return [build_record(op) for op in document.operations]


def build_record(operation: ApiOperation) -> EndpointRecord:
    """Project one parsed operation into an EndpointRecord."""
    parameters = [format_param(p) for p in operation.parameters]
    if operation.request_body is not None:
        body_description = first_present(operation.request_body.description, default=NO_PARAM_DESCRIPTION)
        parameters.append(f"Request Body: {body_description}")

    if "200" in operation.responses:
        response = f"200 OK: {operation.responses['200'] or ''}"
    else:
        response = NO_RESPONSE

    return EndpointRecord(
        method=operation.method.upper(),
        path=operation.path,
        description=first_present(operation.summary, operation.description, default=NO_DESCRIPTION),
        parameters=tuple(parameters),
        response=response,
    )


def format_param(param: Param) -> str:
    """Format a parameter as ``"<name> (<type>): <description>"``."""
    param_type = first_present(param.param_type, default=UNKNOWN_TYPE)
    description = first_present(param.description, default=NO_PARAM_DESCRIPTION)
    return f"{param.name} ({param_type}): {description}"


def first_present(*values: str | None, default: str) -> str:
    """Return the first value that is neither None nor empty, else ``default``."""
    for value in values:
        if value:
            return value
    return default
