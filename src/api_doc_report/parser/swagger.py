"""OpenAPI / Swagger document parser.

Parses OpenAPI 3.x and Swagger 2.0 documents into an ApiDocument.
Structural problems are recorded as diagnostics instead of aborting, so a
partially broken document still yields whatever operations it declares.
"""

import json
import logging
from pathlib import Path

import yaml

from api_doc_report.errors import InputNotFoundError, InputUnreadableError, SpecParseError

from .base import ApiDocument, ApiOperation, Diagnostic, Param, RequestBody
from .detect import SWAGGER2, UNKNOWN, declared_version, detect_flavour

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def parse_openapi(file_path: Path) -> ApiDocument:
    """Parse an OpenAPI/Swagger file into an ApiDocument."""
    text = _read_text(file_path)
    doc = _load(text, file_path)

    diagnostics: list[Diagnostic] = []
    flavour = detect_flavour(doc)
    version = declared_version(doc)
    if flavour == UNKNOWN:
        diagnostics.append(
            Diagnostic(message=f"Unsupported or missing version field (got {version!r})")
        )

    info = doc.get("info")
    if not isinstance(info, dict):
        diagnostics.append(Diagnostic(message="Document has no 'info' object"))
        info = {}

    operations = _parse_paths(doc, flavour, diagnostics)
    logger.debug(
        "Parsed %s: %d operations, %d diagnostics", file_path, len(operations), len(diagnostics)
    )

    return ApiDocument(
        version=version,
        title=_text(info.get("title")),
        operations=operations,
        diagnostics=diagnostics,
    )


def _read_text(file_path: Path) -> str:
    if not file_path.exists():
        raise InputNotFoundError(f"Specification file not found: {file_path}")
    try:
        # utf-8-sig tolerates the BOM some Windows tools write
        return file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnreadableError(f"Cannot read specification file {file_path}: {exc}") from exc


def _load(text: str, file_path: Path) -> dict:
    """Parse text as JSON, falling back to YAML for non-JSON content."""
    if not text.strip():
        raise SpecParseError(f"Specification file is empty: {file_path}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as json_error:
        if file_path.suffix.lower() == ".json":
            raise SpecParseError(f"Invalid JSON in {file_path}: {json_error}") from json_error
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as yaml_error:
            raise SpecParseError(f"Cannot parse {file_path} as JSON or YAML: {yaml_error}") from yaml_error

    if not isinstance(data, dict):
        raise SpecParseError(
            f"Specification must be a JSON/YAML object (got {type(data).__name__})"
        )
    return data


def _parse_paths(doc: dict, flavour: str, diagnostics: list[Diagnostic]) -> list[ApiOperation]:
    paths = doc.get("paths")
    if not isinstance(paths, dict):
        diagnostics.append(Diagnostic(message="Document has no 'paths' object"))
        return []

    operations = []
    for path, item in paths.items():
        path = str(path)
        pointer = _pointer("paths", path)
        item = _resolve(item, doc, diagnostics, pointer)
        if item is None:
            continue
        if not isinstance(item, dict):
            diagnostics.append(Diagnostic(message="Path item is not an object", pointer=pointer))
            continue

        shared = _parameter_list(item.get("parameters", []), doc, diagnostics, pointer)
        for method, operation in item.items():
            method = str(method).lower()
            if method not in HTTP_METHODS:
                continue
            op_pointer = _pointer("paths", path, method)
            if not isinstance(operation, dict):
                diagnostics.append(Diagnostic(message="Operation is not an object", pointer=op_pointer))
                continue
            operations.append(
                _parse_operation(doc, flavour, path, method, operation, shared, diagnostics, op_pointer)
            )

    return operations


def _parse_operation(
    doc: dict,
    flavour: str,
    path: str,
    method: str,
    operation: dict,
    shared: list[tuple[dict, str]],
    diagnostics: list[Diagnostic],
    pointer: str,
) -> ApiOperation:
    own = _parameter_list(operation.get("parameters", []), doc, diagnostics, pointer)

    body_param = None
    form_params = []
    levels = []
    for raw_params in (shared, own):
        params = []
        for raw, param_pointer in raw_params:
            location = raw.get("in")
            if flavour == SWAGGER2 and location == "body":
                body_param = raw
                continue
            if flavour == SWAGGER2 and location == "formData":
                form_params.append(raw)
                continue
            param = _parse_parameter(raw, doc, flavour, diagnostics, param_pointer)
            if param is not None:
                params.append(param)
        levels.append(params)

    if flavour == SWAGGER2:
        request_body = _swagger2_request_body(body_param, form_params, doc, operation)
    else:
        request_body = _parse_request_body(operation.get("requestBody"), doc, diagnostics, pointer)

    return ApiOperation(
        method=method,
        path=path,
        summary=_text(operation.get("summary")),
        description=_text(operation.get("description")),
        parameters=_merge_parameters(*levels),
        request_body=request_body,
        responses=_parse_responses(operation.get("responses"), doc, diagnostics, pointer),
    )


def _merge_parameters(shared: list[Param], own: list[Param]) -> list[Param]:
    """Operation parameters replace path-level ones with the same name and location, in place.

    Duplicates within one level are kept.
    """
    replacements: dict[tuple[str, str], Param] = {}
    for param in own:
        replacements.setdefault((param.name, param.location), param)

    merged = [replacements.get((p.name, p.location), p) for p in shared]
    used = {id(p) for p in merged}
    return merged + [p for p in own if id(p) not in used]


def _parameter_list(params, doc: dict, diagnostics: list[Diagnostic], pointer: str) -> list[tuple[dict, str]]:
    """Resolve a raw parameters array into (parameter, pointer) pairs."""
    if not isinstance(params, list):
        diagnostics.append(Diagnostic(message="'parameters' is not an array", pointer=pointer))
        return []

    result = []
    for index, raw in enumerate(params):
        param_pointer = _pointer_join(pointer, "parameters", str(index))
        raw = _resolve(raw, doc, diagnostics, param_pointer)
        if raw is None:
            continue
        if not isinstance(raw, dict):
            diagnostics.append(Diagnostic(message="Parameter is not an object", pointer=param_pointer))
            continue
        result.append((raw, param_pointer))
    return result


def _parse_parameter(
    raw: dict, doc: dict, flavour: str, diagnostics: list[Diagnostic], pointer: str
) -> Param | None:
    name = _text(raw.get("name"))
    if name is None:
        diagnostics.append(Diagnostic(message="Parameter has no 'name'", pointer=pointer))
        return None

    if flavour == SWAGGER2:
        param_type = raw.get("type")
    else:
        schema = _resolve(raw.get("schema"), doc, diagnostics, _pointer_join(pointer, "schema"))
        param_type = schema.get("type") if isinstance(schema, dict) else None

    return Param(
        name=name,
        location=str(raw.get("in", "query")),
        param_type=_type_name(param_type),
        description=_text(raw.get("description")),
    )


def _parse_request_body(body, doc: dict, diagnostics: list[Diagnostic], pointer: str) -> RequestBody | None:
    if body is None:
        return None
    body = _resolve(body, doc, diagnostics, _pointer_join(pointer, "requestBody"))
    if not isinstance(body, dict):
        return None
    content = body.get("content") or {}
    return RequestBody(
        description=_text(body.get("description")),
        content_types=[str(ct) for ct in content] if isinstance(content, dict) else [],
    )


def _swagger2_request_body(
    body_param: dict | None, form_params: list[dict], doc: dict, operation: dict
) -> RequestBody | None:
    """Swagger 2.0 carries the body as an ``in: body`` parameter, or as ``formData`` fields."""
    consumes = operation.get("consumes") or doc.get("consumes")
    content_types = [str(ct) for ct in consumes] if isinstance(consumes, list) else []

    if body_param is not None:
        return RequestBody(description=_text(body_param.get("description")), content_types=content_types)
    if form_params:
        return RequestBody(content_types=content_types or ["application/x-www-form-urlencoded"])
    return None


def _parse_responses(responses, doc: dict, diagnostics: list[Diagnostic], pointer: str) -> dict[str, str | None]:
    if responses is None:
        diagnostics.append(Diagnostic(message="Operation has no 'responses' object", pointer=pointer))
        return {}
    if not isinstance(responses, dict):
        diagnostics.append(Diagnostic(message="'responses' is not an object", pointer=pointer))
        return {}

    result = {}
    for status_code, resp in responses.items():
        status_code = str(status_code)
        resp = _resolve(resp, doc, diagnostics, _pointer_join(pointer, "responses", status_code))
        result[status_code] = _text(resp.get("description")) if isinstance(resp, dict) else None
    return result


def _resolve(node, doc: dict, diagnostics: list[Diagnostic], pointer: str):
    """Follow local ``$ref`` pointers until a concrete node is reached.

    Returns None (and records a diagnostic) for external, missing or
    circular references.
    """
    seen = set()
    while isinstance(node, dict) and "$ref" in node:
        ref = node["$ref"]
        if not isinstance(ref, str) or not ref.startswith("#/") or ref in seen:
            diagnostics.append(Diagnostic(message=f"Unresolvable reference {ref!r}", pointer=pointer))
            return None
        seen.add(ref)

        target = doc
        for part in ref[2:].split("/"):
            part = part.replace("~1", "/").replace("~0", "~")
            if not isinstance(target, dict) or part not in target:
                diagnostics.append(Diagnostic(message=f"Unresolvable reference {ref!r}", pointer=pointer))
                return None
            target = target[part]
        node = target
    return node


def _type_name(value) -> str | None:
    if isinstance(value, list):
        # OpenAPI 3.1 allows ["string", "null"]
        names = [str(v) for v in value if v != "null"]
        return " | ".join(names) or None
    return _text(value)


def _text(value) -> str | None:
    if value is None:
        return None
    return str(value)


def _pointer(*parts: str) -> str:
    return _pointer_join("#", *parts)


def _pointer_join(base: str, *parts: str) -> str:
    escaped = [p.replace("~", "~0").replace("/", "~1") for p in parts]
    return "/".join([base, *escaped])
