"""Detect which API description flavour a parsed document uses."""

OPENAPI3 = "openapi3"
SWAGGER2 = "swagger2"
UNKNOWN = "unknown"


def detect_flavour(doc: dict) -> str:
    """Detect the flavour of a parsed API document.

    Returns: 'openapi3', 'swagger2', or 'unknown'.
    """
    if "openapi" in doc:
        if str(doc["openapi"]).startswith("3."):
            return OPENAPI3
        return UNKNOWN

    if "swagger" in doc:
        if str(doc["swagger"]).startswith("2."):
            return SWAGGER2
        return UNKNOWN

    return UNKNOWN


def declared_version(doc: dict) -> str | None:
    """Return the declared ``openapi``/``swagger`` version string, if any."""
    for key in ("openapi", "swagger"):
        if key in doc:
            return str(doc[key])
    return None
