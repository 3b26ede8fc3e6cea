"""Detect which API specification dialect a loaded document uses."""


def detect_version(doc: dict) -> str | None:
    """Return 'openapi3', 'swagger2', or None for unrecognised documents."""
    openapi = doc.get("openapi")
    if openapi is not None and str(openapi).startswith("3"):
        return "openapi3"
    swagger = doc.get("swagger")
    if swagger is not None and str(swagger).startswith("2"):
        return "swagger2"
    return None
