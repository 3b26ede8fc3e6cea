"""OpenAPI / Swagger document parser.

Parses OpenAPI 3.x and Swagger 2.0 documents into Endpoint models.
"""

import logging

from .base import Endpoint, Param

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "post", "put", "delete", "patch")


def parse_document(doc: dict) -> list[Endpoint]:
    """Extract endpoints from an already loaded spec document."""
    endpoints = []
    paths = doc.get("paths") or {}

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        shared = _parse_parameters(doc, path_item.get("parameters", []))

        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue

            own = _parse_parameters(doc, operation.get("parameters", []))
            endpoints.append(
                Endpoint(
                    method=method.upper(),
                    path=path,
                    parameters=tuple(_merge_parameters(shared, own)),
                )
            )

    return endpoints


def _merge_parameters(shared: list[Param], own: list[Param]) -> list[Param]:
    # Operation parameters override path-level ones with the same name and location.
    overridden = {(p.name, p.location) for p in own}
    return [p for p in shared if (p.name, p.location) not in overridden] + own


def _parse_parameters(doc: dict, params: list[dict]) -> list[Param]:
    result = []
    for p in params or []:
        if "$ref" in p:
            resolved = _resolve_ref(doc, p["$ref"])
            if resolved is None:
                logger.warning("Skipping unresolvable parameter reference %s", p["$ref"])
                continue
            p = resolved
        if "name" not in p:
            continue

        location = p.get("in", "query")
        result.append(
            Param(
                name=p["name"],
                location=location,
                required=p.get("required") is True,
            )
        )
    return result


def _resolve_ref(doc: dict, ref: str) -> dict | None:
    """Resolve a local JSON pointer such as '#/components/parameters/Limit'."""
    if not ref.startswith("#/"):
        return None
    node = doc
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, dict) else None
