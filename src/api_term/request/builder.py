"""Build a concrete HTTP request for an endpoint from resolved values."""

from urllib.parse import quote_plus

from pydantic import BaseModel, Field

from api_term.errors import MissingRequiredParam
from api_term.parser.base import Endpoint


class HttpRequest(BaseModel):
    """A request ready to be sent."""

    method: str = "GET"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)


def build_request(
    base_url: str,
    endpoint: Endpoint,
    input_values: dict[str, str],
    header_values: dict[str, str],
) -> HttpRequest:
    """Build the GET request for ``endpoint``.

    Path parameter values are substituted raw. Declared query parameters
    come first in declaration order, followed by any input value no
    declared parameter consumed. Raises MissingRequiredParam when a path
    parameter or a required query parameter has no value.
    """
    path = endpoint.path
    consumed: set[str] = set()

    for param in endpoint.params_in("path"):
        if param.name not in input_values:
            raise MissingRequiredParam(param.name)
        path = path.replace("{" + param.name + "}", input_values[param.name], 1)
        consumed.add(param.name)

    query_parts = []
    for param in endpoint.params_in("query"):
        if param.name in input_values:
            query_parts.append(_encode_pair(param.name, input_values[param.name]))
            consumed.add(param.name)
        elif param.required:
            raise MissingRequiredParam(param.name)

    for key, value in input_values.items():
        if key not in consumed:
            query_parts.append(_encode_pair(key, value))

    url = base_url + path
    if query_parts:
        url += "?" + "&".join(query_parts)

    headers = {k: v for k, v in header_values.items() if k}
    return HttpRequest(method="GET", url=url, headers=headers)


def _encode_pair(key: str, value: str) -> str:
    return f"{quote_plus(key)}={quote_plus(value)}"
