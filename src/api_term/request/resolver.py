"""Turn the operator's raw query and header text into key/value mappings."""

import re

from api_term.parser.base import Endpoint

HEADER_SEPARATORS = re.compile(r"[&;]")


def resolve_inputs(endpoint: Endpoint, query_text: str, global_params: dict[str, str]) -> dict[str, str]:
    """Resolve parameter values for one invocation of ``endpoint``.

    Global parameters seed the result. Text without ``=`` or ``&`` is
    shorthand: a bare value bound to the endpoint's single required path
    parameter, or else its single required query parameter. When neither
    applies the value is dropped. Any other text is parsed as
    ``key=value&key2=value2`` and overrides the global parameters.
    """
    values = dict(global_params)
    if not query_text:
        return values

    if "=" not in query_text and "&" not in query_text:
        required_path = endpoint.required_params("path")
        required_query = endpoint.required_params("query")
        if len(required_path) == 1 and not required_query:
            values[required_path[0].name] = query_text
        elif not required_path and len(required_query) == 1:
            values[required_query[0].name] = query_text
        return values

    for pair in query_text.split("&"):
        if "=" not in pair:
            continue
        key, value = pair.split("=", 1)
        values[key] = value
    return values


def parse_headers(header_text: str) -> dict[str, str]:
    """Parse ``Key: value; Key2=value2`` style header text.

    Tokens are separated by ``&`` or ``;``. Each token splits on its first
    ``:``, falling back to its first ``=``. Tokens with no delimiter or an
    empty key are ignored.
    """
    headers: dict[str, str] = {}
    for token in HEADER_SEPARATORS.split(header_text):
        token = token.strip()
        if not token:
            continue
        if ":" in token:
            key, value = token.split(":", 1)
        elif "=" in token:
            key, value = token.split("=", 1)
        else:
            continue
        key = key.strip()
        if key:
            headers[key] = value.strip()
    return headers
