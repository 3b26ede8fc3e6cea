"""Startup configuration for api-term."""

import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_OPENAPI_FILE = "assets/api.yaml"


class Config(BaseModel):
    """Values the session is started with."""

    base_url: str = DEFAULT_BASE_URL
    openapi_file: str = DEFAULT_OPENAPI_FILE
    openapi_urls: list[str] = Field(default_factory=list)
    global_query_params: dict[str, str] = Field(default_factory=dict)
    sort_endpoints: bool = False


def parse_global_params(values: list[str] | tuple[str, ...]) -> dict[str, str]:
    """Parse repeated ``key=value`` options into a dict.

    Entries without ``=`` are skipped. Later entries win for the same key.
    """
    params: dict[str, str] = {}
    for value in values:
        if "=" not in value:
            logger.warning("Ignoring malformed global query param %r (expected key=value)", value)
            continue
        key, val = value.split("=", 1)
        params[key] = val
    return params
