"""Synchronous HTTP invocation around httpx.

The call blocks its caller until the response arrives or the transport
fails. No retries and no timeout beyond the httpx client's own.
"""

import logging

import httpx
from pydantic import BaseModel, ConfigDict

from api_term.errors import TransportError
from api_term.request.builder import HttpRequest

logger = logging.getLogger(__name__)


class InvokeResult(BaseModel):
    """Outcome of one HTTP call. ``status_code`` is 0 on transport failure."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    body: str = ""
    status_code: int = 0
    error: TransportError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None or self.status_code >= 400


class Invoker:
    """Sends built requests with a shared httpx client."""

    def __init__(self, client: httpx.Client | None = None):
        self.client = client or httpx.Client()

    def invoke(self, request: HttpRequest) -> InvokeResult:
        """Send ``request`` and return its body and status.

        4xx/5xx responses are returned like any other; only transport
        failures produce an error.
        """
        logger.debug("%s %s", request.method, request.url)
        try:
            response = self.client.request(request.method, request.url, headers=request.headers)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.info("Request to %s failed: %s", request.url, e)
            return InvokeResult(status_code=0, error=TransportError(str(e)))
        return InvokeResult(body=response.text, status_code=response.status_code)

    def close(self) -> None:
        self.client.close()
