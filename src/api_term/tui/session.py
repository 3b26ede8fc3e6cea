"""Runs the interaction state machine and the effects it asks for."""

import logging

from api_term.config import Config
from api_term.errors import MissingRequiredParam
from api_term.parser.base import Endpoint
from api_term.request.builder import build_request
from api_term.request.formatter import format_lines
from api_term.request.invoker import Invoker
from api_term.request.resolver import parse_headers, resolve_inputs
from api_term.tui.state import (
    Event,
    Invoke,
    Quit,
    complete_invocation,
    initial_state,
    transition,
)
from api_term.tui.view import View, render_view

logger = logging.getLogger(__name__)


class Session:
    """Owns the session state for one operator.

    Events are handled one at a time on the caller's thread. An invoke
    effect performs the HTTP call in-line, so ``handle`` does not return
    until the response (or transport error) is in.
    """

    def __init__(self, config: Config, endpoints: list[Endpoint], invoker: Invoker | None = None):
        self.config = config
        self.endpoints = endpoints
        self.invoker = invoker or Invoker()
        self.state = initial_state(config.base_url, len(endpoints))

    def handle(self, event: Event) -> bool:
        """Apply ``event`` and run its effects. Returns True when the app should quit."""
        self.state, effects = transition(self.state, event)
        for effect in effects:
            if isinstance(effect, Quit):
                return True
            if isinstance(effect, Invoke):
                lines, failed = self.run_invocation(effect)
                self.state = complete_invocation(self.state, lines, failed)
        return False

    def run_invocation(self, effect: Invoke) -> tuple[list[str], bool]:
        """Resolve, build, send and format. Returns the display lines and whether it failed."""
        endpoint = self.endpoints[effect.endpoint_index]
        inputs = resolve_inputs(endpoint, effect.query_text, self.config.global_query_params)
        headers = parse_headers(effect.header_text)

        try:
            request = build_request(effect.base_url, endpoint, inputs, headers)
        except MissingRequiredParam as e:
            logger.info("Not invoking %s %s: %s", endpoint.method, endpoint.path, e)
            return [f"Error: {e}"], True

        result = self.invoker.invoke(request)
        if result.error is not None:
            return [f"Error: {result.error}", f"Status: {result.status_code}"], True
        return [f"Status: {result.status_code}", "", *format_lines(result.body)], result.failed

    def view(self) -> View:
        return render_view(self.state, self.endpoints)

    def close(self) -> None:
        self.invoker.close()
