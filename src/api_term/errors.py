"""Errors raised while loading specs and building or sending requests."""


class ApiTermError(Exception):
    """Base class for api-term errors."""


class SpecLoadError(ApiTermError):
    """A single spec source could not be loaded or parsed."""


class MissingRequiredParam(ApiTermError):
    """A declared path parameter or required query parameter has no value."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required parameter: {name}")


class TransportError(ApiTermError):
    """The HTTP call failed before a response was received."""
