"""Data models for endpoints loaded from API specifications.

The spec loaders convert OpenAPI / Swagger documents into these models.
Everything downstream (request building, the terminal UI) only sees them.
"""

from pydantic import BaseModel, ConfigDict


class Param(BaseModel):
    """A single declared parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str  # path / query / header / cookie
    required: bool = False


class Endpoint(BaseModel):
    """One HTTP operation declared by a spec."""

    model_config = ConfigDict(frozen=True)

    method: str  # GET / POST / PUT / DELETE / PATCH
    path: str  # /api/users/{id}
    parameters: tuple[Param, ...] = ()

    def params_in(self, location: str) -> list[Param]:
        return [p for p in self.parameters if p.location == location]

    def required_params(self, location: str) -> list[Param]:
        return [p for p in self.parameters if p.location == location and p.required]


def format_endpoint_row(endpoint: Endpoint) -> str:
    """Render an endpoint as a list row, e.g. ``GET /pets?limit&tag``."""
    query = [p.name for p in endpoint.params_in("query")]
    if not query:
        return f"{endpoint.method} {endpoint.path}"
    return f"{endpoint.method} {endpoint.path}?{'&'.join(query)}"
