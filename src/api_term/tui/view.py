"""Derive what each screen region shows from the session state.

The terminal app only draws what ``render_view`` returns: titles, lines,
the highlighted row and a style tag per region.
"""

from enum import Enum

from pydantic import BaseModel

from api_term.parser.base import Endpoint, format_endpoint_row
from api_term.tui.state import (
    EditingField,
    EditTarget,
    Focus,
    HelpOverlay,
    Outcome,
    SessionState,
)

HELP_TEXT = """\
Navigation Keys:
  Tab / r      Toggle Focus (Endpoints <-> Response)
  j / <Down>   Scroll Down (Endpoints or Response)
  k / <Up>     Scroll Up
  Enter        Invoke Endpoint / Commit Edit
  i            Edit Query Parameters
  b            Edit Base URL
  H            Edit Headers
  ? / h        Toggle Help
  q / <C-c>    Quit"""

ENDPOINTS_TITLE = "API Endpoints (j/k to scroll, ENTER to invoke)"
RESPONSE_TITLE = "Response (Tab/r to focus, j/k to scroll)"
BASE_URL_TITLE = "Base URL (press 'b' to edit)"
HEADERS_TITLE = "Headers (key:value&key2:value2) - Press 'H' to edit"
QUERY_TITLE = "Query Parameters (param=value) - Press 'i' to edit"
EMPTY_CATALOG = "(no endpoints loaded)"


class RegionStyle(str, Enum):
    NORMAL = "normal"
    FOCUS = "focus"
    IDLE = "idle"
    EDITING = "editing"
    SUCCESS = "success"
    FAILURE = "failure"


class Region(BaseModel):
    """Content and styling of one screen region."""

    title: str
    lines: list[str]
    selected: int | None = None
    style: RegionStyle = RegionStyle.NORMAL
    focused: bool = False
    height: int


class View(BaseModel):
    show_help: bool
    endpoints: Region
    response: Region
    base_url: Region
    headers: Region
    query: Region
    help: Region


def render_view(state: SessionState, endpoints: list[Endpoint]) -> View:
    layout = state.layout
    field_height = layout.field_height
    editing = state.mode if isinstance(state.mode, EditingField) else None

    list_focused = state.focus is Focus.ENDPOINTS
    rows = [format_endpoint_row(ep) for ep in endpoints] or [EMPTY_CATALOG]

    if state.outcome is Outcome.SUCCESS:
        response_style = RegionStyle.SUCCESS
    elif state.outcome is Outcome.FAILURE:
        response_style = RegionStyle.FAILURE
    else:
        response_style = RegionStyle.IDLE if list_focused else RegionStyle.FOCUS

    return View(
        show_help=isinstance(state.mode, HelpOverlay),
        endpoints=Region(
            title=ENDPOINTS_TITLE,
            lines=rows,
            selected=state.selected_endpoint,
            style=RegionStyle.FOCUS if list_focused else RegionStyle.IDLE,
            focused=list_focused,
            height=layout.endpoints_height,
        ),
        response=Region(
            title=RESPONSE_TITLE,
            lines=list(state.response_lines),
            selected=state.selected_line,
            style=response_style,
            focused=not list_focused,
            height=layout.response_height,
        ),
        base_url=_field(BASE_URL_TITLE, state.base_url, EditTarget.BASE_URL, editing, field_height),
        headers=_field(HEADERS_TITLE, state.header_text, EditTarget.HEADERS, editing, field_height),
        query=_field(
            query_title(endpoints[state.selected_endpoint] if endpoints else None),
            state.query_text,
            EditTarget.QUERY_PARAMS,
            editing,
            field_height,
        ),
        help=Region(title="Help", lines=HELP_TEXT.splitlines(), height=layout.help_height),
    )


def _field(title: str, committed: str, target: EditTarget, editing: EditingField | None, height: int) -> Region:
    # While a field is being edited it mirrors the edit buffer.
    if editing is not None and editing.target is target:
        return Region(title=title, lines=[editing.buffer], style=RegionStyle.EDITING, height=height)
    return Region(title=title, lines=[committed], height=height)


def query_title(endpoint: Endpoint | None) -> str:
    """Title for the query input, listing the endpoint's required parameters."""
    if endpoint is None:
        return QUERY_TITLE
    required = [f"{p.name} ({p.location})" for p in endpoint.parameters if p.required]
    if not required:
        return QUERY_TITLE
    return f"Query Parameters (Required: {', '.join(required)}) - Press 'i' to edit"


def visible_window(total: int, selected: int | None, rows: int) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of lines to draw so ``selected`` stays visible."""
    rows = max(rows, 1)
    if total <= rows:
        return 0, total
    start = 0
    if selected is not None and selected >= rows:
        start = selected - rows + 1
    return start, min(start + rows, total)
