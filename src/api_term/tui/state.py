"""Interaction state machine for the terminal UI.

The session is an immutable ``SessionState``. ``transition`` maps a state
and an event to the next state plus the effects the caller must run
(quitting, invoking an endpoint). ``complete_invocation`` folds the
result of an invocation back into the state. Nothing here does I/O.

Modes, in order of precedence when handling a key:

    HelpOverlay   only the help keys and escape do anything
    EditingField  keys edit the buffer of one field until commit
    Browsing      navigation, focus, invoke, entering the other modes

Resize events are handled the same way in every mode.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from api_term.tui import keys

INITIAL_RESPONSE = "Press ENTER to invoke endpoint"
FIELD_HEIGHT = 3


class Focus(str, Enum):
    ENDPOINTS = "endpoints"
    RESPONSE = "response"


class EditTarget(str, Enum):
    QUERY_PARAMS = "query_params"
    BASE_URL = "base_url"
    HEADERS = "headers"


class Outcome(str, Enum):
    NONE = "none"
    SUCCESS = "success"
    FAILURE = "failure"


EDIT_TARGETS = {
    **dict.fromkeys(keys.EDIT_QUERY_PARAMS, EditTarget.QUERY_PARAMS),
    **dict.fromkeys(keys.EDIT_BASE_URL, EditTarget.BASE_URL),
    **dict.fromkeys(keys.EDIT_HEADERS, EditTarget.HEADERS),
}


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Browsing(_Frozen):
    pass


class EditingField(_Frozen):
    target: EditTarget
    buffer: str = ""


class HelpOverlay(_Frozen):
    pass


Mode = Browsing | EditingField | HelpOverlay


class KeyPress(_Frozen):
    key: str


class Resize(_Frozen):
    width: int
    height: int


Event = KeyPress | Resize


class Quit(_Frozen):
    pass


class Invoke(_Frozen):
    """Run the request pipeline. Blocks the event loop until it returns."""

    endpoint_index: int
    base_url: str
    query_text: str
    header_text: str


Effect = Quit | Invoke


class Layout(_Frozen):
    width: int
    height: int
    endpoints_height: int
    response_height: int
    field_height: int = FIELD_HEIGHT
    help_left: int
    help_top: int
    help_width: int
    help_height: int


def compute_layout(width: int, height: int) -> Layout:
    """Split the terminal: endpoint list on top, response below, three input fields at the bottom."""
    endpoints_height = max(height // 2, FIELD_HEIGHT)
    response_height = max(height - 3 * FIELD_HEIGHT - height // 2, FIELD_HEIGHT)
    return Layout(
        width=width,
        height=height,
        endpoints_height=endpoints_height,
        response_height=response_height,
        help_left=width // 4,
        help_top=height // 4,
        help_width=max(3 * width // 4 - width // 4, 1),
        help_height=max(3 * height // 4 - height // 4, FIELD_HEIGHT),
    )


class SessionState(_Frozen):
    mode: Mode = Browsing()
    focus: Focus = Focus.ENDPOINTS
    base_url: str
    query_text: str = ""
    header_text: str = ""
    endpoint_count: int = 0
    selected_endpoint: int = 0
    response_lines: tuple[str, ...] = (INITIAL_RESPONSE,)
    selected_line: int = 0
    outcome: Outcome = Outcome.NONE
    layout: Layout = compute_layout(80, 24)

    @property
    def edit_target(self) -> EditTarget | None:
        return self.mode.target if isinstance(self.mode, EditingField) else None

    @property
    def edit_buffer(self) -> str | None:
        return self.mode.buffer if isinstance(self.mode, EditingField) else None

    def committed_value(self, target: EditTarget) -> str:
        if target is EditTarget.QUERY_PARAMS:
            return self.query_text
        if target is EditTarget.BASE_URL:
            return self.base_url
        return self.header_text


def initial_state(base_url: str, endpoint_count: int) -> SessionState:
    return SessionState(base_url=base_url, endpoint_count=endpoint_count)


def transition(state: SessionState, event: Event) -> tuple[SessionState, list[Effect]]:
    """Apply one event. Returns the new state and the effects to run."""
    if isinstance(event, Resize):
        return state.model_copy(update={"layout": compute_layout(event.width, event.height)}), []

    key = event.key
    if isinstance(state.mode, HelpOverlay):
        if key in keys.HELP_CLOSE:
            return state.model_copy(update={"mode": Browsing()}), []
        return state, []

    if isinstance(state.mode, EditingField):
        return _edit(state, state.mode, key)

    return _browse(state, key)


def _edit(state: SessionState, mode: EditingField, key: str) -> tuple[SessionState, list[Effect]]:
    if key in keys.ENTER:
        return _commit(state, mode), []
    if key in keys.BACKSPACE:
        if not mode.buffer:
            return state, []
        return _with_buffer(state, mode, mode.buffer[:-1]), []
    if key in keys.INTERRUPT:
        return state, [Quit()]
    if keys.is_printable(key):
        return _with_buffer(state, mode, mode.buffer + key), []
    return state, []


def _with_buffer(state: SessionState, mode: EditingField, buffer: str) -> SessionState:
    return state.model_copy(update={"mode": mode.model_copy(update={"buffer": buffer})})


def _commit(state: SessionState, mode: EditingField) -> SessionState:
    # One copy, so the committed value and the mode change land together.
    update: dict = {"mode": Browsing()}
    if mode.target is EditTarget.QUERY_PARAMS:
        update["query_text"] = mode.buffer
    elif mode.target is EditTarget.BASE_URL:
        trimmed = mode.buffer.strip()
        if trimmed:
            update["base_url"] = trimmed
    else:
        update["header_text"] = mode.buffer.strip()
    return state.model_copy(update=update)


def _browse(state: SessionState, key: str) -> tuple[SessionState, list[Effect]]:
    if key in keys.QUIT:
        return state, [Quit()]

    if key in keys.FOCUS_TOGGLE:
        focus = Focus.RESPONSE if state.focus is Focus.ENDPOINTS else Focus.ENDPOINTS
        return state.model_copy(update={"focus": focus}), []

    if key in keys.DOWN:
        return _move_cursor(state, 1), []
    if key in keys.UP:
        return _move_cursor(state, -1), []

    if key in keys.ENTER:
        if state.focus is Focus.RESPONSE or state.endpoint_count == 0:
            return state, []
        return state, [
            Invoke(
                endpoint_index=state.selected_endpoint,
                base_url=state.base_url,
                query_text=state.query_text,
                header_text=state.header_text,
            )
        ]

    if key in EDIT_TARGETS:
        target = EDIT_TARGETS[key]
        mode = EditingField(target=target, buffer=state.committed_value(target))
        return state.model_copy(update={"mode": mode, "outcome": Outcome.NONE}), []

    if key in keys.HELP_TOGGLE:
        return state.model_copy(update={"mode": HelpOverlay()}), []

    return state, []


def _move_cursor(state: SessionState, delta: int) -> SessionState:
    if state.focus is Focus.ENDPOINTS:
        index = _clamp(state.selected_endpoint + delta, state.endpoint_count)
        return state.model_copy(update={"selected_endpoint": index})
    index = _clamp(state.selected_line + delta, len(state.response_lines))
    return state.model_copy(update={"selected_line": index})


def _clamp(index: int, length: int) -> int:
    return max(0, min(index, length - 1))


def complete_invocation(state: SessionState, lines: list[str], failed: bool) -> SessionState:
    """Show an invocation's output and reset the per-invocation input."""
    return state.model_copy(
        update={
            "response_lines": tuple(lines),
            "selected_line": 0,
            "query_text": "",
            "outcome": Outcome.FAILURE if failed else Outcome.SUCCESS,
        }
    )
