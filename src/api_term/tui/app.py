"""Textual front end: draws the session view and feeds it key events."""

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from api_term.tui.keys import normalize_key
from api_term.tui.session import Session
from api_term.tui.state import KeyPress, Resize
from api_term.tui.view import Region, RegionStyle, visible_window

REGION_IDS = ("endpoints", "response", "base_url", "headers", "query")

STYLE_COLORS = {
    RegionStyle.FOCUS: "yellow",
    RegionStyle.IDLE: "white",
    RegionStyle.EDITING: "yellow",
    RegionStyle.SUCCESS: "green",
    RegionStyle.FAILURE: "red",
}

NORMAL_COLORS = {
    "endpoints": "yellow",
    "response": "white",
    "base_url": "magenta",
    "headers": "blue",
    "query": "cyan",
    "help": "yellow",
}


class ApiTermApp(App):
    """Endpoint list, response view and three input fields, plus a help overlay."""

    CSS = """
    Screen {
        layout: vertical;
    }
    Static {
        width: 1fr;
        border: round white;
        padding: 0 1;
    }
    #help {
        display: none;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    # Tab would otherwise move widget focus before the key reaches on_key.
    BINDINGS = [Binding("tab", "press('tab')", show=False, priority=True)]

    def __init__(self, session: Session):
        super().__init__()
        self.session = session
        self._view_ready = False

    def compose(self) -> ComposeResult:
        for region_id in REGION_IDS:
            yield Static(id=region_id)
        yield Static(id="help")

    def on_mount(self) -> None:
        self._view_ready = True
        self._dispatch(Resize(width=self.size.width, height=self.size.height))

    def on_resize(self, event: events.Resize) -> None:
        self._dispatch(Resize(width=event.size.width, height=event.size.height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self._dispatch(KeyPress(key=normalize_key(event.key, event.character)))

    def action_press(self, key: str) -> None:
        self._dispatch(KeyPress(key=key))

    def _dispatch(self, event: KeyPress | Resize) -> None:
        if self.session.handle(event):
            self.exit()
            return
        if self._view_ready:
            self.refresh_view()

    def refresh_view(self) -> None:
        view = self.session.view()
        for region_id in REGION_IDS:
            widget = self.query_one(f"#{region_id}", Static)
            widget.display = not view.show_help
            self._draw(widget, region_id, getattr(view, region_id))

        help_widget = self.query_one("#help", Static)
        help_widget.display = view.show_help
        if view.show_help:
            layout = self.session.state.layout
            help_widget.styles.width = layout.help_width
            help_widget.styles.margin = (layout.help_top, 0, 0, layout.help_left)
            self._draw(help_widget, "help", view.help)

    def _draw(self, widget: Static, region_id: str, region: Region) -> None:
        color = NORMAL_COLORS[region_id] if region.style is RegionStyle.NORMAL else STYLE_COLORS[region.style]
        widget.border_title = region.title
        widget.styles.border = ("round", color)
        widget.styles.border_title_color = "yellow" if region.focused else color
        widget.styles.height = region.height
        widget.update(_region_text(region))


def _region_text(region: Region) -> Text:
    # Border takes two rows.
    start, end = visible_window(len(region.lines), region.selected, region.height - 2)
    lines = []
    for index in range(start, end):
        line = Text(region.lines[index])
        if index == region.selected:
            line.stylize("reverse")
        lines.append(line)
    return Text("\n").join(lines)
