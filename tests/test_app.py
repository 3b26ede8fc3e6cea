import asyncio
from unittest.mock import MagicMock

from api_term.config import Config
from api_term.parser.base import Endpoint, Param
from api_term.request.invoker import InvokeResult
from api_term.tui.app import ApiTermApp
from api_term.tui.session import Session
from api_term.tui.state import EditTarget, Focus

ENDPOINTS = [
    Endpoint(method="GET", path="/health"),
    Endpoint(method="GET", path="/users/{id}", parameters=(Param(name="id", location="path", required=True),)),
]


def _session() -> Session:
    invoker = MagicMock()
    invoker.invoke.return_value = InvokeResult(body='{"ok":true}', status_code=200)
    return Session(Config(), ENDPOINTS, invoker=invoker)


class TestApiTermApp:
    def test_keys_drive_the_session(self):
        session = _session()

        async def scenario():
            app = ApiTermApp(session)
            async with app.run_test(size=(100, 30)) as pilot:
                await pilot.press("j")
                assert session.state.selected_endpoint == 1
                await pilot.press("i", "7", "enter", "enter")
                assert session.invoker.invoke.call_args[0][0].url == "http://localhost:8080/users/7"
                await pilot.press("tab")
                assert session.state.focus is Focus.RESPONSE
                await pilot.press("H")
                assert session.state.edit_target is EditTarget.HEADERS
                await pilot.press("X", "enter")
                assert session.state.header_text == "X"

        asyncio.run(scenario())

    def test_resize_updates_layout(self):
        session = _session()

        async def scenario():
            app = ApiTermApp(session)
            async with app.run_test(size=(100, 30)) as pilot:
                await pilot.pause()
                assert session.state.layout.width == 100
                assert session.state.layout.height == 30

        asyncio.run(scenario())
