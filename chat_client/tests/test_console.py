"""
Unit tests for the terminal front end.
"""
import io
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from chat_client import console
from chat_client.models import RelayReply
from chat_client.session import ChatSession
from chat_client.transport import RelayClient


class TestConsoleView:
    """Tests for ConsoleView rendering."""

    @pytest.mark.asyncio
    async def test_renders_each_turn_once(self):
        relay = Mock()
        relay.send = AsyncMock(return_value=RelayReply(reply="pong"))
        session = ChatSession(relay)
        out = io.StringIO()
        view = console.ConsoleView(out)
        session.subscribe(view)
        view(session)

        await session.submit("ping")

        assert out.getvalue().splitlines() == [
            "Assistant: Hi! Ask me anything.",
            "User: ping",
            "Assistant: Thinking...",
            "Assistant: pong",
        ]


class TestRun:
    """Tests for the interactive loop."""

    @pytest.mark.asyncio
    async def test_run_until_quit(self, monkeypatch):
        lines = iter(["hello", "   ", "/quit", "never sent"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

        def handler(request):
            return httpx.Response(200, json={"reply": "hi there"})

        monkeypatch.setattr(
            console, "RelayClient",
            lambda url: RelayClient(url, transport=httpx.MockTransport(handler)),
        )
        out = io.StringIO()

        session = await console.run("http://relay.test", stream=out)

        assert [turn.text for turn in session.transcript] == [
            "Hi! Ask me anything.", "hello", "hi there",
        ]
        assert "Assistant: hi there" in out.getvalue()

    @pytest.mark.asyncio
    async def test_run_stops_on_eof(self, monkeypatch):
        def eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", eof)
        out = io.StringIO()

        session = await console.run("http://relay.test", stream=out)

        assert len(session.transcript) == 1
