"""
Unit tests for the relay HTTP transport.
"""
import json

import httpx
import pytest

from chat_client.models import RelayError, RelayReply
from chat_client.transport import (
    DEFAULT_RELAY_URL,
    RelayClient,
    RelayUnavailableError,
    relay_url_from_env,
)


def _client(handler):
    return RelayClient("http://relay.test/", transport=httpx.MockTransport(handler))


class TestRelayClient:
    """Tests for RelayClient.send()."""

    @pytest.mark.asyncio
    async def test_posts_message_to_chat_endpoint(self):
        captured = {}

        def handler(request):
            captured['method'] = request.method
            captured['url'] = str(request.url)
            captured['body'] = json.loads(request.content)
            return httpx.Response(200, json={"reply": "Hi!", "error": None})

        async with _client(handler) as client:
            reply = await client.send("hello")

        assert captured == {
            'method': 'POST',
            'url': 'http://relay.test/api/chat',
            'body': {"message": "hello"},
        }
        assert reply.reply == "Hi!"
        assert reply.error_kind is None

    @pytest.mark.asyncio
    async def test_reply_without_error_field(self):
        async with _client(lambda request: httpx.Response(200, json={"reply": "ok"})) as client:
            reply = await client.send("hello")

        assert reply.reply == "ok"
        assert reply.error is None

    @pytest.mark.asyncio
    async def test_error_kind_exposed(self):
        body = {"reply": "AI Error: denied", "error": {"kind": "auth", "detail": "denied"}}
        async with _client(lambda request: httpx.Response(200, json=body)) as client:
            reply = await client.send("hello")

        assert reply.error_kind == "auth"

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(RelayUnavailableError):
                await client.send("hello")

    @pytest.mark.asyncio
    async def test_server_error_status(self):
        async with _client(lambda request: httpx.Response(502, text="Bad Gateway")) as client:
            with pytest.raises(RelayUnavailableError):
                await client.send("hello")

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        async with _client(lambda request: httpx.Response(200, text="<html></html>")) as client:
            with pytest.raises(RelayUnavailableError):
                await client.send("hello")

    @pytest.mark.asyncio
    async def test_body_without_reply(self):
        async with _client(lambda request: httpx.Response(200, json={"detail": "nope"})) as client:
            with pytest.raises(RelayUnavailableError):
                await client.send("hello")


class TestRelayUrl:
    """Tests for relay URL resolution."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("CHAT_RELAY_URL", raising=False)

        assert relay_url_from_env() == DEFAULT_RELAY_URL

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CHAT_RELAY_URL", "http://chat.internal:9000")

        assert relay_url_from_env() == "http://chat.internal:9000"
        assert RelayClient().base_url == "http://chat.internal:9000"


class TestRelayReply:
    """Tests for parsing relay reply bodies."""

    def test_typed_error(self):
        reply = RelayReply.model_validate(
            {"reply": "AI Error: denied", "error": {"kind": "auth", "detail": "denied"}}
        )

        assert reply.error == RelayError(kind="auth", detail="denied")
        assert reply.error_kind == "auth"

    @pytest.mark.parametrize("error", ["quota", 42, ["auth"], {"detail": "no kind"}])
    def test_unrecognized_error_keeps_reply(self, error):
        reply = RelayReply.model_validate({"reply": "AI Error: something", "error": error})

        assert reply.reply == "AI Error: something"
        assert reply.error is None

    @pytest.mark.asyncio
    async def test_odd_error_field_is_not_unreachable(self):
        body = {"reply": "AI Error: boom", "error": "boom"}
        async with _client(lambda request: httpx.Response(200, json=body)) as client:
            reply = await client.send("hello")

        assert reply.reply == "AI Error: boom"
