# -*- coding: utf-8 -*-
"""
Tests for LINE delivery and profile lookup
"""
import json

import httpx
import pytest

from line_api import LineMessagingClient
from relaybot.services.line_service import LineMessenger

BASE_URL = "https://line.test"


def _messenger(handler) -> tuple[LineMessenger, list]:
    requests = []

    def recording_handler(request: httpx.Request):
        requests.append(request)
        return handler(request)

    http_client = httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(recording_handler)
    )
    return LineMessenger(LineMessagingClient(channel_access_token="t", client=http_client)), requests


class TestLineMessenger:
    @pytest.mark.asyncio
    async def test_fetch_display_name(self):
        messenger, requests = _messenger(
            lambda request: httpx.Response(200, json={"userId": "u1", "displayName": "Alice"})
        )

        assert await messenger.fetch_display_name("u1") == "Alice"
        assert requests[0].url.path == "/v2/bot/profile/u1"

    @pytest.mark.asyncio
    async def test_fetch_display_name_fails_soft(self):
        messenger, _ = _messenger(lambda request: httpx.Response(404, json={"message": "Not found"}))

        assert await messenger.fetch_display_name("u1") is None

    @pytest.mark.asyncio
    async def test_reply_text(self):
        messenger, requests = _messenger(lambda request: httpx.Response(200, json={}))

        result = await messenger.reply_text("reply-token", "OK!")

        assert result.success
        assert requests[0].url.path == "/v2/bot/message/reply"
        assert json.loads(requests[0].content) == {
            "replyToken": "reply-token",
            "messages": [{"type": "text", "text": "OK!"}],
        }

    @pytest.mark.asyncio
    async def test_push_text(self):
        messenger, requests = _messenger(lambda request: httpx.Response(200, json={}))

        result = await messenger.push_text("g1", "translations")

        assert result.success
        assert requests[0].url.path == "/v2/bot/message/push"
        assert json.loads(requests[0].content) == {
            "to": "g1",
            "messages": [{"type": "text", "text": "translations"}],
        }

    @pytest.mark.asyncio
    async def test_delivery_failure_is_reported_not_raised(self):
        messenger, _ = _messenger(
            lambda request: httpx.Response(400, json={"message": "Invalid reply token"})
        )

        result = await messenger.reply_text("expired", "OK!")

        assert not result.success
        assert "400" in result.error

    @pytest.mark.asyncio
    async def test_transport_error_is_reported_not_raised(self):
        def handler(request):
            raise httpx.ReadTimeout("read timed out", request=request)

        messenger, _ = _messenger(handler)

        result = await messenger.push_text("g1", "text")

        assert not result.success
        assert result.error == "read timed out"
