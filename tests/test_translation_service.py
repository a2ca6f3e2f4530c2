# -*- coding: utf-8 -*-
"""
Tests for the Gemini-backed translator
"""
import json

import httpx
import pytest

from gemini_api import GeminiClient
from relaybot.services.translation_service import GeminiTranslator, clean_translation

BASE_URL = "https://gemini.test/v1beta"


def _gemini_reply(text: str | None = None, block_reason: str | None = None) -> dict:
    if block_reason:
        return {"promptFeedback": {"blockReason": block_reason}}
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}
        ]
    }


def _translator(handler) -> tuple[GeminiTranslator, list]:
    requests = []

    def recording_handler(request: httpx.Request):
        requests.append(request)
        return handler(request)

    http_client = httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(recording_handler)
    )
    client = GeminiClient(api_key="test-key", model="gemini-1.5-flash", client=http_client)
    return GeminiTranslator(client, dev_mode=False), requests


class TestCleanTranslation:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("  สวัสดี \n", "สวัสดี"),
            ('"Bonjour"', "Bonjour"),
            ("`Hola`", "Hola"),
            ('""quoted""', '"quoted"'),
            ("l'été", "l'été"),
        ],
    )
    def test_strips_whitespace_and_wrapping_quotes(self, raw, expected):
        assert clean_translation(raw) == expected


class TestGeminiTranslator:
    @pytest.mark.asyncio
    async def test_successful_translation(self):
        translator, requests = _translator(
            lambda request: httpx.Response(200, json=_gemini_reply('"สวัสดี"\n'))
        )

        result = await translator.translate("Hello", "thai")

        assert result == "สวัสดี"
        assert requests[0].url.path == "/v1beta/models/gemini-1.5-flash:generateContent"
        prompt = json.loads(requests[0].content)["contents"][0]["parts"][0]["text"]
        assert prompt.startswith("Translate the following text to thai.")
        assert prompt.endswith('"Hello"')

    @pytest.mark.asyncio
    async def test_blocked_prompt_is_absent(self):
        translator, _ = _translator(
            lambda request: httpx.Response(200, json=_gemini_reply(block_reason="SAFETY"))
        )

        assert await translator.translate("Hello", "thai") is None

    @pytest.mark.asyncio
    async def test_empty_response_is_absent(self):
        translator, _ = _translator(lambda request: httpx.Response(200, json=_gemini_reply("  ")))

        assert await translator.translate("Hello", "thai") is None

    @pytest.mark.asyncio
    async def test_http_error_is_absent(self):
        translator, _ = _translator(
            lambda request: httpx.Response(429, json={"error": {"message": "quota"}})
        )

        assert await translator.translate("Hello", "thai") is None

    @pytest.mark.asyncio
    async def test_transport_error_is_absent(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        translator, _ = _translator(handler)

        assert await translator.translate("Hello", "thai") is None

    @pytest.mark.asyncio
    async def test_empty_input_skips_the_call(self):
        translator, requests = _translator(lambda request: httpx.Response(200, json={}))

        assert await translator.translate("", "thai") is None
        assert await translator.translate("Hello", "") is None
        assert requests == []

    @pytest.mark.asyncio
    async def test_dev_mode_returns_template(self):
        translator, requests = _translator(lambda request: httpx.Response(500))
        translator._dev_mode = True

        assert await translator.translate("Hello", "ja") == "[ja] Hello"
        assert requests == []
