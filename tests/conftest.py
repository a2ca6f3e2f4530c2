# -*- coding: utf-8 -*-
"""
Shared fakes for the translation pipeline tests
"""
from typing import Dict, List, Tuple
from unittest.mock import AsyncMock

import pytest

from models import DeliveryResult
from relaybot.context import BotContext
from triggers.fanout_translation import InMemoryPreferenceStore


class FakeTranslator:
    """Scripted translator: a value per language, an Exception to raise, or None to fail softly."""

    def __init__(self, responses: Dict[str, object] | None = None, default: str = "{text} ({language})"):
        self.responses = responses or {}
        self.default = default
        self.calls: List[Tuple[str, str]] = []

    async def translate(self, text: str, target_language: str) -> str | None:
        self.calls.append((text, target_language))
        response = self.responses.get(target_language, self.default)
        if isinstance(response, Exception):
            raise response
        if response is None:
            return None
        return response.format(text=text, language=target_language)


def make_messenger(display_name: str | None = "Alice") -> AsyncMock:
    messenger = AsyncMock()
    messenger.fetch_display_name.return_value = display_name
    messenger.reply_text.return_value = DeliveryResult(success=True)
    messenger.push_text.return_value = DeliveryResult(success=True)
    return messenger


@pytest.fixture
def store():
    return InMemoryPreferenceStore()


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def messenger():
    return make_messenger()


@pytest.fixture
def bot_context(store, translator, messenger):
    return BotContext(
        translator=translator,
        messenger=messenger,
        channel_secret="test-channel-secret",
        store=store,
        mention_name="@TranslatorBot",
        fallback_display_name="Someone",
    )


def text_event(text: str, user_id: str = "u1", source_type: str = "group", conversation_id: str = "g1"):
    source = {"type": source_type, "userId": user_id}
    if source_type == "group":
        source["groupId"] = conversation_id
    elif source_type == "room":
        source["roomId"] = conversation_id
    return {
        "type": "message",
        "mode": "active",
        "timestamp": 1720000000000,
        "webhookEventId": "01HXYZ",
        "replyToken": "reply-token-1",
        "source": source,
        "message": {"id": "m1", "type": "text", "text": text},
    }
