# -*- coding: utf-8 -*-
"""
Runtime state shared by the webhook route and the event handlers.

A BotContext is built once at startup and lives until the process stops.
Preferences are held in memory only, a restart clears them.
"""
from dataclasses import dataclass, field

from triggers.fanout_translation import (
    InMemoryPreferenceStore,
    Messenger,
    PreferenceStore,
    Translator,
)
from triggers.fanout_translation.node import DEFAULT_DISPLAY_NAME


@dataclass
class BotContext:
    translator: Translator
    messenger: Messenger
    channel_secret: str
    store: PreferenceStore = field(default_factory=InMemoryPreferenceStore)
    mention_name: str = "@TranslatorBot"
    fallback_display_name: str = DEFAULT_DISPLAY_NAME


def build_default_context() -> BotContext:
    """Wire the Gemini translator and the LINE messenger from settings."""
    from relaybot.services.line_service import LineMessenger
    from relaybot.services.translation_service import GeminiTranslator
    from settings import settings

    return BotContext(
        translator=GeminiTranslator(),
        messenger=LineMessenger(),
        channel_secret=settings.LINE_CHANNEL_SECRET.get_secret_value(),
        mention_name=settings.BOT_MENTION_NAME,
        fallback_display_name=settings.FALLBACK_DISPLAY_NAME,
    )
