# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/7 17:30
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 群聊翻译的核心业务逻辑
"""
from typing import Protocol

from loguru import logger

from models import DeliveryResult
from triggers.fanout_translation.composer import compose_reply
from triggers.fanout_translation.dispatcher import Translator, translate_to_all
from triggers.fanout_translation.store import PreferenceStore
from triggers.fanout_translation.targets import resolve_targets

DEFAULT_DISPLAY_NAME = "Someone"


class Messenger(Protocol):
    """Outbound side of the messaging platform. Implementations never raise."""

    async def fetch_display_name(self, user_id: str) -> str | None: ...

    async def reply_text(self, reply_token: str, text: str) -> DeliveryResult: ...

    async def push_text(self, to: str, text: str) -> DeliveryResult: ...


async def process_fanout_translation(
    store: PreferenceStore,
    translator: Translator,
    messenger: Messenger,
    conversation_id: str,
    sender_id: str | None,
    message_text: str,
    *,
    fallback_display_name: str = DEFAULT_DISPLAY_NAME,
) -> DeliveryResult | None:
    """处理群聊中的一条普通消息

    Returns:
        DeliveryResult: 推送了翻译时返回推送结果；无需翻译或全部翻译失败时返回 None
    """
    targets = resolve_targets(store, conversation_id, sender_id)
    if not targets:
        logger.debug("No target languages needed for translation.")
        return None

    outcomes = await translate_to_all(translator, message_text, targets)
    if not any(outcome.ok for outcome in outcomes):
        logger.warning(
            f"No successful translations were generated for {conversation_id}: "
            f"{[(outcome.language, outcome.error) for outcome in outcomes]}"
        )
        return None

    sender_name = fallback_display_name
    if sender_id:
        sender_name = await messenger.fetch_display_name(sender_id) or fallback_display_name

    reply_text = compose_reply(sender_name, message_text, outcomes)
    if reply_text is None:
        return None

    result = await messenger.push_text(conversation_id, reply_text)
    if result.success:
        logger.info(f"Sent translations to {conversation_id}")
    else:
        logger.error(f"Failed to push translation message to {conversation_id}: {result.error}")
    return result
