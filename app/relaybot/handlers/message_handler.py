# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/8 19:40
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 文本消息处理：语言指令优先，其余群聊消息进入翻译流程
"""
from loguru import logger

from line_api.models import WebhookEvent
from relaybot.context import BotContext
from relaybot.handlers.command_handler import handle_language_command
from triggers.fanout_translation import process_fanout_translation


async def handle_message(ctx: BotContext, event: WebhookEvent) -> None:
    """
    Language commands are answered in any chat; other text is fanned out only in groups and rooms
    """
    if not event.message or event.message.type != "text" or not event.message.text:
        return
    if not event.source or not event.source.conversation_id:
        return

    message_text = event.message.text
    source = event.source
    logger.info(
        f'Received message: "{message_text}" from user {source.user_id} '
        f"in {source.type} {source.conversation_id}"
    )

    # 1. Language commands update preferences and are never translated
    if await handle_language_command(ctx, event, message_text):
        return

    # 2. Only group and room messages are translated
    if not source.is_multi_person:
        return

    await process_fanout_translation(
        ctx.store,
        ctx.translator,
        ctx.messenger,
        source.conversation_id,
        source.user_id,
        message_text,
        fallback_display_name=ctx.fallback_display_name,
    )
