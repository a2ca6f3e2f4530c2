# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/8 20:31
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 语言设置命令处理器（指令转发层）
"""
from loguru import logger

from line_api.models import WebhookEvent
from models import CommandResult
from relaybot.context import BotContext
from triggers.fanout_translation import parse_direct_command, parse_group_command


async def _reply_command_result(ctx: BotContext, event: WebhookEvent, result: CommandResult):
    if not event.reply_token:
        logger.warning("Command event has no reply token, skipping confirmation")
        return

    delivery = await ctx.messenger.reply_text(event.reply_token, result.reply_text)
    if not delivery.success:
        logger.error(f"Failed to reply to command: {delivery.error}")


async def handle_language_command(ctx: BotContext, event: WebhookEvent, text: str) -> bool:
    """
    识别并执行语言设置指令

    群组/多人聊天只识别 `@TranslatorBot language xx`，私聊只识别 `language xx`。

    Returns:
        bool: 消息是语言指令时返回 True（无论格式是否正确），调用方不应再翻译该消息
    """
    source = event.source
    user_id = source.user_id

    if source.is_multi_person:
        result = parse_group_command(text, ctx.mention_name, scope=source.type)
    else:
        result = parse_direct_command(text)

    if result is None:
        return False

    if result.accepted and not user_id:
        logger.warning(f"Language command without userId in {source.type}, ignored")
        return True

    if result.accepted:
        if source.is_multi_person:
            ctx.store.set_conversation_preference(source.conversation_id, user_id, result.language)
            logger.info(
                f"Set language for user {user_id} in {source.type} {source.conversation_id} "
                f"to {result.language}"
            )
        else:
            ctx.store.set_direct_preference(user_id, result.language)
            logger.info(f"Set language for user {user_id} (direct) to {result.language}")

    await _reply_command_result(ctx, event, result)
    return True
