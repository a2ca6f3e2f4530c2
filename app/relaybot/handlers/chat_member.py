# -*- coding: utf-8 -*-
"""
Membership event handlers: bot joined a chat, user followed the bot, members joined a group
"""
from loguru import logger

from line_api.models import WebhookEvent
from prompts import GROUP_WELCOME_TEMPLATE, FOLLOW_WELCOME_MESSAGE
from relaybot.context import BotContext


async def _send_welcome(ctx: BotContext, event: WebhookEvent, text: str, target: str):
    if not event.reply_token:
        return

    delivery = await ctx.messenger.reply_text(event.reply_token, text)
    if delivery.success:
        logger.info(f"Sent welcome message to {target}")
    else:
        logger.error(f"Failed to send welcome message to {target}: {delivery.error}")


async def handle_join(ctx: BotContext, event: WebhookEvent) -> None:
    """
    Handle the bot being added to a group or room

    Initializes an empty preference map for the chat and explains the command.
    """
    source = event.source
    if not source or not source.is_multi_person or not source.conversation_id:
        logger.info(f"Bot joined unknown source type: {source.type if source else None}")
        return

    logger.info(f"Bot joined {source.type}: {source.conversation_id}")
    ctx.store.ensure_conversation_initialized(source.conversation_id)

    welcome = GROUP_WELCOME_TEMPLATE.format(mention=ctx.mention_name)
    await _send_welcome(ctx, event, welcome, f"{source.type} {source.conversation_id}")


async def handle_follow(ctx: BotContext, event: WebhookEvent) -> None:
    """Handle a user adding the bot as a friend (one-to-one chat)"""
    user_id = event.source.user_id if event.source else None
    if not user_id:
        return

    logger.info(f"User {user_id} followed the bot.")
    ctx.store.ensure_direct_initialized(user_id)
    await _send_welcome(ctx, event, FOLLOW_WELCOME_MESSAGE, f"user {user_id}")


async def handle_member_joined(ctx: BotContext, event: WebhookEvent) -> None:
    """
    Handle new members joining a group the bot is in

    Members are only logged. The reply token could be used for a greeting but
    that gets noisy in busy groups, new members rely on the join message instead.
    """
    source = event.source
    members = event.joined.members if event.joined else []
    user_ids = [member.user_id for member in members if member.user_id]
    conversation_id = source.conversation_id if source else None
    logger.info(f"Members {', '.join(user_ids)} joined {conversation_id}")
