# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/8 19:05
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 按事件类型分发单条 webhook 事件，跳过无法识别的事件
"""
import json
from typing import Any, Awaitable, Callable, Dict

from loguru import logger
from pydantic import ValidationError

from line_api.models import WebhookEvent
from models import EventType
from relaybot.context import BotContext
from relaybot.handlers.chat_member import handle_join, handle_follow, handle_member_joined
from relaybot.handlers.message_handler import handle_message

EventCallback = Callable[[BotContext, WebhookEvent], Awaitable[None]]

EVENT_HANDLERS: Dict[str, EventCallback] = {
    EventType.MESSAGE.value: handle_message,
    EventType.JOIN.value: handle_join,
    EventType.FOLLOW.value: handle_follow,
    EventType.MEMBER_JOINED.value: handle_member_joined,
}


def parse_event(raw_event: Any) -> WebhookEvent | None:
    if not isinstance(raw_event, dict):
        logger.warning(f"Skipping non-object event: {type(raw_event).__name__}")
        return None
    try:
        return WebhookEvent.model_validate(raw_event)
    except ValidationError as e:
        logger.warning(f"Skipping malformed event: {e.error_count()} validation errors")
        return None


async def handle_event(ctx: BotContext, raw_event: Any) -> None:
    """
    Handle one event of a webhook batch

    Unsupported event kinds (unfollow, leave, postback, ...) and malformed events
    are ignored. Always returns None, which becomes `null` in the webhook response.
    """
    logger.debug(f"Received event: {json.dumps(raw_event, ensure_ascii=False)}")

    event = parse_event(raw_event)
    if event is None:
        return None

    handler = EVENT_HANDLERS.get(event.type)
    if handler is None:
        return None

    await handler(ctx, event)
    return None
