# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/7 13:18
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 翻译结果汇总
"""
from typing import Sequence

from loguru import logger

from models import TranslationOutcome
from prompts import (
    REPLY_HEADER_TEMPLATE,
    REPLY_TRANSLATIONS_DIVIDER,
    REPLY_TRANSLATION_LINE_TEMPLATE,
)

# LINE 单条文本消息的长度上限
MAX_REPLY_LENGTH = 5000
ELLIPSIS = "..."


def truncate_reply(text: str, limit: int = MAX_REPLY_LENGTH) -> str:
    if len(text) <= limit:
        return text
    logger.warning(f"Trimmed translation message due to length limit ({len(text)} > {limit})")
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def compose_reply(
    sender_display_name: str, original_text: str, outcomes: Sequence[TranslationOutcome]
) -> str | None:
    """
    将发送者、原文与成功的翻译拼接成一条消息

    Returns:
        待发送的文本；没有任何成功的翻译时返回 None
    """
    successful = [outcome for outcome in outcomes if outcome.ok]
    if not successful:
        return None

    lines = [REPLY_TRANSLATIONS_DIVIDER]
    lines.extend(
        REPLY_TRANSLATION_LINE_TEMPLATE.format(
            language=outcome.language.upper(), translation=outcome.text
        )
        for outcome in successful
    )

    header = REPLY_HEADER_TEMPLATE.format(sender=sender_display_name, text=original_text)
    return truncate_reply(header + "\n".join(lines))
