# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/7 16:43
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 语言设置指令解析
"""
from models import CommandResult
from prompts import (
    GROUP_LANGUAGE_SET_TEMPLATE,
    GROUP_MISSING_LANGUAGE_TEMPLATE,
    GROUP_USAGE_TEMPLATE,
    DIRECT_LANGUAGE_SET_TEMPLATE,
    DIRECT_MISSING_LANGUAGE_MESSAGE,
    DIRECT_USAGE_MESSAGE,
)

COMMAND_KEYWORD = "language"


def _extract_language(text: str, skip: int) -> str | None:
    """
    取出指令关键字之后的语言标签

    Returns:
        小写的语言标签；参数为空时返回空字符串；token 数量不足时返回 None
    """
    parts = text.split(" ")
    if len(parts) < skip + 1:
        return None
    return " ".join(parts[skip:]).strip().lower()


def parse_group_command(text: str, mention: str, scope: str = "group") -> CommandResult | None:
    """
    解析群聊指令 `@TranslatorBot language [language name or code]`

    Args:
        text: 消息原文
        mention: 机器人的提及名，例如 `@TranslatorBot`
        scope: `group` 或 `room`，用于确认回复

    Returns:
        不是语言指令时返回 None
    """
    if not text.lower().startswith(f"{mention} {COMMAND_KEYWORD}".lower()):
        return None

    language = _extract_language(text, skip=2)
    if language is None:
        return CommandResult(reply_text=GROUP_USAGE_TEMPLATE.format(mention=mention))
    if not language:
        return CommandResult(reply_text=GROUP_MISSING_LANGUAGE_TEMPLATE.format(mention=mention))

    return CommandResult(
        reply_text=GROUP_LANGUAGE_SET_TEMPLATE.format(language=language, scope=scope),
        language=language,
    )


def parse_direct_command(text: str) -> CommandResult | None:
    """解析私聊指令 `language [language name or code]`，不是语言指令时返回 None"""
    if not text.lower().startswith(COMMAND_KEYWORD):
        return None

    language = _extract_language(text, skip=1)
    if language is None:
        return CommandResult(reply_text=DIRECT_USAGE_MESSAGE)
    if not language:
        return CommandResult(reply_text=DIRECT_MISSING_LANGUAGE_MESSAGE)

    return CommandResult(
        reply_text=DIRECT_LANGUAGE_SET_TEMPLATE.format(language=language), language=language
    )
