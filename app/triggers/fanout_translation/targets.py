# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/7 10:04
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 目标语言解析
"""
from typing import Set

from loguru import logger

from triggers.fanout_translation.store import PreferenceStore


def resolve_targets(store: PreferenceStore, conversation_id: str, sender_id: str | None) -> Set[str]:
    """
    计算一条消息需要翻译成哪些语言

    发送者设置了语言时，排除与发送者相同的语言；
    发送者未设置语言时无法判断原文语言，为所有设置了偏好的成员翻译。

    Args:
        store: 语言偏好存储
        conversation_id: groupId 或 roomId
        sender_id: 发送者 userId

    Returns:
        去重后的小写语言标签集合，可能为空
    """
    preferences = store.get_conversation_preferences(conversation_id)
    sender_lang = preferences.get(sender_id) if sender_id else None
    sender_lang = sender_lang.lower() if sender_lang else None

    targets = {
        language.lower()
        for language in preferences.values()
        if language and (not sender_lang or language.lower() != sender_lang)
    }

    logger.debug(
        f"Target languages for {conversation_id} (sender {sender_id}, lang={sender_lang}): "
        f"{sorted(targets)}"
    )
    return targets
