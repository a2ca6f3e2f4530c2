# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/7 09:21
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 语言偏好存储

InMemoryPreferenceStore 的生命周期与进程一致，进程重启后所有偏好都会丢失。
需要持久化时实现 PreferenceStore 协议即可，目标语言解析与翻译分发逻辑无需改动。
"""
from typing import Dict, Protocol

from loguru import logger


class PreferenceStore(Protocol):
    def set_conversation_preference(
        self, conversation_id: str, participant_id: str, language: str
    ) -> None: ...

    def set_direct_preference(self, participant_id: str, language: str) -> None: ...

    def get_conversation_preferences(self, conversation_id: str) -> Dict[str, str | None]: ...

    def get_direct_preference(self, participant_id: str) -> str | None: ...

    def ensure_conversation_initialized(self, conversation_id: str) -> None: ...

    def ensure_direct_initialized(self, participant_id: str) -> None: ...


class InMemoryPreferenceStore:
    """Process-lifetime preference maps, one for group/room chats and one for 1:1 chats."""

    def __init__(self):
        # {"conversation_id": {"participant_id": "language"}}
        self._conversations: Dict[str, Dict[str, str | None]] = {}
        # {"participant_id": "language" | None}
        self._direct: Dict[str, str | None] = {}

    def set_conversation_preference(
        self, conversation_id: str, participant_id: str, language: str
    ) -> None:
        preferences = self._conversations.setdefault(conversation_id, {})
        preferences[participant_id] = language.lower()
        logger.debug(f"已设置会话 {conversation_id} 中用户 {participant_id} 的语言: {language}")

    def set_direct_preference(self, participant_id: str, language: str) -> None:
        self._direct[participant_id] = language.lower()
        logger.debug(f"已设置用户 {participant_id} 的私聊语言: {language}")

    def get_conversation_preferences(self, conversation_id: str) -> Dict[str, str | None]:
        return dict(self._conversations.get(conversation_id, {}))

    def get_direct_preference(self, participant_id: str) -> str | None:
        return self._direct.get(participant_id)

    def ensure_conversation_initialized(self, conversation_id: str) -> None:
        if conversation_id not in self._conversations:
            self._conversations[conversation_id] = {}
            logger.info(f"Initialized preferences for conversation {conversation_id}")

    def ensure_direct_initialized(self, participant_id: str) -> None:
        self._direct.setdefault(participant_id, None)
