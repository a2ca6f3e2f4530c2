# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/3 22:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 事件枚举与翻译、投递结果模型
"""

from enum import Enum

from pydantic import BaseModel, Field


class SourceType(str, Enum):
    USER = "user"
    """
    一对一聊天
    """

    GROUP = "group"
    """
    群组
    """

    ROOM = "room"
    """
    多人聊天（没有群组资料的临时会话）
    """


class EventType(str, Enum):
    MESSAGE = "message"
    JOIN = "join"
    FOLLOW = "follow"
    MEMBER_JOINED = "memberJoined"


class TranslationOutcome(BaseModel):
    language: str = Field(description="目标语言标签（小写）", examples=["thai"])
    text: str | None = Field(default=None, description="翻译结果，失败时为空")
    error: str | None = Field(default=None, description="失败原因")

    @property
    def ok(self) -> bool:
        return bool(self.text)


class DeliveryResult(BaseModel):
    success: bool
    error: str | None = None


class CommandResult(BaseModel):
    """A recognized language command: the reply to send and the tag to store, if valid."""

    reply_text: str
    language: str | None = None

    @property
    def accepted(self) -> bool:
        return self.language is not None
