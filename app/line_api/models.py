# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/5 11:52
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : LINE webhook 事件与 Messaging API 请求体
"""
from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field

from models import SourceType


class _CamelModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class EventSource(_CamelModel):
    type: str
    user_id: str | None = Field(default=None, alias="userId")
    group_id: str | None = Field(default=None, alias="groupId")
    room_id: str | None = Field(default=None, alias="roomId")

    @property
    def conversation_id(self) -> str | None:
        """groupId, roomId or userId depending on the source type."""
        if self.type == SourceType.GROUP:
            return self.group_id
        if self.type == SourceType.ROOM:
            return self.room_id
        if self.type == SourceType.USER:
            return self.user_id
        return None

    @property
    def is_multi_person(self) -> bool:
        return self.type in (SourceType.GROUP, SourceType.ROOM)


class EventMessage(_CamelModel):
    id: str | None = None
    type: str
    text: str | None = None


class JoinedMember(_CamelModel):
    type: str = "user"
    user_id: str | None = Field(default=None, alias="userId")


class JoinedMembers(_CamelModel):
    members: List[JoinedMember] = Field(default_factory=list)


class WebhookEvent(_CamelModel):
    type: str
    mode: str | None = None
    timestamp: int | None = None
    webhook_event_id: str | None = Field(default=None, alias="webhookEventId")
    reply_token: str | None = Field(default=None, alias="replyToken")
    source: EventSource | None = None
    message: EventMessage | None = None
    joined: JoinedMembers | None = None


class WebhookPayload(_CamelModel):
    destination: str | None = None
    events: List[Any] = Field(
        default_factory=list, description="原始事件，逐条解析以便跳过无法识别的事件"
    )


class TextMessage(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ReplyMessageRequest(BaseModel):
    reply_token: str = Field(serialization_alias="replyToken")
    messages: List[TextMessage]

    def dumps_params(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class PushMessageRequest(BaseModel):
    to: str
    messages: List[TextMessage]

    def dumps_params(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class UserProfile(_CamelModel):
    user_id: str | None = Field(default=None, alias="userId")
    display_name: str = Field(alias="displayName")
    picture_url: str | None = Field(default=None, alias="pictureUrl")
    status_message: str | None = Field(default=None, alias="statusMessage")
    language: str | None = None
