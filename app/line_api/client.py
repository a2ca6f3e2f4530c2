# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/5 11:08
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : LINE Messaging API 客户端：资料查询、reply 与 push
"""
from httpx import AsyncClient
from loguru import logger

from line_api.models import (
    PushMessageRequest,
    ReplyMessageRequest,
    TextMessage,
    UserProfile,
)
from settings import settings


class LineMessagingClient:
    def __init__(
        self,
        channel_access_token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        client: AsyncClient | None = None,
    ):
        token = channel_access_token or settings.LINE_CHANNEL_ACCESS_TOKEN.get_secret_value()
        headers = {"Authorization": f"Bearer {token}"}
        self._client = client or AsyncClient(
            base_url=base_url or settings.LINE_API_BASE_URL,
            headers=headers,
            timeout=timeout or settings.HTTP_REQUEST_TIMEOUT,
        )

    async def get_profile(self, user_id: str) -> UserProfile:
        """获取好友或群成员的个人资料"""
        response = await self._client.get(f"/v2/bot/profile/{user_id}")
        response.raise_for_status()
        return UserProfile(**response.json())

    async def reply_message(self, reply_token: str, text: str):
        """
        回复消息

        reply token 只能使用一次，且必须在收到事件后的短时间内使用。
        """
        payload = ReplyMessageRequest(reply_token=reply_token, messages=[TextMessage(text=text)])
        response = await self._client.post("/v2/bot/message/reply", json=payload.dumps_params())
        response.raise_for_status()

    async def push_message(self, to: str, text: str):
        """主动推送消息到用户、群组或多人聊天"""
        payload = PushMessageRequest(to=to, messages=[TextMessage(text=text)])
        response = await self._client.post("/v2/bot/message/push", json=payload.dumps_params())
        response.raise_for_status()
        logger.debug(f"push message: {to} ({len(text)} chars)")

    async def aclose(self):
        await self._client.aclose()
