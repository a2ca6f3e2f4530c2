# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/6 14:12
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : LINE 投递与资料查询，失败只记录不抛出
"""
import httpx
from loguru import logger

from line_api import LineMessagingClient
from models import DeliveryResult


def _describe_error(error: Exception) -> str:
    if isinstance(error, httpx.HTTPStatusError):
        return f"{error.response.status_code} {error.response.text}"
    return str(error) or type(error).__name__


class LineMessenger:
    def __init__(self, client: LineMessagingClient | None = None):
        self._client = client or LineMessagingClient()

    async def fetch_display_name(self, user_id: str) -> str | None:
        try:
            profile = await self._client.get_profile(user_id)
        except Exception as e:
            logger.error(f"Error getting profile for {user_id}: {_describe_error(e)}")
            return None
        return profile.display_name

    async def reply_text(self, reply_token: str, text: str) -> DeliveryResult:
        try:
            await self._client.reply_message(reply_token, text)
        except Exception as e:
            return DeliveryResult(success=False, error=_describe_error(e))
        return DeliveryResult(success=True)

    async def push_text(self, to: str, text: str) -> DeliveryResult:
        try:
            await self._client.push_message(to, text)
        except Exception as e:
            return DeliveryResult(success=False, error=_describe_error(e))
        return DeliveryResult(success=True)

    async def aclose(self):
        await self._client.aclose()
