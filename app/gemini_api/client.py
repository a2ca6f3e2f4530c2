# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/4 15:20
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Gemini generateContent REST 客户端
"""
from httpx import AsyncClient
from loguru import logger

from gemini_api.models import GenerateContentPayload, GenerateContentResponse
from settings import settings


class GeminiClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        *,
        client: AsyncClient | None = None,
    ):
        api_key = api_key or settings.GEMINI_API_KEY.get_secret_value()
        self.model = model or settings.GEMINI_MODEL
        headers = {"x-goog-api-key": api_key}
        self._client = client or AsyncClient(
            base_url=base_url or settings.GEMINI_API_BASE_URL,
            headers=headers,
            timeout=timeout or settings.HTTP_REQUEST_TIMEOUT,
        )

    async def generate_content(self, prompt: str) -> GenerateContentResponse:
        """
        单轮文本生成

        Args:
            prompt: 完整的提示词

        Returns:
            模型响应；被安全策略拦截时 candidates 为空并带有 promptFeedback
        """
        payload = GenerateContentPayload.from_prompt(prompt)
        response = await self._client.post(
            f"/models/{self.model}:generateContent", json=payload.dumps_params()
        )
        response.raise_for_status()
        result = GenerateContentResponse(**response.json())
        if result.prompt_feedback and result.prompt_feedback.block_reason:
            logger.warning(f"Prompt Feedback: {result.prompt_feedback.model_dump_json()}")
        return result

    async def aclose(self):
        await self._client.aclose()
