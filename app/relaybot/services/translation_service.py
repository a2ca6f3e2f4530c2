# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/6 10:26
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 基于 Gemini 的单语种翻译服务
"""
import re

from loguru import logger

from gemini_api import GeminiClient
from prompts import TRANSLATION_PROMPT_TEMPLATE
from settings import settings

# 模型偶尔会把译文包在引号或反引号里
_WRAPPING_QUOTES = re.compile(r'^["`]|["`]$')


def clean_translation(raw: str) -> str:
    return _WRAPPING_QUOTES.sub("", raw.strip())


class GeminiTranslator:
    def __init__(self, client: GeminiClient | None = None, *, dev_mode: bool | None = None):
        self._client = client or GeminiClient()
        self._dev_mode = settings.ENABLE_DEV_MODE if dev_mode is None else dev_mode

    async def translate(self, text: str, target_language: str) -> str | None:
        """翻译为目标语言。失败、空响应或被拦截时返回 None"""
        if not text or not target_language:
            return None

        if self._dev_mode:
            return settings.DEV_MODE_MOCKED_TEMPLATE.format(language=target_language, text=text)

        prompt = TRANSLATION_PROMPT_TEMPLATE.format(target_language=target_language, text=text)

        try:
            response = await self._client.generate_content(prompt)
        except Exception as e:
            logger.error(f"Gemini API error during translation to {target_language}: {e}")
            return None

        translation = clean_translation(response.text)
        if not translation:
            logger.warning(f"Gemini returned no content for {target_language}")
            return None

        logger.debug(f"Gemini translation to {target_language}: {translation}")
        return translation

    async def aclose(self):
        await self._client.aclose()
