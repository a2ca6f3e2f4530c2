# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/7 11:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 并发翻译分发
"""
import asyncio
from typing import Iterable, List, Protocol

from loguru import logger

from models import TranslationOutcome


class Translator(Protocol):
    async def translate(self, text: str, target_language: str) -> str | None: ...


async def _translate_one(translator: Translator, text: str, language: str) -> TranslationOutcome:
    try:
        translation = await translator.translate(text, language)
    except Exception as e:
        logger.error(f"Translation to {language} failed: {e}")
        return TranslationOutcome(language=language, error=str(e) or type(e).__name__)

    if not translation:
        return TranslationOutcome(language=language, error="empty translation")
    return TranslationOutcome(language=language, text=translation)


async def translate_to_all(
    translator: Translator, source_text: str, targets: Iterable[str]
) -> List[TranslationOutcome]:
    """
    为每个目标语言并发发起一次翻译，等待全部完成后返回

    每个语言的调用相互独立，单个失败只会让该语言的结果为空，不会影响其他语言，也不会重试。

    Returns:
        与目标语言一一对应的翻译结果，按语言标签排序
    """
    languages = sorted(set(targets))
    if not languages:
        return []

    results = await asyncio.gather(
        *[_translate_one(translator, source_text, language) for language in languages],
        return_exceptions=True,
    )

    outcomes = []
    for language, result in zip(languages, results):
        if isinstance(result, BaseException):
            logger.error(f"Translation task for {language} crashed: {result!r}")
            result = TranslationOutcome(language=language, error=repr(result))
        outcomes.append(result)

    succeeded = sum(1 for outcome in outcomes if outcome.ok)
    logger.info(f"Translated into {succeeded}/{len(outcomes)} languages: {languages}")
    return outcomes
