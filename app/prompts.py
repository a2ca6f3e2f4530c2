# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/4 09:47
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 翻译提示词、欢迎语与语言指令回复模板
"""

TRANSLATION_PROMPT_TEMPLATE = (
    "Translate the following text to {target_language}. "
    "Output only the translated text, without any introductory phrases or explanations: "
    '"{text}"'
)

# 机器人被拉入群组或多人聊天时的欢迎语
GROUP_WELCOME_TEMPLATE = """Hello! I'm the translator bot.
Please tell me your preferred language by typing:
{mention} language [language name or code]

For example:
{mention} language English
{mention} language th"""

# 用户添加机器人为好友时的欢迎语
FOLLOW_WELCOME_MESSAGE = """Hello! Thanks for adding me.
To set your preferred language for translation, type:
language [language name or code]

For example:
language Spanish
language ja"""

GROUP_LANGUAGE_SET_TEMPLATE = "OK! Your preferred language is set to {language} for this {scope}."
GROUP_MISSING_LANGUAGE_TEMPLATE = (
    "Please specify a language after 'language'. Example: {mention} language French"
)
GROUP_USAGE_TEMPLATE = "Invalid command format. Use: {mention} language [language name or code]"

DIRECT_LANGUAGE_SET_TEMPLATE = "OK! Your preferred language is set to {language}."
DIRECT_MISSING_LANGUAGE_MESSAGE = (
    "Please specify a language after 'language'. Example: language Japanese"
)
DIRECT_USAGE_MESSAGE = "Invalid command format. Use: language [language name or code]"

REPLY_HEADER_TEMPLATE = "Original message from {sender}:\n{text}\n"
REPLY_TRANSLATIONS_DIVIDER = "\n--- Translations ---"
REPLY_TRANSLATION_LINE_TEMPLATE = "{language}: {translation}"
