# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/7 08:55
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 按成员语言偏好扇出翻译
"""

from .commands import parse_group_command, parse_direct_command
from .composer import compose_reply, MAX_REPLY_LENGTH
from .dispatcher import translate_to_all, Translator
from .node import process_fanout_translation, Messenger
from .store import InMemoryPreferenceStore, PreferenceStore
from .targets import resolve_targets

__all__ = [
    "parse_group_command",
    "parse_direct_command",
    "compose_reply",
    "MAX_REPLY_LENGTH",
    "translate_to_all",
    "Translator",
    "process_fanout_translation",
    "Messenger",
    "InMemoryPreferenceStore",
    "PreferenceStore",
    "resolve_targets",
]
