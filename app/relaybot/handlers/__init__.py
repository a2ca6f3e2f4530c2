# -*- coding: utf-8 -*-

from .chat_member import handle_join, handle_follow, handle_member_joined
from .event_handler import handle_event
from .message_handler import handle_message

__all__ = ["handle_event", "handle_message", "handle_join", "handle_follow", "handle_member_joined"]
