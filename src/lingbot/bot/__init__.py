from .chat import (
    BOT_EVENTS,
    EVENT_INFERENCE_DONE,
    EVENT_RESPONSE,
    EVENT_STRING_RESPONSE,
    Bot,
    ChatBot,
    WorkState,
)
from .events import EventSource

__all__ = [
    'Bot', 'ChatBot', 'WorkState', 'EventSource', 'BOT_EVENTS',
    'EVENT_RESPONSE', 'EVENT_STRING_RESPONSE', 'EVENT_INFERENCE_DONE',
]
