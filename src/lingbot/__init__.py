from .bot import Bot, ChatBot, WorkState
from .models.message import Message
from .prompts import PromptLibrary
from .utils.config import ChatConfig, ChatOptions, ResponseFormat

__all__ = [
    'Bot', 'ChatBot', 'WorkState', 'Message', 'PromptLibrary',
    'ChatConfig', 'ChatOptions', 'ResponseFormat',
]
