"""Conversation orchestrator.

A ChatBot keeps system prompts, dialogue history and response options, and
runs one chat turn at a time against a completion adapter:

    bot = ChatBot(tube, client, ChatConfig())
    bot.set_prompt("You are {{ name }}.", {"name": "Ada"})
    bot.on("string-response", print)
    await bot.chat("hi")

Outbound messages are always ``prompts + history + [user turn]``. Failures
during a turn are reported on the tube as an ``error`` record, never raised.
Only one ``chat()`` call may be in flight per bot; overlapping calls are not
detected.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Awaitable, Callable, Coroutine, Iterable, Mapping, Sequence

from ..adapters.openai_adapter import get_chat_completions
from ..models.message import Message, ROLE_ASSISTANT, ROLE_SYSTEM, ROLE_USER
from ..prompts import PromptLibrary
from ..tube import Filter, Tube
from ..utils.config import ChatConfig, ChatOptions, ResponseFormat
from ..utils.templates import prompt_context, render_template
from .events import EventSource, Listener

logger = logging.getLogger(__name__)

EVENT_RESPONSE = "response"
EVENT_STRING_RESPONSE = "string-response"
EVENT_INFERENCE_DONE = "inference-done"
BOT_EVENTS = (EVENT_RESPONSE, EVENT_STRING_RESPONSE, EVENT_INFERENCE_DONE)

RunCompletion = Callable[..., Awaitable[Any]]


class WorkState(str, Enum):
    INIT = "init"
    WORKING = "chatting"
    FINISHED = "finished"
    ERROR = "error"


class Bot(ABC):
    """Base class for bots: observer registration plus a lifecycle state."""

    def __init__(self):
        self._events = EventSource(BOT_EVENTS)

    def on(self, event: str, listener: Listener) -> Listener:
        """Register a listener for ``response``, ``string-response`` or ``inference-done``."""
        return self._events.on(event, listener)

    def off(self, event: str, listener: Listener) -> None:
        self._events.off(event, listener)

    def _emit(self, event: str, *args: Any) -> bool:
        return self._events.emit(event, *args)

    @property
    @abstractmethod
    def state(self) -> WorkState:
        pass


class ChatBot(Bot):
    def __init__(
        self,
        tube: Tube,
        client: Any,
        config: ChatConfig,
        options: ChatOptions | None = None,
        run_completion: RunCompletion = get_chat_completions,
    ):
        super().__init__()
        self._tube = tube
        self._client = client
        self._config = config
        self._options = options if options is not None else ChatOptions()
        self._run_completion = run_completion
        self._prompts: list[Message] = []
        self._history: list[Message] = []
        self._custom_params: dict[str, str] = {}
        self._chat_state = WorkState.INIT

    @property
    def options(self) -> ChatOptions:
        return self._options

    @property
    def prompts(self) -> list[Message]:
        return list(self._prompts)

    @property
    def history(self) -> list[Message]:
        return list(self._history)

    @property
    def custom_params(self) -> dict[str, str]:
        return dict(self._custom_params)

    def set_json_root(self, root: str | None) -> None:
        """Ask for JSON output rooted at ``root``; an existing format only has its root replaced."""
        if self._options.response_format is None:
            self._options.response_format = ResponseFormat(root=root)
        else:
            self._options.response_format.root = root

    def set_custom_params(self, params: Mapping[str, str]) -> None:
        self._custom_params = dict(params)

    def add_prompt(self, prompt_tpl: str, prompt_data: Mapping[str, Any] | None = None) -> None:
        """Render ``prompt_tpl`` and append it as a system prompt.

        Context precedence, lowest first: ``chat_config``/``chat_options``,
        custom params, ``prompt_data``. Template errors propagate.
        """
        context = prompt_context(self._config, self._options, self._custom_params, prompt_data)
        prompt_text = render_template(prompt_tpl, context)
        self._prompts.append(Message(ROLE_SYSTEM, prompt_text))

    def set_prompt(self, prompt_tpl: str, prompt_data: Mapping[str, Any] | None = None) -> None:
        self._prompts = []
        self.add_prompt(prompt_tpl, prompt_data)

    def add_named_prompt(self, library: PromptLibrary, name: str, prompt_data: Mapping[str, Any] | None = None) -> None:
        self.add_prompt(library.get(name), prompt_data)

    def add_history(self, messages: Iterable[Message]) -> None:
        self._history.extend(messages)

    def set_history(self, messages: Sequence[Message]) -> None:
        self._history = list(messages)

    def add_filter(self, filter: Filter) -> None:
        self._tube.add_filter(filter)

    def clear_filters(self) -> None:
        self._tube.clear_filters()

    def user_message(self, message: str) -> Message:
        return Message(ROLE_USER, message)

    def bot_message(self, message: str) -> Message:
        return Message(ROLE_ASSISTANT, message)

    def _on_complete(self, content: Any) -> None:
        self._chat_state = WorkState.FINISHED
        self._emit(EVENT_RESPONSE, content)

    def _on_string_response(self, content: Any) -> None:
        self._emit(EVENT_STRING_RESPONSE, content)

    def chat(self, message: str) -> Coroutine[Any, Any, None]:
        """Start one chat turn and return the awaitable that runs it.

        The state becomes WORKING and the outbound messages are fixed at call
        time, before the returned coroutine is awaited. Emits
        ``string-response`` per fragment, ``response`` with the final content
        and ``inference-done`` with the adapter result. On failure the state
        becomes ERROR and ``{"event": "error", "data": <message>}`` is enqueued
        on the tube instead of raising.
        """
        self._chat_state = WorkState.WORKING
        messages = [*self._prompts, *self._history, self.user_message(message)]
        logger.debug(f"Chat turn: {len(self._prompts)} prompt(s), {len(self._history)} history message(s)")
        return self._run_turn(messages)

    async def _run_turn(self, messages: list[Message]) -> None:
        try:
            result = await self._run_completion(
                self._tube, messages, self._client, self._config, self._options,
                self._on_complete, self._on_string_response,
            )
            self._emit(EVENT_INFERENCE_DONE, result)
        except Exception as e:
            logger.exception(f"Chat turn failed: {e}")
            self._chat_state = WorkState.ERROR
            self._tube.enqueue({"event": "error", "data": str(e)})

    @property
    def state(self) -> WorkState:
        return self._chat_state
