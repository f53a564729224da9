import json
import logging
import os
from typing import Any, Callable, Sequence

from openai import AsyncOpenAI

from ..models.message import Message
from ..tube import Tube
from ..utils.config import ChatConfig, ChatOptions

logger = logging.getLogger(__name__)

# Optional sampling keys: (options attribute, config fallback attribute or None)
_SAMPLING_PARAMS = (
    ("temperature", "temperature"),
    ("top_p", "top_p"),
    ("max_tokens", "max_tokens"),
    ("frequency_penalty", None),
    ("presence_penalty", None),
)


def create_client(config: ChatConfig) -> AsyncOpenAI:
    """Build the async OpenAI client from config, falling back to OPENAI_API_KEY."""
    api_key = config.api_key or os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OpenAI API key not found. Set LINGBOT_API_KEY or OPENAI_API_KEY environment variable.")
    return AsyncOpenAI(api_key=api_key, base_url=config.base_url)


def build_payload(messages: Sequence[Message], config: ChatConfig, options: ChatOptions) -> dict:
    """Build the chat.completions.create payload. Options override config defaults."""
    payload: dict[str, Any] = {
        "model": config.model,
        "messages": [msg.to_api_format() for msg in messages],
        "stream": config.stream,
    }
    for key, fallback in _SAMPLING_PARAMS:
        value = getattr(options, key)
        if value is None and fallback:
            value = getattr(config, fallback)
        if value is not None:
            payload[key] = value
    if options.response_format is not None:
        payload["response_format"] = options.response_format.to_api_format()
    return payload


async def get_chat_completions(
    tube: Tube,
    messages: Sequence[Message],
    client: AsyncOpenAI,
    config: ChatConfig,
    options: ChatOptions,
    on_complete: Callable[[str], Any],
    on_string_response: Callable[[str], Any],
) -> str:
    """Run one completion and relay its content.

    Each non-empty fragment is enqueued on the tube as a ``data`` record and
    passed to ``on_string_response``. The full text goes to ``on_complete`` once
    and is returned. The stream is closed on every exit path; errors from the
    service propagate.
    """
    payload = build_payload(messages, config, options)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"OpenAI Request Payload: {json.dumps(payload)}")

    if payload["stream"]:
        stream = await client.chat.completions.create(**payload)
        parts: list[str] = []
        async with stream:
            async for chunk in stream:
                if not chunk.choices:
                    continue
                content = chunk.choices[0].delta.content
                if content:
                    parts.append(content)
                    tube.enqueue({"event": "data", "data": content})
                    on_string_response(content)
        response_text = "".join(parts)
    else:
        completion = await client.chat.completions.create(**payload)
        response_text = completion.choices[0].message.content or ""
        usage = completion.usage
        if usage and logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"OpenAI Tokens: Prompt={usage.prompt_tokens}, Completion={usage.completion_tokens}, Total={usage.total_tokens}")
        if response_text:
            tube.enqueue({"event": "data", "data": response_text})

    on_complete(response_text)
    return response_text
