"""Prompt template rendering.

Templates are rendered with Jinja2 against a context built from layers.
Layers are merged left to right and later keys win:

    1. static configuration  (``chat_config``)
    2. static options        (``chat_options``)
    3. custom parameters     (set on the bot, e.g. ``user_name``)
    4. call data             (passed to ``add_prompt``)

Example:
    >>> ctx = prompt_context(config, options, {"name": "Nova"}, {"name": "Ada"})
    >>> render_template("You are {{ name }}.", ctx)
    'You are Ada.'
"""

import logging
from typing import Any, Mapping

from jinja2 import BaseLoader, Environment

logger = logging.getLogger(__name__)

_env = Environment(loader=BaseLoader(), autoescape=False, keep_trailing_newline=True)


def build_context(*layers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge mappings into a new dict; later layers override earlier ones. ``None`` layers are skipped."""
    context: dict[str, Any] = {}
    for layer in layers:
        if layer:
            context.update(layer)
    return context


def prompt_context(
    config: Any,
    options: Any,
    custom_params: Mapping[str, str] | None = None,
    data: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    return build_context(
        {"chat_config": config, "chat_options": options},
        custom_params,
        data,
    )


def render_template(template: str, context: Mapping[str, Any]) -> str:
    """Render a Jinja template string.

    Missing variables render as empty strings. Syntax and runtime errors
    (``jinja2.TemplateError``) propagate to the caller.
    """
    rendered = _env.from_string(template).render(dict(context))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Rendered template ({len(template)} chars) -> {len(rendered)} chars")
    return rendered
