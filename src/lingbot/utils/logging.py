"""
Rich-formatted logging for lingbot.

Two modes:
- Normal/verbose: rich-formatted records on stderr
- Debug (debug=True): low-level DEBUG messages, unformatted

Usage:
    from lingbot.utils.logging import setup_logging

    setup_logging(verbose=args.verbose, debug=args.debug)
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LINGBOT_THEME = Theme({
    "bot.state": "bold cyan",
    "bot.event": "green",
    "bot.error": "bold red",
    "model.name": "bold magenta",
})

NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "openai",
    "asyncio",
    "urllib3",
    "markdown_it",
)

_console: Console | None = None


def get_console() -> Console:
    """Get the shared stderr console."""
    global _console
    if _console is None:
        _console = Console(theme=LINGBOT_THEME, stderr=True)
    return _console


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        verbose: Show local variables in rich tracebacks
        debug: Enable DEBUG level with a plain timestamped format
    """
    level = logging.DEBUG if debug else logging.INFO

    if debug:
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S",
            force=True,
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(
                console=get_console(),
                show_path=False,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
                markup=False,
            )],
            force=True,
        )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING if not debug else logging.INFO)
