import logging

import pytest
from rich.logging import RichHandler

from lingbot.utils.logging import NOISY_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_rich_handler_by_default():
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert any(isinstance(h, RichHandler) for h in root.handlers)
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_debug_mode_uses_plain_format():
    setup_logging(debug=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert not any(isinstance(h, RichHandler) for h in root.handlers)
    assert logging.getLogger("openai").level == logging.INFO
