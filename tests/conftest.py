import pytest

from lingbot.utils.config import ChatConfig


class RecordingTube:
    """In-memory stand-in for the streaming transport."""

    def __init__(self):
        self.records = []
        self.filters = []
        self.cancelled = False

    def add_filter(self, filter):
        self.filters.append(filter)

    def clear_filters(self):
        self.filters = []

    def enqueue(self, record):
        self.records.append(record)

    def cancel(self):
        self.cancelled = True


@pytest.fixture
def tube():
    return RecordingTube()


@pytest.fixture
def chat_config(monkeypatch):
    """ChatConfig isolated from the developer's environment and .env file."""
    for key in ("LINGBOT_MODEL", "LINGBOT_API_KEY", "LINGBOT_BASE_URL", "LINGBOT_STREAM", "OPENAI_API_KEY"):
        monkeypatch.delenv(key, raising=False)
    return ChatConfig(_env_file=None, model="gpt-test", api_key="test-api-key")
