import time

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

ROLES = (ROLE_SYSTEM, ROLE_USER, ROLE_ASSISTANT)


class Message:
    """Role-tagged unit of a conversation (system prompt, user turn or bot turn)."""

    def __init__(self, role: str, content: str, timestamp: float | None = None):
        if role not in ROLES:
            raise ValueError(f"Unknown message role '{role}'. Expected one of: {', '.join(ROLES)}")
        self.role = role
        self.content = content
        self.timestamp = timestamp if timestamp is not None else time.time()

    @classmethod
    def from_dict(cls, data: dict) -> 'Message':
        """Create a Message from a dictionary"""
        role = data.get("role", ROLE_USER)
        content = cls._extract_content(data)
        timestamp = data.get("timestamp", time.time())
        return cls(role, content, timestamp)

    @staticmethod
    def _extract_content(data: dict) -> str:
        content = data.get("content", "")
        if isinstance(content, list):
            # Multi-part content: keep only the text parts
            return " ".join(item.get("text", "") for item in content if item.get("type") == "text")
        return str(content)

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content, "timestamp": self.timestamp}

    def to_api_format(self) -> dict:
        """Convert to API-compatible format (without timestamp)"""
        return {"role": self.role, "content": self.content}

    def __repr__(self) -> str:
        return f"Message(role={self.role!r}, content={self.content!r})"
