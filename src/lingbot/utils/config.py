import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

JSON_OBJECT = "json_object"


def get_default_dotenv_path() -> Path:
    env_path = os.environ.get("LINGBOT_ENV_FILE")
    if env_path:
        return Path(env_path).expanduser().resolve()

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config_home) / "lingbot" / ".env"


DOTENV_PATH = get_default_dotenv_path()


class ChatConfig(BaseSettings):
    """Static settings for the completion service, read from LINGBOT_* env vars or the .env file."""

    model: str = Field(default="gpt-4o-mini", description="Model name sent with every request")
    api_key: Optional[str] = Field(default=None, description="API key (falls back to OPENAI_API_KEY)")
    base_url: Optional[str] = Field(default=None, description="Override for OpenAI-compatible endpoints")

    # --- Generation defaults --- #
    temperature: float = Field(default=0.8, description="Default generation temperature")
    top_p: float = Field(default=0.95, description="Default nucleus sampling top-p")
    max_tokens: int = Field(default=1024*4, description="Default maximum tokens to generate")
    stream: bool = Field(default=True, description="Stream partial content while generating")

    model_config = SettingsConfigDict(
        env_prefix="LINGBOT_",
        env_file=DOTENV_PATH,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra='ignore'
    )


class ResponseFormat(BaseModel):
    """How the service should shape its answer.

    ``root`` selects the sub-path of the structured output the caller cares about.
    It stays local and is never sent to the service.
    """

    model_config = ConfigDict(validate_assignment=True)

    type: str = JSON_OBJECT
    root: Optional[str] = None

    def to_api_format(self) -> dict:
        return {"type": self.type}


class ChatOptions(BaseModel):
    """Per-bot request options. ``None`` means "use the ChatConfig default"."""

    model_config = ConfigDict(validate_assignment=True)

    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    response_format: Optional[ResponseFormat] = None
