"""Named prompt templates.

Templates are loaded from a YAML file with a top-level ``prompts`` mapping:

    prompts:
      assistant: |
        You are {{ bot_name }}, a helpful assistant.

The bundled ``prompts.yaml`` next to this module provides the defaults.
"""

import logging
from pathlib import Path
from typing import Iterator, Mapping

import yaml

logger = logging.getLogger(__name__)

PROMPTS_YAML_PATH = Path(__file__).parent / "prompts.yaml"


class PromptLibrary:
    """A read-only set of named prompt templates."""

    def __init__(self, templates: Mapping[str, str] | None = None):
        self._templates: dict[str, str] = dict(templates or {})

    @classmethod
    def from_yaml(cls, yaml_path: Path | str = PROMPTS_YAML_PATH) -> "PromptLibrary":
        """Load templates from ``yaml_path``.

        Raises:
            FileNotFoundError: the file does not exist.
            ValueError: the file has no ``prompts`` mapping or a template is not a string.
        """
        path = Path(yaml_path).expanduser()
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        prompts = data.get("prompts") if isinstance(data, dict) else None
        if not isinstance(prompts, dict):
            raise ValueError(f"Invalid format in {path}: missing or invalid top-level 'prompts' dictionary")
        for name, template in prompts.items():
            if not isinstance(template, str):
                raise ValueError(f"Invalid format in {path}: prompt '{name}' is not a string")

        logger.debug(f"Loaded {len(prompts)} prompt templates from {path}")
        return cls(prompts)

    def get(self, name: str) -> str:
        try:
            return self._templates[name]
        except KeyError:
            raise KeyError(f"Unknown prompt '{name}'. Available: {', '.join(sorted(self._templates)) or '(none)'}") from None

    def names(self) -> list[str]:
        return sorted(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._templates)
