"""
Settings for the helper and the environment bootstrapper that fills them.

Only `load_settings` reads the process environment. Everything else receives
its configuration explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .llm.client_base import DEFAULT_MAX_TOKENS

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class HelperSettings:
    """Backend selection, credentials and request defaults."""
    api_key: Optional[str] = None
    backend: str = "anthropic"
    model: Optional[str] = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    log_level: str = "INFO"
    azure_endpoint: Optional[str] = None
    azure_api_key: Optional[str] = None
    azure_deployment: Optional[str] = None
    azure_api_version: Optional[str] = None

    def __post_init__(self):
        """Validate settings values."""
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int):
            raise ValueError("max_tokens must be an integer")
        if self.max_tokens < 1:
            raise ValueError("max_tokens must be a positive integer")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level. Must be one of: {VALID_LOG_LEVELS}")
        self.log_level = self.log_level.upper()

        if not self.backend:
            raise ValueError("backend must not be empty")


def _parse_max_tokens(raw: Optional[str]) -> int:
    if raw is None or raw.strip() == "":
        return DEFAULT_MAX_TOKENS
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"AI_HELPER_MAX_TOKENS must be an integer, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> HelperSettings:
    """
    Build HelperSettings from environment variables.

    When `env` is omitted, a `.env` file found from the working
    directory (if any) is loaded into the process environment first and
    `os.environ` is read. Empty values count as unset.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    def get(name: str) -> Optional[str]:
        value = env.get(name)
        return value or None

    return HelperSettings(
        api_key=get("ANTHROPIC_API_KEY"),
        backend=get("AI_HELPER_BACKEND") or "anthropic",
        model=get("AI_HELPER_MODEL"),
        max_tokens=_parse_max_tokens(get("AI_HELPER_MAX_TOKENS")),
        log_level=get("AI_HELPER_LOG_LEVEL") or "INFO",
        azure_endpoint=get("AZURE_OPENAI_ENDPOINT"),
        azure_api_key=get("AZURE_OPENAI_API_KEY"),
        azure_deployment=get("AZURE_OPENAI_DEPLOYMENT_NAME"),
        azure_api_version=get("AZURE_OPENAI_API_VERSION"),
    )
