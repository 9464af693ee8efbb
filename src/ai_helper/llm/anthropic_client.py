from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from anthropic import Anthropic

from ..errors import MissingCredentialError
from .client_base import DEFAULT_MAX_TOKENS, LLMClient, LLMResponse
from .registry import register_backend

DEFAULT_MODEL = "claude-sonnet-4-20250514"


def _usage_to_dict(usage: Any) -> Optional[dict]:
    if usage is None:
        return None
    if isinstance(usage, dict):
        return usage
    return {
        "input_tokens": getattr(usage, "input_tokens", None),
        "output_tokens": getattr(usage, "output_tokens", None),
    }


@register_backend("anthropic")
@dataclass
class AnthropicClient(LLMClient):
    """
    Anthropic Messages API client.

    The key is passed in explicitly; this class never looks at the
    environment. The SDK client is only built once a key is known to exist,
    so a missing key fails before any connection is attempted.
    """
    api_key: Optional[str] = None
    default_model: str = DEFAULT_MODEL
    _client: Optional[Anthropic] = field(default=None, init=False, repr=False)

    @classmethod
    def from_settings(cls, settings) -> "AnthropicClient":
        return cls(api_key=settings.api_key, default_model=settings.model or DEFAULT_MODEL)

    def check_credentials(self) -> None:
        if not self.api_key:
            raise MissingCredentialError("ANTHROPIC_API_KEY")

    def _sdk(self) -> Anthropic:
        if self._client is None:
            self._client = Anthropic(api_key=self.api_key)
        return self._client

    def generate(
        self,
        *,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> LLMResponse:
        """
        Send prompt as the only user message and return the first content block.
        """
        self.check_credentials()
        model = model or self.default_model

        message = self._sdk().messages.create(
            model=model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )

        return LLMResponse(
            raw_text=message.content[0].text,
            model_name=model,
            usage=_usage_to_dict(getattr(message, "usage", None)),
        )
