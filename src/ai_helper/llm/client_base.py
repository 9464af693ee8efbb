from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

DEFAULT_MAX_TOKENS = 4000


@dataclass(frozen=True)
class LLMResponse:
    """
    Standard response object returned by any LLM client implementation.
    """
    raw_text: str
    model_name: str
    usage: Optional[dict] = None  # token counts as reported by the provider


class LLMClient(Protocol):
    """
    Protocol / interface for LLM clients.

    A client takes one prompt, sends it as a single user turn, and returns
    the text of the reply. No history, no system instruction, no streaming.

    Different model providers can implement this interface.
    """

    def check_credentials(self) -> None:
        """Raise MissingCredentialError if the client cannot authenticate."""
        ...

    def generate(
        self,
        *,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> LLMResponse:
        ...
