from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .client_base import DEFAULT_MAX_TOKENS, LLMClient, LLMResponse
from .registry import register_backend

_SAY_RE = re.compile(r'\bSay\s+"([^"]*)"', re.IGNORECASE)


def _extract_quoted(prompt: str) -> Optional[str]:
    """
    Extract the phrase from prompts like:
      Say "Hello there" and nothing else.
    """
    m = _SAY_RE.search(prompt or "")
    if not m:
        return None
    return m.group(1)


@register_backend("mock")
@dataclass
class MockLLMClient(LLMClient):
    model_name: str = "mock-llm"

    @classmethod
    def from_settings(cls, settings) -> "MockLLMClient":
        return cls()

    def check_credentials(self) -> None:
        return None

    def generate(
        self,
        *,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> LLMResponse:
        quoted = _extract_quoted(prompt)
        if quoted is not None:
            text = quoted
        else:
            text = f"Received a prompt of {len(prompt or '')} characters."

        # Rough whitespace token count, trimmed to the requested budget
        words = text.split()
        if len(words) > max_tokens:
            text = " ".join(words[:max_tokens])

        return LLMResponse(
            raw_text=text,
            model_name=model or self.model_name,
            usage={"input_tokens": len((prompt or "").split()), "output_tokens": len(text.split())},
        )
