from __future__ import annotations

import logging
from typing import Optional

from .config import HelperSettings, load_settings
from .llm import DEFAULT_MAX_TOKENS, LLMClient, create_client
from .llm.anthropic_client import AnthropicClient
from .prompts.prompt_builder import TEST_PROMPT

logger = logging.getLogger(__name__)


class AIHelper:
    """
    Send a prompt to a hosted language model and get the reply text back.

    Each call is independent: one request, one user turn, no shared state
    between calls. Failures are logged once and re-raised unchanged.
    """

    def __init__(self, api_key: Optional[str] = None, *, client: Optional[LLMClient] = None):
        self.client: LLMClient = client if client is not None else AnthropicClient(api_key=api_key)
        self.default_max_tokens = DEFAULT_MAX_TOKENS

    @classmethod
    def from_settings(cls, settings: HelperSettings) -> "AIHelper":
        helper = cls(client=create_client(settings))
        helper.default_max_tokens = settings.max_tokens
        return helper

    @classmethod
    def from_env(cls) -> "AIHelper":
        """Bootstrap from ANTHROPIC_API_KEY and friends (see .env.example)."""
        return cls.from_settings(load_settings())

    def ask(
        self,
        prompt: str,
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Send a prompt and return the text of the first content block.

        Args:
            prompt: Text sent as the only user message.
            model: Model identifier; the backend default when omitted.
            max_tokens: Maximum output tokens; 4000 when omitted.

        Raises:
            ValueError: max_tokens is not a positive integer.
            MissingCredentialError: no API key, raised before any request.
            Exception: whatever the backend SDK raised, unchanged.
        """
        if max_tokens is None:
            max_tokens = self.default_max_tokens
        if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens < 1:
            raise ValueError("max_tokens must be a positive integer")

        self.client.check_credentials()

        try:
            resp = self.client.generate(prompt=prompt, model=model, max_tokens=max_tokens)
        except Exception as e:
            logger.error("AI Error: %s", e)
            raise

        return resp.raw_text

    def self_test(self) -> str:
        """
        Check connectivity with one short diagnostic request.
        """
        logger.info("Testing API connection...")

        self.client.check_credentials()
        logger.info("API key found")
        logger.info("Sending test message...")

        response = self.ask(TEST_PROMPT, max_tokens=100)

        logger.info("Response: %s", response)
        logger.info("SUCCESS! API is working.")
        return response
