from .client_base import DEFAULT_MAX_TOKENS, LLMClient, LLMResponse
from .registry import create_client, get_backend, list_backends, register_backend

# Importing the backends registers them.
from . import anthropic_client, azure_client, mock_client  # noqa: E402,F401

__all__ = [
    "DEFAULT_MAX_TOKENS",
    "LLMClient",
    "LLMResponse",
    "create_client",
    "get_backend",
    "list_backends",
    "register_backend",
]
