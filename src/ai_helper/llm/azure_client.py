from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from openai import AzureOpenAI

from ..errors import MissingCredentialError
from .client_base import DEFAULT_MAX_TOKENS, LLMClient, LLMResponse
from .registry import register_backend


@register_backend("azure")
@dataclass
class AzureOpenAIClient(LLMClient):
    """
    Azure OpenAI client implementation.

    Sends text prompts to a chat-completions deployment.
    All connection details are explicit fields (see .env.example for the
    variables `load_settings` reads them from).
    """
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    deployment: Optional[str] = None
    api_version: Optional[str] = None
    default_model: Optional[str] = None
    _client: Optional[AzureOpenAI] = field(default=None, init=False, repr=False)

    @classmethod
    def from_settings(cls, settings) -> "AzureOpenAIClient":
        return cls(
            endpoint=settings.azure_endpoint,
            api_key=settings.azure_api_key,
            deployment=settings.azure_deployment,
            api_version=settings.azure_api_version,
            default_model=settings.model,
        )

    def check_credentials(self) -> None:
        if not self.api_key:
            raise MissingCredentialError("AZURE_OPENAI_API_KEY")
        if not all([self.endpoint, self.deployment, self.api_version]):
            raise RuntimeError(
                "Missing Azure OpenAI environment variables. "
                "Check AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_DEPLOYMENT_NAME, "
                "AZURE_OPENAI_API_VERSION."
            )

    def _sdk(self) -> AzureOpenAI:
        if self._client is None:
            self._client = AzureOpenAI(
                api_key=self.api_key,
                api_version=self.api_version,
                azure_endpoint=self.endpoint,
            )
        return self._client

    def generate(
        self,
        *,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> LLMResponse:
        """
        Send prompt to Azure OpenAI. The deployment name doubles as the model
        unless a model or default_model is set.

        A reply with no content (e.g. a content-filter finish) yields "".
        """
        self.check_credentials()
        model = model or self.default_model or self.deployment

        resp = self._sdk().chat.completions.create(
            model=model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )

        usage = getattr(resp, "usage", None)
        return LLMResponse(
            raw_text=resp.choices[0].message.content or "",
            model_name=model,
            usage=usage.model_dump() if usage is not None else None,
        )
