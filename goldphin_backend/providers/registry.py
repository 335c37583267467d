from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from goldphin_backend.errors import UnsupportedProviderError
from goldphin_backend.providers.anthropic import AnthropicProvider
from goldphin_backend.providers.base import ChatProvider
from goldphin_backend.providers.custom import CustomProvider
from goldphin_backend.providers.gemini import GeminiProvider
from goldphin_backend.providers.openai import OpenAIProvider
from goldphin_backend.providers.types import Messages, ProviderRequest

logger = logging.getLogger(__name__)

UNKNOWN_FORMAT = "Unknown response format"
PARSE_ERROR = "Error parsing response"


class ProviderRegistry:
    def __init__(self) -> None:
        self._providers: Dict[str, ChatProvider] = {
            p.name: p
            for p in (GeminiProvider(), OpenAIProvider(), AnthropicProvider(), CustomProvider())
        }

    @property
    def names(self) -> list[str]:
        return list(self._providers)

    def get(self, provider: Any) -> ChatProvider:
        found = self._providers.get(provider) if isinstance(provider, str) else None
        if found is None:
            raise UnsupportedProviderError(provider)
        return found

    def adapt(
        self,
        provider: Any,
        messages: Messages,
        *,
        api_key: str,
        model: Optional[str] = None,
        custom_endpoint: Optional[str] = None,
    ) -> ProviderRequest:
        return self.get(provider).build_request(
            messages, api_key=api_key, model=model, custom_endpoint=custom_endpoint
        )

    def extract(self, provider: Any, data: Any) -> str:
        """Return the generated text; degrades to a sentinel string instead of raising."""
        try:
            adapter = self.get(provider)
        except UnsupportedProviderError:
            return UNKNOWN_FORMAT
        try:
            return adapter.extract_text(data)
        except Exception:
            logger.exception("Error extracting response from %s", provider)
            return PARSE_ERROR


_default = ProviderRegistry()


def adapt(provider, model, messages, custom_endpoint, api_key) -> ProviderRequest:
    return _default.adapt(
        provider, messages, api_key=api_key, model=model, custom_endpoint=custom_endpoint
    )


def extract(provider, data) -> str:
    return _default.extract(provider, data)
