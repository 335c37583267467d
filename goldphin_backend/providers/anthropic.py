from __future__ import annotations
from typing import Any, Dict, Optional

from goldphin_backend.providers.base import NO_RESPONSE, first_text, json_headers
from goldphin_backend.providers.types import Messages, ProviderRequest

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider:
    """Claude takes the system prompt as a top-level field, not as a message."""

    name = "anthropic"
    default_model = "claude-3-5-sonnet-20241022"

    def build_request(
        self,
        messages: Messages,
        *,
        api_key: str,
        model: Optional[str] = None,
        custom_endpoint: Optional[str] = None,
    ) -> ProviderRequest:
        system = next((m for m in messages if m.get("role") == "system"), None)
        payload: Dict[str, Any] = {
            "model": model or self.default_model,
            "messages": [m for m in messages if m.get("role") != "system"],
            "max_tokens": 2000,
        }
        if system is not None:
            payload["system"] = system.get("content")
        headers = json_headers(**{"x-api-key": api_key, "anthropic-version": ANTHROPIC_VERSION})
        return ProviderRequest(url=ANTHROPIC_MESSAGES_URL, headers=headers, body=payload)

    def extract_text(self, data: Any) -> str:
        return first_text(data, ("content", 0, "text")) or NO_RESPONSE
