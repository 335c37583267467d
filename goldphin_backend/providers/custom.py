from __future__ import annotations
from typing import Any, Optional

from goldphin_backend.errors import ConfigError
from goldphin_backend.providers.base import compact_json, first_text, json_headers
from goldphin_backend.providers.types import Messages, ProviderRequest

# Common response shapes, tried in order.
RESPONSE_PATHS = (
    ("response",),
    ("message",),
    ("text",),
    ("choices", 0, "message", "content"),
    ("content", 0, "text"),
)


class CustomProvider:
    """Caller-supplied endpoint assumed to speak an OpenAI-like protocol."""

    name = "custom"
    default_model = None

    def build_request(
        self,
        messages: Messages,
        *,
        api_key: str,
        model: Optional[str] = None,
        custom_endpoint: Optional[str] = None,
    ) -> ProviderRequest:
        if not custom_endpoint:
            raise ConfigError("Custom endpoint required for custom provider")
        # model is not forwarded
        headers = json_headers(Authorization=f"Bearer {api_key}")
        return ProviderRequest(url=custom_endpoint, headers=headers, body={"messages": messages})

    def extract_text(self, data: Any) -> str:
        return first_text(data, *RESPONSE_PATHS) or compact_json(data)
