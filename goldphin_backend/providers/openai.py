from __future__ import annotations
from typing import Any, Dict, Optional

from goldphin_backend.providers.base import NO_RESPONSE, first_text, json_headers
from goldphin_backend.providers.types import Messages, ProviderRequest

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIProvider:
    name = "openai"
    default_model = "gpt-4o-mini"

    def __init__(self) -> None:
        self.url = OPENAI_CHAT_URL

    def build_request(
        self,
        messages: Messages,
        *,
        api_key: str,
        model: Optional[str] = None,
        custom_endpoint: Optional[str] = None,
    ) -> ProviderRequest:
        payload: Dict[str, Any] = {
            "model": model or self.default_model,
            "messages": messages,
            "temperature": 0.7,
            "max_tokens": 2000,
        }
        headers = json_headers(Authorization=f"Bearer {api_key}")
        return ProviderRequest(url=self.url, headers=headers, body=payload)

    def extract_text(self, data: Any) -> str:
        return first_text(data, ("choices", 0, "message", "content")) or NO_RESPONSE
