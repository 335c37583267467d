from __future__ import annotations
from typing import Any, Optional

from goldphin_backend.providers.base import NO_RESPONSE, first_text, json_headers
from goldphin_backend.providers.types import Messages, ProviderRequest

GEMINI_API = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent?key={key}"


class GeminiProvider:
    name = "gemini"
    default_model = "gemini-2.0-flash-exp"

    def build_request(
        self,
        messages: Messages,
        *,
        api_key: str,
        model: Optional[str] = None,
        custom_endpoint: Optional[str] = None,
    ) -> ProviderRequest:
        url = GEMINI_API.format(model=model or self.default_model, key=api_key)
        # system messages are sent as plain user turns
        payload = {
            "contents": [
                {
                    "role": "model" if m.get("role") == "assistant" else "user",
                    "parts": [{"text": m.get("content")}],
                }
                for m in messages
            ]
        }
        return ProviderRequest(url=url, headers=json_headers(), body=payload)

    def extract_text(self, data: Any) -> str:
        return first_text(data, ("candidates", 0, "content", "parts", 0, "text")) or NO_RESPONSE
