from __future__ import annotations
import json
from typing import Any, Dict, Optional, Protocol

from goldphin_backend.providers.types import Messages, ProviderRequest

NO_RESPONSE = "No response generated"


def json_headers(**extra: str) -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    headers.update(extra)
    return headers


def compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def dig(data: Any, *path: Any) -> Any:
    """Walk ``path`` through nested dicts/lists, returning None for anything absent.

    A missing key, an out-of-range index or a value of the wrong type all
    yield None. Only a null body is an error.
    """
    if data is None:
        raise TypeError("response body is null")
    cur: Any = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(cur, list) or not -len(cur) <= step < len(cur):
                return None
            cur = cur[step]
        else:
            if not isinstance(cur, dict):
                return None
            cur = cur.get(step)
        if cur is None:
            return None
    return cur


def first_text(data: Any, *paths: tuple) -> Optional[str]:
    for path in paths:
        value = dig(data, *path)
        if value:
            return value if isinstance(value, str) else compact_json(value)
    return None


class ChatProvider(Protocol):
    name: str
    default_model: Optional[str]

    def build_request(
        self,
        messages: Messages,
        *,
        api_key: str,
        model: Optional[str] = None,
        custom_endpoint: Optional[str] = None,
    ) -> ProviderRequest:
        """Shape the provider-specific url, headers and body."""

    def extract_text(self, data: Any) -> str:
        """Pull the generated text out of a successful response body."""
