from __future__ import annotations
from typing import Any, Dict, Protocol

import httpx

from goldphin_backend.errors import TransportError
from goldphin_backend.providers.types import UpstreamReply
from goldphin_backend.settings import DEFAULT_HTTP_TIMEOUT


class Sender(Protocol):
    async def send(self, method: str, url: str, headers: Dict[str, str], body: Any) -> UpstreamReply:
        ...


class HttpxSender:
    """Outbound calls over a fresh ``httpx.AsyncClient`` per request."""

    def __init__(self, timeout: float = DEFAULT_HTTP_TIMEOUT, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.timeout = timeout
        self._transport = transport

    async def send(self, method: str, url: str, headers: Dict[str, str], body: Any) -> UpstreamReply:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                r = await client.request(method, url, headers=headers, json=body)
            except httpx.HTTPError as e:
                raise TransportError(str(e) or type(e).__name__) from e
        try:
            data = r.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON response from upstream (status {r.status_code}): {e}") from e
        return UpstreamReply(status=r.status_code, data=data)
