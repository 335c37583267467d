from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ProviderRequest:
    url: str
    headers: Dict[str, str]
    body: Dict[str, Any]


@dataclass(frozen=True)
class UpstreamReply:
    status: int
    data: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass
class ChatResult:
    success: bool
    response: Optional[str] = None
    error: Optional[str] = None
    status_code: int = 200

    @classmethod
    def ok(cls, text: str) -> "ChatResult":
        return cls(True, response=text)

    @classmethod
    def fail(cls, error: str, status_code: int) -> "ChatResult":
        return cls(False, error=error, status_code=status_code)

    def to_payload(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "response": self.response}
        return {"success": False, "error": self.error}


Messages = List[Dict[str, Any]]
