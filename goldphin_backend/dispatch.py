from __future__ import annotations
import logging
from typing import Any

from goldphin_backend.errors import ChatValidationError, ProxyError, UpstreamError
from goldphin_backend.providers.base import compact_json
from goldphin_backend.providers.registry import ProviderRegistry
from goldphin_backend.providers.types import ChatResult, UpstreamReply
from goldphin_backend.schemas import ChatRequest
from goldphin_backend.transport import Sender

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields: provider, apiKey, or messages"
EMPTY_MESSAGES = "Messages must be a non-empty array"
BAD_MESSAGE = "Each message must be an object with role and content"
UPSTREAM_FAILED = "API request failed"
INTERNAL_ERROR = "Internal server error"


def _blank(value: Any) -> bool:
    # an empty list is present, just empty
    return value is None or value is False or value == "" or value == 0


def validate_request(req: ChatRequest) -> None:
    if _blank(req.provider) or _blank(req.api_key) or _blank(req.messages):
        raise ChatValidationError(MISSING_FIELDS)
    if not isinstance(req.messages, list) or len(req.messages) == 0:
        raise ChatValidationError(EMPTY_MESSAGES)
    if not all(isinstance(m, dict) for m in req.messages):
        raise ChatValidationError(BAD_MESSAGE)


def upstream_error_message(data: Any) -> str:
    """Pull a human readable message out of a provider's error payload."""
    err = data.get("error") if isinstance(data, dict) else None
    if not err:
        return UPSTREAM_FAILED
    if isinstance(err, str):
        return err
    if isinstance(err, dict) and err.get("message"):
        msg = err["message"]
        return msg if isinstance(msg, str) else compact_json(msg)
    return compact_json(err)


def _check_upstream(provider: str, reply: UpstreamReply) -> None:
    if reply.ok:
        return
    logger.error("API Error (%s) from %s: %s", reply.status, provider, reply.data)
    raise UpstreamError(upstream_error_message(reply.data), reply.status, reply.data)


async def handle(req: ChatRequest, sender: Sender, registry: ProviderRegistry | None = None) -> ChatResult:
    registry = registry or ProviderRegistry()
    try:
        validate_request(req)
        preq = registry.adapt(
            req.provider,
            req.messages,
            api_key=str(req.api_key),
            model=req.model,
            custom_endpoint=req.custom_endpoint,
        )
        logger.info("Making request to %s API...", req.provider)
        reply = await sender.send("POST", preq.url, preq.headers, preq.body)
        _check_upstream(req.provider, reply)
        text = registry.extract(req.provider, reply.data)
    except ProxyError as e:
        if e.status_code >= 500:
            logger.error("Request to %s failed: %s", req.provider, e.message)
        return ChatResult.fail(e.message or INTERNAL_ERROR, e.status_code)
    except Exception as e:
        logger.exception("Server error")
        return ChatResult.fail(str(e) or INTERNAL_ERROR, 500)
    logger.info("Successfully got response from %s", req.provider)
    return ChatResult.ok(text)
