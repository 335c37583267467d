from __future__ import annotations
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Inbound chat body; fields stay loosely typed so the dispatcher owns validation."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=(), extra="ignore")

    provider: Optional[Any] = None
    api_key: Optional[Any] = Field(default=None, alias="apiKey")
    model: Optional[Any] = None
    messages: Optional[Any] = None
    custom_endpoint: Optional[Any] = Field(default=None, alias="customEndpoint")


class ChatResponse(BaseModel):
    success: bool
    response: Optional[str] = None
    error: Optional[str] = None


class Health(BaseModel):
    status: str
    message: str
    timestamp: str


class ServiceInfo(BaseModel):
    message: str
    version: str
    endpoints: Dict[str, str]
