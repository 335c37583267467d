from goldphin_backend.providers.registry import ProviderRegistry, adapt, extract
from goldphin_backend.providers.types import ChatResult, ProviderRequest, UpstreamReply

__all__ = ["ProviderRegistry", "adapt", "extract", "ChatResult", "ProviderRequest", "UpstreamReply"]
