from __future__ import annotations


class ProxyError(Exception):
    """Base error carrying the HTTP status the caller should see."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ChatValidationError(ProxyError):
    status_code = 400


class ConfigError(ProxyError):
    status_code = 400


class UnsupportedProviderError(ProxyError):
    status_code = 400

    def __init__(self, provider: object) -> None:
        super().__init__(f"Unsupported provider: {provider}")
        self.provider = provider


class UpstreamError(ProxyError):
    """Provider answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: object = None) -> None:
        super().__init__(message, status_code)
        self.body = body


class TransportError(ProxyError):
    status_code = 500
