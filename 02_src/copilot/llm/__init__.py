"""LLM transport module."""

from ..config import TRANSPORT_ANTHROPIC, TRANSPORT_HTTP, Settings
from ..errors import ConfigurationError
from .anthropic_transport import AnthropicTransport
from .credentials import CredentialStore
from .http_transport import HTTPChatTransport
from .transport import IModelTransport


def create_transport(settings: Settings, credentials: CredentialStore) -> IModelTransport:
    """Select the transport variant named in settings."""
    if settings.transport == TRANSPORT_ANTHROPIC:
        return AnthropicTransport(
            credentials=credentials,
            model=settings.model,
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_tokens=settings.max_tokens,
            timeout=settings.request_timeout,
            quota_hint=settings.quota_hint,
        )
    if settings.transport == TRANSPORT_HTTP:
        return HTTPChatTransport(
            credentials=credentials,
            endpoint=settings.http_endpoint,
            model=settings.model,
            temperature=settings.temperature,
            top_p=settings.top_p,
            timeout=settings.request_timeout,
            quota_hint=settings.quota_hint,
            app_url=settings.app_url,
            app_title=settings.app_title,
        )
    raise ConfigurationError(f"Unknown transport {settings.transport!r}")


__all__ = [
    "AnthropicTransport",
    "CredentialStore",
    "HTTPChatTransport",
    "IModelTransport",
    "create_transport",
]
