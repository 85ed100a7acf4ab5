"""Model transport contract."""

from typing import Protocol

from ..models import ModelRequest, ModelResponse


class IModelTransport(Protocol):
    """Delivers one composed request to a backend.

    Raises ConfigurationError before any network call when no credential
    is available, QuotaExceeded on rate/budget limits and TransportError
    on anything else. Never retries.
    """

    name: str
    model: str

    async def send(self, request: ModelRequest) -> ModelResponse:
        """Send request and return raw text plus citations."""
        ...
