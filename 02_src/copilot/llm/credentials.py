"""Process-wide API credential, re-read on every request."""

import os

from ..logging_config import get_logger

logger = get_logger(__name__)


class CredentialStore:
    """
    Holds the interactively selected API key.

    Falls back to the environment variable at resolve time, so a key set
    or changed mid-session takes effect on the next request without a
    restart. Transports must call ``resolve()`` per request and never
    keep the result.
    """

    def __init__(self, env_var: str):
        self._env_var = env_var
        self._selected: str | None = None

    @property
    def env_var(self) -> str:
        return self._env_var

    def set(self, api_key: str) -> None:
        """Select a key interactively; overrides the environment."""
        api_key = api_key.strip()
        if not api_key:
            raise ValueError("API key must not be empty")
        self._selected = api_key
        logger.info("API credential selected interactively")

    def clear(self) -> None:
        """Invalidate the selected key (reload / reselect)."""
        self._selected = None
        logger.info("API credential cleared")

    def resolve(self) -> str | None:
        if self._selected:
            return self._selected
        return os.getenv(self._env_var) or None

    @property
    def is_configured(self) -> bool:
        return self.resolve() is not None
