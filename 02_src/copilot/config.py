"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError, QuotaHint

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

TRANSPORT_ANTHROPIC = "anthropic"
TRANSPORT_HTTP = "http"

DEFAULT_MODELS = {
    TRANSPORT_ANTHROPIC: "claude-3-5-haiku-latest",
    TRANSPORT_HTTP: "google/gemini-2.0-flash-001",
}
DEFAULT_API_KEY_ENVS = {
    TRANSPORT_ANTHROPIC: "ANTHROPIC_API_KEY",
    TRANSPORT_HTTP: "OPENROUTER_API_KEY",
}
DEFAULT_HTTP_ENDPOINT = "https://openrouter.ai/api/v1/chat/completions"


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Runtime settings for the copilot core."""

    transport: str = TRANSPORT_ANTHROPIC
    model: str = DEFAULT_MODELS[TRANSPORT_ANTHROPIC]
    api_key_env: str = DEFAULT_API_KEY_ENVS[TRANSPORT_ANTHROPIC]
    http_endpoint: str = DEFAULT_HTTP_ENDPOINT
    temperature: float = 0.2
    top_p: float | None = None
    max_tokens: int = 4096
    request_timeout: float = 60.0
    text_attachment_limit: int | None = None  # None = send text attachments unmodified
    quota_hint: QuotaHint = QuotaHint.WAIT
    use_search: bool = False
    app_url: str = "http://localhost:5173"
    app_title: str = "Strategic Sales Copilot"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from COPILOT_* environment variables."""
        transport = os.getenv("COPILOT_TRANSPORT", TRANSPORT_ANTHROPIC).strip().lower()
        if transport not in DEFAULT_MODELS:
            raise ConfigurationError(
                f"COPILOT_TRANSPORT must be one of {sorted(DEFAULT_MODELS)}, got {transport!r}"
            )

        quota_raw = os.getenv("COPILOT_QUOTA_HINT", QuotaHint.WAIT.value).strip().lower()
        try:
            quota_hint = QuotaHint(quota_raw)
        except ValueError:
            raise ConfigurationError(
                f"COPILOT_QUOTA_HINT must be 'wait' or 'reconfigure', got {quota_raw!r}"
            )

        limit = _env_int("COPILOT_TEXT_ATTACHMENT_LIMIT", None)
        if limit is not None and limit <= 0:
            limit = None

        return cls(
            transport=transport,
            model=os.getenv("COPILOT_MODEL") or DEFAULT_MODELS[transport],
            api_key_env=os.getenv("COPILOT_API_KEY_ENV") or DEFAULT_API_KEY_ENVS[transport],
            http_endpoint=os.getenv("COPILOT_HTTP_ENDPOINT") or DEFAULT_HTTP_ENDPOINT,
            temperature=_env_float("COPILOT_TEMPERATURE", 0.2),
            top_p=_env_float("COPILOT_TOP_P", None),
            max_tokens=_env_int("COPILOT_MAX_TOKENS", 4096),
            request_timeout=_env_float("COPILOT_REQUEST_TIMEOUT", 60.0),
            text_attachment_limit=limit,
            quota_hint=quota_hint,
            use_search=_env_bool("COPILOT_USE_SEARCH", False),
            app_url=os.getenv("COPILOT_APP_URL") or "http://localhost:5173",
            app_title=os.getenv("COPILOT_APP_TITLE") or "Strategic Sales Copilot",
        )
