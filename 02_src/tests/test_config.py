"""Tests for Settings and CredentialStore."""

import pytest

from copilot.config import DEFAULT_HTTP_ENDPOINT, Settings
from copilot.errors import ConfigurationError, QuotaHint
from copilot.llm import CredentialStore

ENV_VARS = [
    "COPILOT_TRANSPORT",
    "COPILOT_MODEL",
    "COPILOT_API_KEY_ENV",
    "COPILOT_HTTP_ENDPOINT",
    "COPILOT_TEMPERATURE",
    "COPILOT_TOP_P",
    "COPILOT_MAX_TOKENS",
    "COPILOT_REQUEST_TIMEOUT",
    "COPILOT_TEXT_ATTACHMENT_LIMIT",
    "COPILOT_QUOTA_HINT",
    "COPILOT_USE_SEARCH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettingsFromEnv:
    """Tests for Settings.from_env()."""

    def test_defaults(self):
        """Test defaults with an empty environment."""
        settings = Settings.from_env()

        assert settings.transport == "anthropic"
        assert settings.api_key_env == "ANTHROPIC_API_KEY"
        assert settings.temperature == 0.2
        assert settings.top_p is None
        assert settings.text_attachment_limit is None
        assert settings.quota_hint is QuotaHint.WAIT
        assert settings.use_search is False

    def test_http_transport_defaults(self, monkeypatch):
        """Test per-transport model and key defaults."""
        monkeypatch.setenv("COPILOT_TRANSPORT", "http")

        settings = Settings.from_env()

        assert settings.transport == "http"
        assert settings.api_key_env == "OPENROUTER_API_KEY"
        assert settings.http_endpoint == DEFAULT_HTTP_ENDPOINT
        assert "/" in settings.model

    def test_overrides(self, monkeypatch):
        """Test explicit values."""
        monkeypatch.setenv("COPILOT_MODEL", "claude-test")
        monkeypatch.setenv("COPILOT_TOP_P", "0.9")
        monkeypatch.setenv("COPILOT_REQUEST_TIMEOUT", "15")
        monkeypatch.setenv("COPILOT_TEXT_ATTACHMENT_LIMIT", "10000")
        monkeypatch.setenv("COPILOT_QUOTA_HINT", "reconfigure")
        monkeypatch.setenv("COPILOT_USE_SEARCH", "true")

        settings = Settings.from_env()

        assert settings.model == "claude-test"
        assert settings.top_p == 0.9
        assert settings.request_timeout == 15.0
        assert settings.text_attachment_limit == 10000
        assert settings.quota_hint is QuotaHint.RECONFIGURE
        assert settings.use_search is True

    def test_zero_limit_means_unbounded(self, monkeypatch):
        """Test that a non-positive limit disables truncation."""
        monkeypatch.setenv("COPILOT_TEXT_ATTACHMENT_LIMIT", "0")
        assert Settings.from_env().text_attachment_limit is None

    def test_unknown_transport(self, monkeypatch):
        """Test that an unknown transport is a configuration error."""
        monkeypatch.setenv("COPILOT_TRANSPORT", "carrier-pigeon")
        with pytest.raises(ConfigurationError):
            Settings.from_env()

    def test_unknown_quota_hint(self, monkeypatch):
        """Test that an unknown quota policy is a configuration error."""
        monkeypatch.setenv("COPILOT_QUOTA_HINT", "panic")
        with pytest.raises(ConfigurationError):
            Settings.from_env()

    def test_bad_number(self, monkeypatch):
        """Test that non-numeric values are rejected."""
        monkeypatch.setenv("COPILOT_TEMPERATURE", "warm")
        with pytest.raises(ConfigurationError, match="COPILOT_TEMPERATURE"):
            Settings.from_env()


class TestCredentialStore:
    """Tests for CredentialStore."""

    def test_env_fallback_read_at_call_time(self, monkeypatch):
        """Test that the environment is consulted on every resolve()."""
        monkeypatch.delenv("COPILOT_TEST_API_KEY", raising=False)
        store = CredentialStore("COPILOT_TEST_API_KEY")
        assert store.resolve() is None
        assert not store.is_configured

        monkeypatch.setenv("COPILOT_TEST_API_KEY", "from_env")

        assert store.resolve() == "from_env"
        assert store.is_configured

    def test_selected_key_overrides_env(self, monkeypatch):
        """Test that an interactively selected key wins."""
        monkeypatch.setenv("COPILOT_TEST_API_KEY", "from_env")
        store = CredentialStore("COPILOT_TEST_API_KEY")

        store.set("  selected  ")
        assert store.resolve() == "selected"

        store.clear()
        assert store.resolve() == "from_env"

    def test_empty_key_rejected(self):
        """Test that blank keys cannot be selected."""
        store = CredentialStore("COPILOT_TEST_API_KEY")
        with pytest.raises(ValueError):
            store.set("   ")
