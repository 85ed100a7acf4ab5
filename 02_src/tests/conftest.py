"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_payload():
    """A dashboard payload in the wire shape the model is asked to emit."""
    return {
        "summary": "Receita cresceu 12% no mês.",
        "metrics": [
            {"label": "Receita", "value": "R$ 1,2 mi", "change": 12.0, "isPositive": True},
            {"label": "Churn", "value": 3.4},
        ],
        "charts": [
            {
                "type": "bar",
                "title": "Vendas por canal",
                "data": [{"name": "Online", "valor": 540}, {"name": "Loja", "valor": 320}],
                "keys": ["valor"],
            }
        ],
        "insights": [{"type": "positive", "text": "Canal online lidera."}],
        "recommendations": ["Aumentar investimento em mídia paga."],
    }


@pytest.fixture
def reply_with_block(sample_payload):
    """Raw model text: narrative followed by a fenced JSON block."""
    body = json.dumps(sample_payload, ensure_ascii=False, indent=2)
    return f"As vendas subiram no período.\n\n```json\n{body}\n```"


@pytest.fixture
def credentials(monkeypatch):
    """Credential store with an interactively selected key."""
    from copilot.llm import CredentialStore

    monkeypatch.delenv("COPILOT_TEST_API_KEY", raising=False)
    store = CredentialStore("COPILOT_TEST_API_KEY")
    store.set("test_key")
    return store


@pytest.fixture
def empty_credentials(monkeypatch):
    """Credential store with nothing configured."""
    from copilot.llm import CredentialStore

    monkeypatch.delenv("COPILOT_TEST_API_KEY", raising=False)
    return CredentialStore("COPILOT_TEST_API_KEY")


@pytest.fixture
def mock_transport():
    """Create mock model transport."""
    from copilot.models import ModelResponse

    transport = Mock()
    transport.name = "mock"
    transport.model = "mock-model"
    transport.send = AsyncMock(return_value=ModelResponse(raw_text="Test response"))
    return transport


@pytest.fixture
def builder():
    from copilot.chat import TranscriptBuilder

    return TranscriptBuilder()


@pytest.fixture
def extractor():
    from copilot.extraction import ResponseExtractor

    return ResponseExtractor()


@pytest.fixture
def session(mock_transport, builder, extractor):
    """Create ChatSession for testing."""
    from copilot.chat import ChatSession

    return ChatSession(
        session_id="session1",
        transport=mock_transport,
        builder=builder,
        extractor=extractor,
        request_timeout=5,
    )
