"""Error taxonomy and classification for model transport failures."""

import asyncio
from enum import Enum


class QuotaHint(str, Enum):
    """Which remediation the quota message recommends."""

    WAIT = "wait"
    RECONFIGURE = "reconfigure"


QUOTA_HINTS = {
    QuotaHint.WAIT: (
        "⚠️ Limite de cota atingido. O servidor está processando muitas requisições. "
        "Por favor, aguarde 15 segundos e tente novamente."
    ),
    QuotaHint.RECONFIGURE: (
        "⚠️ Limite de cota atingido para este modelo. Por favor, clique em "
        "'Configurar API Key' e selecione um projeto com faturamento ativo."
    ),
}
TRANSPORT_HINT = (
    "Erro de conexão com a inteligência. Verifique sua chave ou conexão e tente novamente."
)
CONFIGURATION_HINT = (
    "Nenhuma chave de API configurada. Clique em 'Configurar API Key' para selecionar uma."
)
EXTRACTION_HINT = "A resposta não trouxe um bloco de análise estruturada."

# Markers vendors put in error bodies/messages for rate or budget limits
_QUOTA_MARKERS = ("resource_exhausted", "rate_limit", "rate limit", "quota")


class CopilotError(Exception):
    """Base class for errors surfaced to the chat user."""

    kind = "error"
    default_hint = TRANSPORT_HINT

    def __init__(self, message: str = "", hint: str | None = None):
        super().__init__(message or self.default_hint)
        self.hint = hint or self.default_hint


class ConfigurationError(CopilotError):
    """No credential (or invalid settings); the request never left the process."""

    kind = "configuration"
    default_hint = CONFIGURATION_HINT


class QuotaExceeded(CopilotError):
    """Backend reported a rate or budget limit."""

    kind = "quota_exceeded"
    default_hint = QUOTA_HINTS[QuotaHint.WAIT]


class TransportError(CopilotError):
    """Network, HTTP or unexpected vendor failure."""

    kind = "transport"
    default_hint = TRANSPORT_HINT


class ExtractionFailure(CopilotError):
    """Structured block missing or malformed. Logged, never shown as an error."""

    kind = "extraction"
    default_hint = EXTRACTION_HINT


class BackendStatusError(Exception):
    """Non-success status reported by a backend, before classification."""

    def __init__(self, status_code: int | str | None, body: str = ""):
        super().__init__(f"Backend returned status {status_code}: {body[:500]}")
        self.status_code = status_code
        self.body = body


def _is_quota_failure(exc: BaseException) -> bool:
    status = getattr(exc, "status_code", None)
    if status is None:
        status = getattr(exc, "status", None)
    if status == 429 or str(status).upper() == "RESOURCE_EXHAUSTED":
        return True

    text = " ".join(
        part for part in (str(exc), getattr(exc, "body", None) or "") if isinstance(part, str)
    ).lower()
    if "429" in text:
        return True
    return any(marker in text for marker in _QUOTA_MARKERS)


def classify_error(
    exc: BaseException, quota_hint: QuotaHint = QuotaHint.WAIT
) -> CopilotError:
    """
    Map a transport-layer failure to the user-facing taxonomy.

    Pure: labels only, never retries or logs. Errors that are already
    classified pass through unchanged.
    """
    if isinstance(exc, CopilotError):
        return exc

    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return TransportError(f"Request timed out: {exc}")

    if _is_quota_failure(exc):
        return QuotaExceeded(str(exc), hint=QUOTA_HINTS[quota_hint])

    return TransportError(str(exc) or exc.__class__.__name__)


class SessionBusyError(RuntimeError):
    """A send was attempted while the session already has a request in flight."""


class EmptyMessageError(ValueError):
    """Nothing to send: no text and no pending attachment."""


class UnknownWorkflowError(KeyError):
    """Requested workflow id is not defined."""
