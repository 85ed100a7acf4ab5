"""Strategic Sales Copilot core."""

from .app import Application, IApplication
from .attachments import PendingAttachmentSlot, encode_attachment, encode_file
from .chat import ChatSession, SessionManager, Transcript, TranscriptBuilder
from .config import Settings
from .errors import (
    ConfigurationError,
    CopilotError,
    ExtractionFailure,
    QuotaExceeded,
    QuotaHint,
    TransportError,
    classify_error,
)
from .extraction import ExtractionOutcome, ExtractionResult, ResponseExtractor
from .llm import (
    AnthropicTransport,
    CredentialStore,
    HTTPChatTransport,
    IModelTransport,
    create_transport,
)
from .models import (
    Attachment,
    Chart,
    Citation,
    Insight,
    Message,
    Metric,
    ModelRequest,
    ModelResponse,
    StructuredResult,
)

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    # Models
    "Message",
    "Attachment",
    "Citation",
    "StructuredResult",
    "Metric",
    "Chart",
    "Insight",
    "ModelRequest",
    "ModelResponse",
    # Errors
    "CopilotError",
    "ConfigurationError",
    "QuotaExceeded",
    "TransportError",
    "ExtractionFailure",
    "QuotaHint",
    "classify_error",
    # Components
    "encode_attachment",
    "encode_file",
    "PendingAttachmentSlot",
    "Transcript",
    "TranscriptBuilder",
    "ChatSession",
    "SessionManager",
    "ResponseExtractor",
    "ExtractionOutcome",
    "ExtractionResult",
    "CredentialStore",
    "IModelTransport",
    "AnthropicTransport",
    "HTTPChatTransport",
    "create_transport",
]
