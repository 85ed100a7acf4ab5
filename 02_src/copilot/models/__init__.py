"""Core data models for the Sales Copilot."""

from .analysis import Chart, Insight, Metric, StructuredResult
from .messages import Attachment, Citation, Message, is_binary_media_type
from .request import InlineDataPart, ModelRequest, ModelResponse, Part, TextPart, Turn

__all__ = [
    # Messages
    "Message",
    "Attachment",
    "Citation",
    "is_binary_media_type",
    # Dashboard payload
    "StructuredResult",
    "Metric",
    "Chart",
    "Insight",
    # Transport values
    "Turn",
    "TextPart",
    "InlineDataPart",
    "Part",
    "ModelRequest",
    "ModelResponse",
]
