"""Response extraction module."""

from .extractor import (
    ExtractionOutcome,
    ExtractionResult,
    IResponseExtractor,
    ResponseExtractor,
    format_structured_block,
)
from .schema import SchemaError, validate_structured_payload

__all__ = [
    "ExtractionOutcome",
    "ExtractionResult",
    "IResponseExtractor",
    "ResponseExtractor",
    "format_structured_block",
    "SchemaError",
    "validate_structured_payload",
]
