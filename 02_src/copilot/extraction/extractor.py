"""Separates the narrative reply from the trailing fenced JSON block."""

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from ..errors import ExtractionFailure
from ..logging_config import get_logger
from ..models import StructuredResult
from .schema import SchemaError, validate_structured_payload

logger = get_logger(__name__)

# ```json ... ``` with any whitespace around a multi-line body; non-greedy so
# consecutive blocks are matched separately. The body never spans another
# ```json opener, so an unclosed draft fence cannot swallow the block after it.
FENCED_JSON_PATTERN = re.compile(
    r"```json\s*((?:(?!```json)[\s\S])*?)\s*```(?!json)", re.IGNORECASE
)


class ExtractionOutcome(str, Enum):
    SUCCESS = "success"
    NO_BLOCK = "no_block"
    PARSE_FAILURE = "parse_failure"


@dataclass(frozen=True)
class ExtractionResult:
    narrative_text: str
    structured_result: StructuredResult | None
    outcome: ExtractionOutcome
    failure: ExtractionFailure | None = None
    block_count: int = 0


class IResponseExtractor(Protocol):
    """Splits raw model text into narrative and dashboard payload."""

    def extract(self, raw_text: str) -> ExtractionResult:
        """Never raises on malformed model output."""
        ...


class ResponseExtractor:
    """Last-fenced-block-wins extractor that fails open to narrative-only."""

    def __init__(self, pattern: re.Pattern[str] = FENCED_JSON_PATTERN):
        self._pattern = pattern

    def extract(self, raw_text: str) -> ExtractionResult:
        matches = list(self._pattern.finditer(raw_text))
        if not matches:
            return ExtractionResult(
                narrative_text=raw_text,
                structured_result=None,
                outcome=ExtractionOutcome.NO_BLOCK,
            )

        # Models sometimes emit a draft block followed by a corrected one
        last = matches[-1]
        try:
            payload = json.loads(last.group(1).strip())
            structured = StructuredResult.from_dict(validate_structured_payload(payload))
        # ValueError covers JSONDecodeError, SchemaError and the int-digit limit;
        # RecursionError comes from pathologically deep nesting
        except (ValueError, RecursionError) as e:
            logger.warning(
                "Structured block rejected, falling back to narrative only: %s",
                e,
                extra={
                    "context": {
                        "outcome": ExtractionOutcome.PARSE_FAILURE.value,
                        "reason": str(e),
                        "block_count": len(matches),
                    }
                },
            )
            return ExtractionResult(
                narrative_text=raw_text,
                structured_result=None,
                outcome=ExtractionOutcome.PARSE_FAILURE,
                failure=ExtractionFailure(str(e)),
                block_count=len(matches),
            )

        narrative = (raw_text[: last.start()] + raw_text[last.end() :]).strip()
        logger.debug(
            "Extracted structured block",
            extra={"context": {"block_count": len(matches), "metrics": len(structured.metrics)}},
        )
        return ExtractionResult(
            narrative_text=narrative,
            structured_result=structured,
            outcome=ExtractionOutcome.SUCCESS,
            block_count=len(matches),
        )


def format_structured_block(result: StructuredResult) -> str:
    """Render a payload the way the model is asked to emit it."""
    body = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
    return f"```json\n{body}\n```"
