"""Message-related data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from .analysis import StructuredResult

Role = Literal["user", "assistant", "system"]


@dataclass(frozen=True)
class Attachment:
    """A file selected for the next send.

    ``encoded_payload`` is base64 for binary kinds (image, PDF) and the
    decoded text otherwise.
    """

    name: str
    declared_media_type: str
    encoded_payload: str

    @property
    def is_binary(self) -> bool:
        return is_binary_media_type(self.declared_media_type)


@dataclass(frozen=True)
class Citation:
    """A web source the model attributed a claim to."""

    uri: str
    title: str


@dataclass(frozen=True)
class Message:
    """A single turn in the transcript. Never mutated after append."""

    id: str
    role: Role
    content: str
    timestamp: datetime
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)
    structured_result: StructuredResult | None = None
    citations: tuple[Citation, ...] = field(default_factory=tuple)
    error_kind: str | None = None  # set on assistant turns that report a failure


def is_binary_media_type(media_type: str) -> bool:
    """PDFs and images travel as base64; everything else as text."""
    lowered = (media_type or "").lower()
    return "pdf" in lowered or "image" in lowered
