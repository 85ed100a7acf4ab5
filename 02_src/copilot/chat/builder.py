"""Converts the transcript into a transport-agnostic ModelRequest."""

from typing import Sequence

from ..models import (
    Attachment,
    InlineDataPart,
    Message,
    ModelRequest,
    Part,
    TextPart,
    Turn,
)
from .prompts import SYSTEM_INSTRUCTION


class TranscriptBuilder:
    """Builds one request per call; never mutates the transcript."""

    def __init__(
        self,
        system_instruction: str = SYSTEM_INSTRUCTION,
        text_attachment_limit: int | None = None,
    ):
        self._system_instruction = system_instruction
        self._text_attachment_limit = text_attachment_limit

    def build(
        self,
        messages: Sequence[Message],
        attachment: Attachment | None = None,
        use_search: bool = False,
    ) -> ModelRequest:
        """
        Compose history from every message but the last, and a multi-part
        current turn from the last (the just-appended user message).
        Error turns are UI notices, not model output, and are left out.
        """
        if not messages:
            raise ValueError("Cannot build a request from an empty transcript")

        history = tuple(
            Turn(role="model" if msg.role == "assistant" else "user", content=msg.content)
            for msg in messages[:-1]
            if msg.error_kind is None
        )

        current = messages[-1]
        text = current.content
        parts: list[Part] = []

        if attachment is not None:
            if attachment.is_binary:
                parts.append(TextPart(text))
                parts.append(
                    InlineDataPart(
                        mime_type=attachment.declared_media_type,
                        data=attachment.encoded_payload,
                    )
                )
            else:
                body = attachment.encoded_payload
                if self._text_attachment_limit is not None:
                    body = body[: self._text_attachment_limit]
                parts.append(TextPart(f"{text}\n\nDados do arquivo ({attachment.name}):\n{body}"))
        else:
            parts.append(TextPart(text))

        return ModelRequest(
            system_instruction=self._system_instruction,
            history=history,
            current_parts=tuple(parts),
            use_search=use_search,
        )
