"""Response models shared by the routers."""

from datetime import datetime
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel

from ...app import Application
from ...chat import ChatSession
from ...models import Attachment, Message


class CitationResponse(BaseModel):
    uri: str
    title: str


class AttachmentResponse(BaseModel):
    """Attachment summary; the payload itself is never echoed back."""

    name: str
    media_type: str
    binary: bool
    size: int


class MessageResponse(BaseModel):
    """Response model for a transcript message."""

    id: str
    role: str
    content: str
    timestamp: datetime
    attachments: list[AttachmentResponse] = []
    analysis: dict[str, Any] | None = None
    citations: list[CitationResponse] = []
    error_kind: str | None = None


def attachment_to_response(attachment: Attachment) -> AttachmentResponse:
    return AttachmentResponse(
        name=attachment.name,
        media_type=attachment.declared_media_type,
        binary=attachment.is_binary,
        size=len(attachment.encoded_payload),
    )


def message_to_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        role=message.role,
        content=message.content,
        timestamp=message.timestamp,
        attachments=[attachment_to_response(a) for a in message.attachments],
        analysis=message.structured_result.to_dict() if message.structured_result else None,
        citations=[CitationResponse(uri=c.uri, title=c.title) for c in message.citations],
        error_kind=message.error_kind,
    )


def get_session_or_404(app: Application, session_id: str) -> ChatSession:
    session = app.sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session
