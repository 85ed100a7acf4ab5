"""Messaging API routes."""

from typing import Any

from fastapi import APIRouter, File, HTTPException, UploadFile
from pydantic import BaseModel

from ...app import Application
from ...attachments import encode_attachment
from ...errors import EmptyMessageError, SessionBusyError
from .schemas import (
    AttachmentResponse,
    MessageResponse,
    attachment_to_response,
    get_session_or_404,
    message_to_response,
)


class SessionResponse(BaseModel):
    session_id: str


class MessageRequest(BaseModel):
    """Request model for sending a message."""

    text: str = ""
    use_search: bool | None = None


class SendResponse(BaseModel):
    """Assistant reply, or cancelled=True when the user aborted."""

    message: MessageResponse | None = None
    cancelled: bool = False


class AnalysisResponse(BaseModel):
    analysis: dict[str, Any] | None = None


class StatusResponse(BaseModel):
    status: str


def create_messaging_router(app: Application) -> APIRouter:
    """Create messaging router."""
    router = APIRouter(prefix="/api/sessions", tags=["messaging"])

    @router.post("", response_model=SessionResponse)
    async def create_session() -> dict:
        """Start a new conversation."""
        session = app.sessions.create()
        return {"session_id": session.id}

    @router.delete("/{session_id}", response_model=StatusResponse)
    async def close_session(session_id: str) -> dict:
        if not await app.sessions.close(session_id):
            raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
        return {"status": "ok"}

    @router.get("/{session_id}/messages", response_model=list[MessageResponse])
    async def get_messages(session_id: str) -> list[MessageResponse]:
        session = get_session_or_404(app, session_id)
        return [message_to_response(m) for m in session.messages()]

    @router.post("/{session_id}/messages", response_model=SendResponse)
    async def send_message(session_id: str, request: MessageRequest) -> SendResponse:
        """Send a message (and the pending attachment, if any) to the copilot."""
        session = get_session_or_404(app, session_id)
        try:
            reply = await session.send(request.text, use_search=request.use_search)
        except SessionBusyError as e:
            raise HTTPException(status_code=409, detail=str(e))
        except EmptyMessageError as e:
            raise HTTPException(status_code=400, detail=str(e))

        if reply is None:
            return SendResponse(cancelled=True)
        return SendResponse(message=message_to_response(reply))

    @router.post("/{session_id}/attachment", response_model=AttachmentResponse)
    async def upload_attachment(session_id: str, file: UploadFile = File(...)) -> AttachmentResponse:
        """Select a file for the next send, replacing any pending one."""
        session = get_session_or_404(app, session_id)
        data = await file.read()
        attachment = encode_attachment(file.filename or "arquivo", file.content_type, data)
        session.set_pending_attachment(attachment)
        return attachment_to_response(attachment)

    @router.delete("/{session_id}/attachment", response_model=StatusResponse)
    async def discard_attachment(session_id: str) -> dict:
        session = get_session_or_404(app, session_id)
        session.clear_pending_attachment()
        return {"status": "ok"}

    @router.post("/{session_id}/cancel", response_model=StatusResponse)
    async def cancel_request(session_id: str) -> dict:
        """Abort the in-flight model call."""
        session = get_session_or_404(app, session_id)
        cancelled = await session.cancel()
        return {"status": "cancelled" if cancelled else "idle"}

    @router.get("/{session_id}/analysis", response_model=AnalysisResponse)
    async def get_analysis(session_id: str) -> dict:
        """Structured result currently backing the dashboard."""
        session = get_session_or_404(app, session_id)
        analysis = session.analysis
        return {"analysis": analysis.to_dict() if analysis else None}

    return router
