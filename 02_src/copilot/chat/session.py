"""ChatSession: one conversation with the copilot."""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import Protocol

from ..attachments import PendingAttachmentSlot
from ..errors import (
    CopilotError,
    EmptyMessageError,
    QuotaHint,
    SessionBusyError,
    TransportError,
    UnknownWorkflowError,
    classify_error,
)
from ..extraction import IResponseExtractor
from ..llm import IModelTransport
from ..logging_config import get_logger
from ..models import Attachment, Message, ModelResponse, StructuredResult
from .builder import TranscriptBuilder
from .prompts import ATTACHMENT_ONLY_PROMPT, WELCOME_MESSAGE, WORKFLOWS
from .transcript import Transcript

logger = get_logger(__name__)


def _new_message(role: str, content: str, **kwargs) -> Message:
    return Message(
        id=str(uuid.uuid4()),
        role=role,
        content=content,
        timestamp=datetime.now(timezone.utc),
        **kwargs,
    )


class IChatSession(Protocol):
    """A single sequential conversation."""

    async def send(
        self, text: str = "", attachment: Attachment | None = None, use_search: bool | None = None
    ) -> Message | None:
        """Append the user turn, call the model, append exactly one reply. Return the reply."""
        ...

    async def cancel(self) -> bool:
        """Abort the in-flight request without appending a reply."""
        ...


class ChatSession:
    """Sequential conversation: at most one model call in flight."""

    def __init__(
        self,
        session_id: str,
        transport: IModelTransport,
        builder: TranscriptBuilder,
        extractor: IResponseExtractor,
        request_timeout: float | None = None,
        quota_hint: QuotaHint = QuotaHint.WAIT,
        use_search: bool = False,
        welcome_message: str | None = WELCOME_MESSAGE,
    ):
        self.id = session_id
        self._transport = transport
        self._builder = builder
        self._extractor = extractor
        self._request_timeout = request_timeout
        self._quota_hint = quota_hint
        self._use_search = use_search

        self._transcript = Transcript()
        if welcome_message:
            self._transcript.append(_new_message("assistant", welcome_message))

        self._pending = PendingAttachmentSlot()
        self._analysis: StructuredResult | None = None
        self._inflight: asyncio.Task | None = None
        self._cancel_requested = False

    @property
    def busy(self) -> bool:
        return self._inflight is not None

    @property
    def analysis(self) -> StructuredResult | None:
        """Structured result currently shown on the dashboard."""
        return self._analysis

    @property
    def pending_attachment(self) -> Attachment | None:
        return self._pending.attachment

    def messages(self) -> list[Message]:
        return self._transcript.messages()

    def set_pending_attachment(self, attachment: Attachment) -> None:
        self._pending.put(attachment)

    def clear_pending_attachment(self) -> None:
        self._pending.clear()

    async def send(
        self, text: str = "", attachment: Attachment | None = None, use_search: bool | None = None
    ) -> Message | None:
        """Send a user turn and return the appended assistant message.

        Returns None when the request was cancelled; nothing is appended then.
        """
        if self.busy:
            raise SessionBusyError(f"Session {self.id} already has a request in flight")

        text = (text or "").strip()
        if not text and attachment is None and self._pending.attachment is None:
            raise EmptyMessageError("Nothing to send")

        # The pending file is consumed by this send whether or not it succeeds
        if attachment is None:
            attachment = self._pending.take()
        else:
            self._pending.clear()
        if not text:
            text = ATTACHMENT_ONLY_PROMPT.format(name=attachment.name)

        user_message = _new_message(
            "user", text, attachments=(attachment,) if attachment is not None else ()
        )
        self._transcript.append(user_message)

        logger.info(
            "Message received: %s...",
            text[:100],
            extra={"context": {"session_id": self.id, "attachment": bool(attachment)}},
        )

        request = self._builder.build(
            self._transcript.messages(),
            attachment=attachment,
            use_search=self._use_search if use_search is None else use_search,
        )

        self._cancel_requested = False
        self._inflight = asyncio.create_task(self._transport.send(request))
        try:
            response: ModelResponse = await asyncio.wait_for(
                self._inflight, timeout=self._request_timeout
            )
        except asyncio.CancelledError:
            if not self._cancel_requested:
                raise
            logger.info("Request cancelled", extra={"context": {"session_id": self.id}})
            return None
        except asyncio.TimeoutError:
            return self._append_error(
                TransportError(f"No response within {self._request_timeout}s")
            )
        except Exception as e:
            return self._append_error(classify_error(e, self._quota_hint))
        finally:
            self._inflight = None

        return self._append_reply(response)

    def _append_reply(self, response: ModelResponse) -> Message:
        extraction = self._extractor.extract(response.raw_text)

        reply = _new_message(
            "assistant",
            extraction.narrative_text,
            structured_result=extraction.structured_result,
            citations=response.citations,
        )
        self._transcript.append(reply)
        if extraction.structured_result is not None:
            self._analysis = extraction.structured_result

        logger.debug(
            "Reply appended: %s...",
            reply.content[:50],
            extra={"context": {"session_id": self.id, "outcome": extraction.outcome.value}},
        )
        return reply

    def _append_error(self, error: CopilotError) -> Message:
        logger.error(
            "Model call failed (%s): %s",
            error.kind,
            error,
            extra={"context": {"session_id": self.id, "kind": error.kind}},
        )
        message = _new_message("assistant", error.hint, error_kind=error.kind)
        self._transcript.append(message)
        return message

    async def cancel(self) -> bool:
        """Cancel the in-flight call. Returns False when nothing was in flight."""
        task = self._inflight
        if task is None or task.done():
            return False
        self._cancel_requested = True
        task.cancel()
        return True

    async def start_workflow(self, workflow_id: str) -> Message | None:
        """Clear the dashboard and send the workflow's canned prompt."""
        workflow = WORKFLOWS.get(workflow_id)
        if workflow is None:
            raise UnknownWorkflowError(workflow_id)
        if self.busy:
            raise SessionBusyError(f"Session {self.id} already has a request in flight")

        self._analysis = None
        return await self.send(workflow.prompt)
