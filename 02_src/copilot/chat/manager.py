"""Session registry."""

import uuid

from ..logging_config import get_logger
from .session import ChatSession

logger = get_logger(__name__)


class SessionManager:
    """Creates and tracks ChatSessions by id."""

    def __init__(self, session_factory):
        self._session_factory = session_factory
        self._sessions: dict[str, ChatSession] = {}

    def create(self) -> ChatSession:
        session_id = str(uuid.uuid4())
        session = self._session_factory(session_id)
        self._sessions[session_id] = session
        logger.info("Session created", extra={"context": {"session_id": session_id}})
        return session

    def get(self, session_id: str) -> ChatSession | None:
        return self._sessions.get(session_id)

    async def close(self, session_id: str) -> bool:
        """Drop a session, cancelling any in-flight call. The transcript goes with it."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        await session.cancel()
        logger.info("Session closed", extra={"context": {"session_id": session_id}})
        return True

    async def close_all(self) -> None:
        for session_id in list(self._sessions):
            await self.close(session_id)

    def __len__(self) -> int:
        return len(self._sessions)
