"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .chat import ChatSession, SessionManager, TranscriptBuilder
from .config import Settings
from .extraction import ResponseExtractor
from .llm import CredentialStore, IModelTransport, create_transport
from .logging_config import get_logger

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Cancel in-flight requests and drop all sessions."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        credentials: CredentialStore | None = None,
        transport: IModelTransport | None = None,
    ):
        self._settings = settings or Settings.from_env()
        self._credentials = credentials or CredentialStore(self._settings.api_key_env)

        # Components (will be initialized in start())
        self._transport: IModelTransport | None = transport
        self._builder: TranscriptBuilder | None = None
        self._extractor: ResponseExtractor | None = None
        self._sessions: SessionManager | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Transport (reads the credential store per request)
        if self._transport is None:
            self._transport = create_transport(self._settings, self._credentials)
        logger.info(
            "Model transport initialized",
            extra={"context": {"transport": self._transport.name, "model": self._transport.model}},
        )

        # 2. Request composition and response extraction (stateless)
        self._builder = TranscriptBuilder(
            text_attachment_limit=self._settings.text_attachment_limit,
        )
        self._extractor = ResponseExtractor()

        # 3. Sessions (depend on everything above)
        self._sessions = SessionManager(self._new_session)
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Cancel in-flight requests and drop all sessions."""
        if self._sessions:
            await self._sessions.close_all()
            logger.info("Sessions closed")

    def _new_session(self, session_id: str) -> ChatSession:
        return ChatSession(
            session_id=session_id,
            transport=self._transport,
            builder=self._builder,
            extractor=self._extractor,
            request_timeout=self._settings.request_timeout,
            quota_hint=self._settings.quota_hint,
            use_search=self._settings.use_search,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def credentials(self) -> CredentialStore:
        return self._credentials

    @property
    def transport(self) -> IModelTransport:
        """Get transport instance."""
        if not self._transport:
            raise RuntimeError("Application not started")
        return self._transport

    @property
    def sessions(self) -> SessionManager:
        """Get session manager instance."""
        if not self._sessions:
            raise RuntimeError("Application not started")
        return self._sessions
