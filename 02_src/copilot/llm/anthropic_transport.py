"""Vendor SDK transport using the Anthropic Claude API."""

import anthropic

from ..errors import ConfigurationError, QuotaHint, classify_error
from ..logging_config import get_logger
from ..models import Citation, InlineDataPart, ModelRequest, ModelResponse, TextPart
from .credentials import CredentialStore

logger = get_logger(__name__)

WEB_SEARCH_TOOL = {"type": "web_search_20250305", "name": "web_search", "max_uses": 5}
DEFAULT_CITATION_TITLE = "Fonte externa"


class AnthropicTransport:
    """Anthropic Messages API with optional web-search grounding."""

    name = "anthropic"

    def __init__(
        self,
        credentials: CredentialStore,
        model: str = "claude-3-5-haiku-latest",
        temperature: float = 0.2,
        top_p: float | None = None,
        max_tokens: int = 4096,
        timeout: float | None = None,
        quota_hint: QuotaHint = QuotaHint.WAIT,
    ):
        self._credentials = credentials
        self.model = model
        self._temperature = temperature
        self._top_p = top_p
        self._max_tokens = max_tokens
        self._timeout = timeout
        self._quota_hint = quota_hint

        # Client is rebuilt whenever the resolved key changes
        self._client: anthropic.AsyncAnthropic | None = None
        self._client_key: str | None = None

    def _client_for(self, api_key: str) -> anthropic.AsyncAnthropic:
        if self._client is None or self._client_key != api_key:
            self._client = anthropic.AsyncAnthropic(
                api_key=api_key,
                max_retries=0,
                timeout=self._timeout,
            )
            self._client_key = api_key
        return self._client

    @staticmethod
    def _content_block(part) -> dict:
        if isinstance(part, TextPart):
            return {"type": "text", "text": part.text}
        if isinstance(part, InlineDataPart):
            source = {"type": "base64", "media_type": part.mime_type, "data": part.data}
            if "pdf" in part.mime_type.lower():
                return {"type": "document", "source": source}
            return {"type": "image", "source": source}
        raise TypeError(f"Unsupported request part: {part!r}")

    def _to_messages(self, request: ModelRequest) -> list[dict]:
        messages = [
            {"role": "assistant" if turn.role == "model" else "user", "content": turn.content}
            for turn in request.history
        ]
        # The Messages API requires the conversation to open with a user turn
        while messages and messages[0]["role"] == "assistant":
            messages.pop(0)

        messages.append(
            {
                "role": "user",
                "content": [self._content_block(part) for part in request.current_parts],
            }
        )
        return messages

    @staticmethod
    def _citations(content_blocks) -> tuple[Citation, ...]:
        seen: dict[str, Citation] = {}
        for block in content_blocks:
            for citation in getattr(block, "citations", None) or []:
                uri = getattr(citation, "url", None) or ""
                if not uri or uri in seen:
                    continue
                title = getattr(citation, "title", None) or DEFAULT_CITATION_TITLE
                seen[uri] = Citation(uri=uri, title=title)
        return tuple(seen.values())

    async def send(self, request: ModelRequest) -> ModelResponse:
        """Generate a reply using the Claude API."""
        api_key = self._credentials.resolve()
        if not api_key:
            raise ConfigurationError(f"{self._credentials.env_var} not set and no key selected")

        kwargs = {
            "model": self.model,
            "system": request.system_instruction,
            "messages": self._to_messages(request),
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }
        if self._top_p is not None:
            kwargs["top_p"] = self._top_p
        if request.use_search:
            kwargs["tools"] = [WEB_SEARCH_TOOL]

        try:
            response = await self._client_for(api_key).messages.create(**kwargs)
        except anthropic.APIError as e:
            raise classify_error(e, self._quota_hint) from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        returned_model = getattr(response, "model", None)
        return ModelResponse(
            raw_text=text,
            citations=self._citations(response.content),
            model=returned_model if isinstance(returned_model, str) else None,
        )
