"""Chat-completions transport for OpenRouter-compatible proxies."""

import httpx

from ..errors import (
    BackendStatusError,
    ConfigurationError,
    QuotaHint,
    TransportError,
    classify_error,
)
from ..logging_config import get_logger
from ..models import InlineDataPart, ModelRequest, ModelResponse, TextPart
from .credentials import CredentialStore

logger = get_logger(__name__)


class HTTPChatTransport:
    """Single POST per request; no citation support."""

    name = "http"

    def __init__(
        self,
        credentials: CredentialStore,
        endpoint: str,
        model: str,
        temperature: float = 0.2,
        top_p: float | None = None,
        timeout: float | None = None,
        quota_hint: QuotaHint = QuotaHint.WAIT,
        app_url: str | None = None,
        app_title: str | None = None,
        client_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._credentials = credentials
        self._endpoint = endpoint
        self.model = model
        self._temperature = temperature
        self._top_p = top_p
        self._timeout = timeout
        self._quota_hint = quota_hint
        self._app_url = app_url
        self._app_title = app_title
        self._client_transport = client_transport

    def _headers(self, api_key: str) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        # OpenRouter caller identification
        if self._app_url:
            headers["HTTP-Referer"] = self._app_url
        if self._app_title:
            headers["X-Title"] = self._app_title
        return headers

    @staticmethod
    def _content(parts) -> str | list[dict]:
        if len(parts) == 1 and isinstance(parts[0], TextPart):
            return parts[0].text

        content = []
        for part in parts:
            if isinstance(part, TextPart):
                content.append({"type": "text", "text": part.text})
            elif isinstance(part, InlineDataPart):
                content.append({"type": "image_url", "image_url": {"url": part.data_uri}})
            else:
                raise TypeError(f"Unsupported request part: {part!r}")
        return content

    def build_payload(self, request: ModelRequest) -> dict:
        messages = [{"role": "system", "content": request.system_instruction}]
        messages.extend(
            {"role": "assistant" if turn.role == "model" else "user", "content": turn.content}
            for turn in request.history
        )
        messages.append({"role": "user", "content": self._content(request.current_parts)})

        return {
            "model": self.model,
            "messages": messages,
            "temperature": self._temperature,
            "top_p": self._top_p if self._top_p is not None else 1.0,
        }

    async def send(self, request: ModelRequest) -> ModelResponse:
        api_key = self._credentials.resolve()
        if not api_key:
            raise ConfigurationError(f"{self._credentials.env_var} not set and no key selected")

        if request.use_search:
            logger.debug("Search grounding is not supported by the HTTP transport, ignoring")

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._client_transport
            ) as client:
                response = await client.post(
                    self._endpoint,
                    json=self.build_payload(request),
                    headers=self._headers(api_key),
                )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {self._endpoint} timed out") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self._endpoint} failed: {e}") from e

        if response.is_error:
            raise classify_error(
                BackendStatusError(response.status_code, response.text), self._quota_hint
            )

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError("Backend returned a non-JSON body") from e

        # Proxies may answer 200 with an upstream error object
        error = body.get("error") if isinstance(body, dict) else None
        if error:
            code = error.get("code") if isinstance(error, dict) else None
            message = error.get("message", "") if isinstance(error, dict) else str(error)
            raise classify_error(BackendStatusError(code, message), self._quota_hint)

        try:
            text = body["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise TransportError("Backend response has no choices") from e

        returned_model = body.get("model")
        if returned_model and returned_model != self.model:
            logger.warning(
                "Backend substituted model %s for %s",
                returned_model,
                self.model,
                extra={"context": {"requested": self.model, "returned": returned_model}},
            )

        return ModelResponse(raw_text=text, model=returned_model)
