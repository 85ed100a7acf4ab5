"""Transport-agnostic request/response values."""

from dataclasses import dataclass, field
from typing import Literal, Union

from .messages import Citation

# "model" is mapped to the backend's own assistant role by each transport
TurnRole = Literal["user", "model"]


@dataclass(frozen=True)
class Turn:
    """A prior turn of the conversation."""

    role: TurnRole
    content: str


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class InlineDataPart:
    """Binary attachment sent inline (base64 payload)."""

    mime_type: str
    data: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


Part = Union[TextPart, InlineDataPart]


@dataclass(frozen=True)
class ModelRequest:
    """One composed request: history plus the multi-part current turn."""

    system_instruction: str
    history: tuple[Turn, ...]
    current_parts: tuple[Part, ...]
    use_search: bool = False


@dataclass(frozen=True)
class ModelResponse:
    raw_text: str
    citations: tuple[Citation, ...] = field(default_factory=tuple)
    model: str | None = None
