"""Append-only conversation transcript."""

from ..models import Message


class Transcript:
    """Ordered Messages; insertion order is conversation order."""

    def __init__(self, messages: list[Message] | None = None):
        self._messages: list[Message] = list(messages or [])

    def append(self, message: Message) -> None:
        """Add a message to the end of the transcript."""
        self._messages.append(message)

    def messages(self) -> list[Message]:
        """Get a copy of all messages."""
        return self._messages.copy()

    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)
