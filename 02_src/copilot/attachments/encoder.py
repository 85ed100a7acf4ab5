"""Turns a selected file into a transport-ready Attachment."""

import base64
import binascii
import mimetypes
from pathlib import Path

from ..logging_config import get_logger
from ..models import Attachment, is_binary_media_type

logger = get_logger(__name__)

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def strip_data_uri(payload: str) -> str:
    """Keep only the payload of a ``data:<mime>;base64,<data>`` URI."""
    if payload.startswith("data:") and "," in payload:
        return payload.split(",", 1)[1]
    return payload


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        # Spreadsheet exports from Excel are frequently cp1252/latin-1
        return data.decode("latin-1")


def encode_attachment(name: str, media_type: str | None, data: bytes | str) -> Attachment:
    """
    Encode raw file content by its declared media type.

    Binary kinds (image, PDF) become base64 with any data-URI prefix
    stripped. Everything else becomes decoded text, unmodified: size
    policy for text is applied when the request is composed.
    """
    media_type = media_type or mimetypes.guess_type(name)[0] or DEFAULT_MEDIA_TYPE

    if is_binary_media_type(media_type):
        if isinstance(data, bytes):
            payload = base64.b64encode(data).decode("ascii")
        else:
            payload = strip_data_uri(data.strip())
    else:
        if isinstance(data, str) and data.startswith("data:") and ";base64," in data[:200]:
            try:
                data = base64.b64decode(strip_data_uri(data), validate=True)
            except (binascii.Error, ValueError):
                logger.warning("Attachment %s looked like a data URI but is not base64", name)
        payload = _decode_text(data) if isinstance(data, bytes) else data

    logger.debug(
        "Encoded attachment",
        extra={"context": {"name": name, "media_type": media_type, "size": len(payload)}},
    )
    return Attachment(name=name, declared_media_type=media_type, encoded_payload=payload)


def encode_file(path: str | Path, media_type: str | None = None) -> Attachment:
    """Read a file from disk and encode it."""
    path = Path(path)
    return encode_attachment(path.name, media_type, path.read_bytes())


class PendingAttachmentSlot:
    """Holds at most one attachment until the next send consumes it."""

    def __init__(self):
        self._attachment: Attachment | None = None

    @property
    def attachment(self) -> Attachment | None:
        return self._attachment

    def put(self, attachment: Attachment) -> None:
        """Overwrite the slot; a previously selected file is discarded."""
        if self._attachment is not None:
            logger.debug("Discarding pending attachment %s", self._attachment.name)
        self._attachment = attachment

    def take(self) -> Attachment | None:
        """Consume the pending attachment, leaving the slot empty."""
        attachment, self._attachment = self._attachment, None
        return attachment

    def clear(self) -> None:
        self._attachment = None
