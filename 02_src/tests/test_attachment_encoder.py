"""Tests for attachment encoding."""

import base64

from copilot.attachments import (
    PendingAttachmentSlot,
    encode_attachment,
    encode_file,
    strip_data_uri,
)
from copilot.models import Attachment

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


class TestEncodeBinary:
    """Tests for image and PDF attachments."""

    def test_image_bytes_become_base64(self):
        """Test that image bytes are base64 encoded."""
        att = encode_attachment("grafico.png", "image/png", PNG_BYTES)

        assert att.is_binary
        assert att.encoded_payload == base64.b64encode(PNG_BYTES).decode("ascii")
        assert base64.b64decode(att.encoded_payload) == PNG_BYTES

    def test_image_data_uri_is_stripped(self):
        """Test that a data-URI prefix is removed."""
        payload = base64.b64encode(PNG_BYTES).decode("ascii")
        att = encode_attachment("grafico.png", "image/png", f"data:image/png;base64,{payload}")

        assert att.encoded_payload == payload
        assert not att.encoded_payload.startswith("data:")

    def test_pdf_is_binary(self):
        """Test that PDFs are base64 encoded."""
        att = encode_attachment("relatorio.pdf", "application/pdf", b"%PDF-1.7\n")

        assert att.is_binary
        assert base64.b64decode(att.encoded_payload) == b"%PDF-1.7\n"


class TestEncodeText:
    """Tests for textual attachments."""

    def test_csv_bytes_become_text(self):
        """Test that text files are decoded, not base64 encoded."""
        content = "mes,receita\njan,100\nfev,120\n"
        att = encode_attachment("vendas.csv", "text/csv", content.encode("utf-8"))

        assert not att.is_binary
        assert att.encoded_payload == content

    def test_text_data_uri_is_decoded(self):
        """Test that a base64 data URI for text ends up as plain text."""
        content = "canal,conversao\nonline,3.2\n"
        uri = "data:text/csv;base64," + base64.b64encode(content.encode()).decode()
        att = encode_attachment("canais.csv", "text/csv", uri)

        assert att.encoded_payload == content

    def test_latin1_fallback(self):
        """Test exports that are not UTF-8."""
        att = encode_attachment("vendas.csv", "text/csv", "região,total\n".encode("latin-1"))
        assert att.encoded_payload == "região,total\n"

    def test_utf8_bom_is_dropped(self):
        """Test that a UTF-8 BOM does not leak into the text."""
        att = encode_attachment("a.txt", "text/plain", "\ufeffolá".encode("utf-8"))
        assert att.encoded_payload == "olá"

    def test_text_is_not_truncated(self):
        """Test that the encoder applies no size limit."""
        content = "x" * 25_000
        att = encode_attachment("big.txt", "text/plain", content)
        assert len(att.encoded_payload) == 25_000


class TestMediaTypeResolution:
    """Tests for missing declared media types."""

    def test_guess_from_name(self):
        """Test that the media type is guessed from the file name."""
        assert encode_attachment("foto.png", None, PNG_BYTES).declared_media_type == "image/png"
        assert encode_attachment("dados.csv", None, b"a,b").declared_media_type == "text/csv"

    def test_encode_file(self, tmp_path):
        """Test reading a file from disk."""
        path = tmp_path / "vendas.csv"
        path.write_text("mes,total\njan,10\n", encoding="utf-8")

        att = encode_file(path)

        assert att.name == "vendas.csv"
        assert att.encoded_payload == "mes,total\njan,10\n"


class TestStripDataUri:
    """Tests for strip_data_uri()."""

    def test_plain_payload_unchanged(self):
        """Test that payloads without prefix are returned as-is."""
        assert strip_data_uri("QUJD") == "QUJD"

    def test_prefix_removed(self):
        """Test prefix removal."""
        assert strip_data_uri("data:application/pdf;base64,QUJD") == "QUJD"


class TestPendingAttachmentSlot:
    """Tests for the single pending attachment."""

    def test_put_overwrites(self):
        """Test that a new selection discards the previous one."""
        slot = PendingAttachmentSlot()
        first = Attachment(name="a.csv", declared_media_type="text/csv", encoded_payload="a")
        second = Attachment(name="b.csv", declared_media_type="text/csv", encoded_payload="b")

        slot.put(first)
        slot.put(second)

        assert slot.attachment is second

    def test_take_empties_slot(self):
        """Test that take() consumes the attachment."""
        slot = PendingAttachmentSlot()
        att = Attachment(name="a.csv", declared_media_type="text/csv", encoded_payload="a")
        slot.put(att)

        assert slot.take() is att
        assert slot.attachment is None
        assert slot.take() is None

    def test_clear(self):
        """Test discarding the pending attachment."""
        slot = PendingAttachmentSlot()
        slot.put(Attachment(name="a.csv", declared_media_type="text/csv", encoded_payload="a"))
        slot.clear()
        assert slot.attachment is None
