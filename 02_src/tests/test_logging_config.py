"""Tests for structured logging."""

import json
import logging

from copilot.logging_config import JSONFormatter, get_logger, setup_logging


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_formats_record_as_json(self):
        """Test the basic fields."""
        record = logging.LogRecord(
            name="copilot.test",
            level=logging.WARNING,
            pathname=__file__,
            lineno=10,
            msg="Structured block rejected: %s",
            args=("trailing comma",),
            exc_info=None,
        )
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "copilot.test"
        assert data["message"] == "Structured block rejected: trailing comma"
        assert "context" not in data

    def test_includes_context(self):
        """Test that extra context is emitted."""
        record = logging.LogRecord(
            name="copilot.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="Session created",
            args=(),
            exc_info=None,
        )
        record.context = {"session_id": "s1", "resumo": "ação"}
        data = json.loads(JSONFormatter().format(record))

        assert data["context"] == {"session_id": "s1", "resumo": "ação"}

    def test_session_id_is_lifted_to_top_level(self):
        """Test that the session id is searchable without unpacking context."""
        record = logging.LogRecord(
            name="copilot.chat.session",
            level=logging.ERROR,
            pathname=__file__,
            lineno=10,
            msg="Model call failed",
            args=(),
            exc_info=None,
        )
        record.context = {"session_id": "s42", "kind": "quota_exceeded"}
        data = json.loads(JSONFormatter().format(record))

        assert data["session_id"] == "s42"
        assert data["context"]["kind"] == "quota_exceeded"

    def test_no_session_id_without_session_context(self):
        """Test that records outside a session carry no session_id field."""
        record = logging.LogRecord(
            name="copilot.extraction.extractor",
            level=logging.WARNING,
            pathname=__file__,
            lineno=10,
            msg="Structured block rejected",
            args=(),
            exc_info=None,
        )
        record.context = {"outcome": "parse_failure", "block_count": 1}
        data = json.loads(JSONFormatter().format(record))

        assert "session_id" not in data
        assert data["context"]["outcome"] == "parse_failure"


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_writes_to_log_file(self, tmp_path):
        """Test that records land in the rotating file as JSON."""
        log_file = tmp_path / "logs" / "app.log"
        root = logging.getLogger()
        previous_handlers = root.handlers[:]
        previous_level = root.level
        try:
            setup_logging(log_level="debug", log_file=str(log_file))
            get_logger("copilot.test").info("hello")
            for handler in root.handlers:
                handler.flush()

            lines = log_file.read_text(encoding="utf-8").strip().splitlines()
            assert json.loads(lines[-1])["message"] == "hello"
        finally:
            for handler in root.handlers[:]:
                if handler not in previous_handlers:
                    root.removeHandler(handler)
                    handler.close()
            for handler in previous_handlers:
                if handler not in root.handlers:
                    root.addHandler(handler)
            root.setLevel(previous_level)
