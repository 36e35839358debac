"""
Tests for logging helpers.
"""

import json
import logging

from essay_grader.core.config import AppConfig, LoggingConfig
from essay_grader.utils.logging import (
    JSONFormatter, PerformanceTimer, _parse_size, get_session_logger, setup_logging
)


class TestParseSize:
    """Test cases for _parse_size."""

    def test_units(self):
        assert _parse_size("10MB") == 10 * 1024 ** 2
        assert _parse_size("1GB") == 1024 ** 3
        assert _parse_size("512KB") == 512 * 1024
        assert _parse_size("100B") == 100

    def test_invalid_defaults_to_10mb(self):
        assert _parse_size("lots") == 10 * 1024 ** 2


class TestLogging:
    """Test cases for logging setup and helpers."""

    def test_setup_logging_writes_file(self, temp_dir):
        log_file = temp_dir / "logs" / "test.log"
        config = AppConfig(logging=LoggingConfig(level="DEBUG", file=str(log_file)))
        setup_logging(config)

        logging.getLogger("essay_grader.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello file" in log_file.read_text(encoding='utf-8')

    def test_json_formatter_includes_context(self):
        record = logging.LogRecord(
            "essay_grader.session", logging.INFO, __file__, 1, "checked", None, None
        )
        record.content_id = "pets-1"
        entry = json.loads(JSONFormatter().format(record))
        assert entry['message'] == "checked"
        assert entry['content_id'] == "pets-1"
        assert entry['level'] == "INFO"

    def test_session_logger_adds_context(self):
        adapter = get_session_logger("pets-1", state_id="alice")
        msg, kwargs = adapter.process("hello", {})
        assert kwargs['extra'] == {'content_id': "pets-1", 'state_id': "alice"}

    def test_performance_timer(self):
        with PerformanceTimer("work") as timer:
            pass
        assert timer.duration is not None
        assert timer.duration >= 0
