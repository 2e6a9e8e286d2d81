"""Tests for the logging utilities module."""

import io
import logging
import os
from unittest.mock import patch

import pytest

from atlassian_jwt.utils.logging import (
    LOGGER_NAME,
    log_operation,
    mask_sensitive,
    setup_logging,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Test class for logger configuration."""

    def test_configures_level_and_stream(self, package_logger):
        stream = io.StringIO()

        logger = setup_logging(logging.INFO, stream=stream)
        logger.info("hello")

        assert logger is package_logger
        assert logger.level == logging.INFO
        assert "[INFO] [atlassian-jwt] hello" in stream.getvalue()

    def test_repeated_setup_keeps_one_handler(self, package_logger):
        before = len(package_logger.handlers)

        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(package_logger.handlers) == before + 1

    @patch.dict(os.environ, {"ATLASSIAN_JWT_DEBUG": "true"})
    def test_debug_env_forces_debug(self, package_logger):
        logger = setup_logging(logging.ERROR, stream=io.StringIO())

        assert logger.level == logging.DEBUG


class TestMaskSensitive:
    """Test class for secret masking."""

    @pytest.mark.parametrize(
        ("value", "keep_chars", "expected"),
        [
            (None, 4, "<empty>"),
            ("", 4, "<empty>"),
            ("short", 4, "*****"),
            ("eyJhbGciOiJIUzI1NiJ9.payload.signature", 4, "eyJh...ture"),
            ("abcdefghijklmnopqrstuvwxyz", 8, "abcdefgh...stuvwxyz"),
        ],
    )
    def test_mask_sensitive(self, value, keep_chars, expected):
        assert mask_sensitive(value, keep_chars) == expected


class TestLogOperation:
    """Test class for operation logging."""

    def test_success_logged_at_debug(self, caplog):
        logger = logging.getLogger("atlassian-jwt.test")

        with caplog.at_level(logging.DEBUG, logger="atlassian-jwt.test"):
            with log_operation(logger, "sign", trace_id="abc123", issuer="addon"):
                pass

        messages = [record.getMessage() for record in caplog.records]
        assert messages[0] == "Operation started: sign [trace_id=abc123,issuer=addon]"
        assert messages[1].startswith("Operation completed: sign in ")

    def test_failure_logged_and_raised(self, caplog):
        logger = logging.getLogger("atlassian-jwt.test")

        with caplog.at_level(logging.DEBUG, logger="atlassian-jwt.test"):
            with pytest.raises(RuntimeError):
                with log_operation(logger, "sign"):
                    raise RuntimeError("boom")

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "Operation failed: sign" in errors[0].getMessage()
        assert errors[0].getMessage().endswith("- boom")
