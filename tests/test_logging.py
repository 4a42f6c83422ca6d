"""Tests for logging setup."""

import logging

import pytest

from taskboard.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("taskboard")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_off_by_default(self):
        """No verbosity and no file means no logging."""
        assert setup_logging() is None

    def test_file_handler(self, tmp_path):
        """A log file gets the startup banner."""
        log_file = tmp_path / "logs" / "taskboard.log"

        logger = setup_logging(log_file=log_file)

        assert logger is not None
        assert logger.level == logging.INFO
        for handler in logger.handlers:
            handler.flush()
        assert "taskboard starting" in log_file.read_text()

    def test_debug_level(self, tmp_path):
        """-vv turns on DEBUG, httpx included."""
        logger = setup_logging(verbose=2, log_file=tmp_path / "debug.log")

        assert logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_repeat_calls_replace_handlers(self, tmp_path):
        """Calling twice does not stack handlers."""
        setup_logging(log_file=tmp_path / "a.log")
        logger = setup_logging(log_file=tmp_path / "b.log")

        assert len(logger.handlers) == 1
