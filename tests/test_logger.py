"""Tests for the logging helpers."""

import logging

from lyocalc.logger import LOG_FORMAT, get_logger, reset_logger


class TestLogger:
    def test_cached(self):
        assert get_logger("lyocalc.test") is get_logger("lyocalc.test")
        reset_logger("lyocalc.test")

    def test_single_handler(self):
        logger = get_logger("lyocalc.test.handlers")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
        assert logger.propagate is False
        reset_logger("lyocalc.test.handlers")

    def test_reset_removes_handlers(self):
        logger = get_logger("lyocalc.test.reset")
        reset_logger("lyocalc.test.reset")
        assert logger.handlers == []

    def test_handler_format(self):
        logger = get_logger("lyocalc.test.format")
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT
        reset_logger("lyocalc.test.format")

    def test_level_argument(self):
        logger = get_logger("lyocalc.test.level", level=logging.DEBUG)
        assert logger.level == logging.DEBUG
        reset_logger("lyocalc.test.level")
