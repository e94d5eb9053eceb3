"""Tests for ciftiglobals module"""

from ..ciftiglobals import LoggingOutputSuppressor, logger


def test_logging_output_suppressor():
    handlers = list(logger.handlers)
    with LoggingOutputSuppressor():
        assert logger.handlers == []
    assert logger.handlers == handlers
