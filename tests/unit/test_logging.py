"""Tests for logging configuration helpers."""

import io
import json
import logging
from unittest.mock import Mock

import pytest
import structlog

from market_ta.logging import (
    configure_logging,
    get_logger,
    get_signal_logger,
    log_signal_decision,
)
from market_ta.logging.config import PACKAGE_LOGGER, _build_processors


@pytest.fixture
def log_stream():
    """Route engine logging into a buffer and restore defaults afterwards."""
    stream = io.StringIO()
    yield stream
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "stream", None) is stream:
            root.removeHandler(handler)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)
    structlog.reset_defaults()


class TestBuildProcessors:
    """Test processor chain assembly."""

    def test_json_renderer_last(self):
        processors = _build_processors(True, True, False, None)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_last(self):
        processors = _build_processors(False, False, False, None)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_extra_processors_before_renderer(self):
        extra = Mock()
        processors = _build_processors(True, False, False, [extra])
        assert processors[-2] is extra


class TestConfigureLogging:
    """Test configure_logging."""

    def test_json_events_written_to_stream(self, log_stream):
        configure_logging(level="INFO", format_json=True, include_timestamp=False,
                          stream=log_stream)

        get_logger("market_ta.test").info("Engine ready", market_id="Java")

        event = json.loads(log_stream.getvalue().strip().splitlines()[-1])
        assert event["event"] == "Engine ready"
        assert event["market_id"] == "Java"
        assert event["level"] == "info"
        assert event["logger"] == "market_ta.test"

    def test_level_filters_debug(self, log_stream):
        configure_logging(level="INFO", format_json=True, stream=log_stream)

        get_logger("market_ta.quiet").debug("Not shown")

        assert log_stream.getvalue() == ""
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            configure_logging(level="LOUD")


def test_get_signal_logger_returns_logger():
    assert get_signal_logger("market_ta.signals.test") is not None


def test_log_signal_decision_binds_fields():
    """Test decision fields and context are bound before logging."""
    logger = Mock()
    bound = logger.bind.return_value
    with_context = bound.bind.return_value

    log_signal_decision(
        logger, "sentiment", "bullish", "all votes agree", context={"rsi": 75.0}
    )

    logger.bind.assert_called_once_with(
        signal_name="sentiment", label="bullish", reason="all votes agree"
    )
    bound.bind.assert_called_once_with(context={"rsi": 75.0})
    with_context.debug.assert_called_once_with("Signal classified")


def test_log_signal_decision_without_context():
    logger = Mock()
    bound = logger.bind.return_value

    log_signal_decision(logger, "trend", "sideways", "insufficient history")

    bound.bind.assert_not_called()
    bound.debug.assert_called_once_with("Signal classified")
