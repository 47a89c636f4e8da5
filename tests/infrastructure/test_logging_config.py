"""Tests for logging configuration."""

import json
import logging

import pytest
import structlog

from product_sync.infrastructure.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore structlog defaults and the root logger after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode renders one JSON object per line."""
        configure_logging(level="INFO", json_format=True)
        structlog.get_logger().info("Service started", version="0.1.0")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "Service started"
        assert record["level"] == "info"
        assert record["version"] == "0.1.0"
        assert "timestamp" in record

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Messages below the configured level are dropped."""
        configure_logging(level="WARNING", json_format=True)
        logger = structlog.get_logger()
        logger.info("hidden")
        logger.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_bound_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Context variables are merged into every record."""
        configure_logging(json_format=True)
        structlog.contextvars.bind_contextvars(request_id="req-1")
        try:
            structlog.get_logger().info("with context")
        finally:
            structlog.contextvars.clear_contextvars()

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["request_id"] == "req-1"

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console mode renders the event text."""
        configure_logging(level="DEBUG")
        structlog.get_logger().debug("console event")
        assert "console event" in capsys.readouterr().err
