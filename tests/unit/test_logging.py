"""Tests for structured logging configuration."""

import json
import logging
from io import StringIO
from unittest.mock import patch

import structlog

from src.core.logging import (
    QUIET_LOGGERS,
    bind_contextvars,
    build_processors,
    clear_contextvars,
    configure_logging,
    get_logger,
    is_development,
    resolve_log_level,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        """Reset structlog and logging configuration before each test."""
        structlog.reset_defaults()
        clear_contextvars()

    def test_configure_development_mode(self) -> None:
        """Should configure pretty-printed output in development mode."""
        configure_logging(development=True)
        logger = get_logger("test")
        # Should not raise
        logger.info("test message", key="value")

    def test_configure_production_mode(self) -> None:
        """Should configure JSON output in production mode."""
        configure_logging(development=False)
        logger = get_logger("test")
        logger.info("test message", key="value")

    def test_reads_log_level_environment_variable(self) -> None:
        """Should read LOG_LEVEL env var."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True)
            assert logging.getLogger().level == logging.DEBUG

    def test_lowercase_log_level_accepted(self) -> None:
        """Should accept a lowercase level name."""
        configure_logging(development=True, log_level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        """Should use INFO for an unrecognised level name."""
        configure_logging(development=True, log_level="CHATTY")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_third_party_loggers(self) -> None:
        """Should set server and HTTP client loggers to WARNING level."""
        configure_logging(development=True)
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestIsDevelopment:
    """Tests for is_development helper."""

    def test_defaults_to_development(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            assert is_development() is True

    def test_production_environment(self) -> None:
        with patch.dict("os.environ", {"ENVIRONMENT": "Production"}):
            assert is_development() is False

    def test_other_environment_is_development(self) -> None:
        with patch.dict("os.environ", {"ENVIRONMENT": "staging"}):
            assert is_development() is True


class TestResolveLogLevel:
    """Tests for level name resolution."""

    def test_explicit_name(self) -> None:
        assert resolve_log_level(" debug ") == logging.DEBUG

    def test_reads_environment_when_unset(self) -> None:
        with patch.dict("os.environ", {"LOG_LEVEL": "error"}):
            assert resolve_log_level() == logging.ERROR

    def test_unknown_name_is_info(self) -> None:
        assert resolve_log_level("CHATTY") == logging.INFO


class TestBuildProcessors:
    """Tests for the renderer at the end of the processor chain."""

    def test_development_ends_with_console_renderer(self) -> None:
        assert isinstance(build_processors(True)[-1], structlog.dev.ConsoleRenderer)

    def test_production_ends_with_json_renderer(self) -> None:
        processors = build_processors(False)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.processors.format_exc_info in processors


class TestProductionJsonOutput:
    """Tests for JSON output in production mode."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        clear_contextvars()

    def test_json_output_includes_bound_context(self) -> None:
        """Should emit JSON lines carrying bound context variables."""
        output = StringIO()
        handler = logging.StreamHandler(output)
        handler.setLevel(logging.INFO)

        configure_logging(development=False, log_level="INFO")
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)

        try:
            bind_contextvars(request_id="abc123")
            get_logger("test").info("blocks_served", count=3)
            handler.flush()

            lines = [line for line in output.getvalue().splitlines() if line]
            parsed = json.loads(lines[-1])
            assert parsed["event"] == "blocks_served"
            assert parsed["count"] == 3
            assert parsed["request_id"] == "abc123"
        finally:
            clear_contextvars()
            root_logger.removeHandler(handler)
