# tests/unit/core/test_logging.py
"""Tests for structured logging configuration."""

import json
import logging

import pytest


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_get_logger_returns_logger(self) -> None:
        """get_logger returns a bound logger."""
        from elastisink.core.logging import get_logger

        logger = get_logger("test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "warning")
        assert hasattr(logger, "bind")

    def test_logger_outputs_structured(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode writes one JSON object per line to stderr."""
        from elastisink.core.logging import configure_logging, get_logger

        configure_logging(json_output=True)
        logger = get_logger("test")

        logger.info("test message", key="value")

        captured = capsys.readouterr()
        log_line = captured.err.strip().split("\n")[-1]
        data = json.loads(log_line)
        assert data["event"] == "test message"
        assert data["key"] == "value"
        assert data["level"] == "info"
        assert "_record" not in data

    def test_stdout_stays_clean(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Logs never mix into stdout, where docs and JSON output go."""
        from elastisink.core.logging import configure_logging, get_logger

        configure_logging(json_output=True)
        get_logger("test").warning("careful")

        assert capsys.readouterr().out == ""

    def test_logger_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Logger outputs human-readable in console mode."""
        from elastisink.core.logging import configure_logging, get_logger

        configure_logging(json_output=False)
        logger = get_logger("test")

        logger.info("test message", key="value")

        captured = capsys.readouterr()
        assert "test message" in captured.err
        assert not captured.err.strip().startswith("{")

    def test_stdlib_records_share_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Plain stdlib loggers go through the same JSON renderer."""
        from elastisink.core.logging import configure_logging

        configure_logging(json_output=True)
        logging.getLogger("some.library").warning("from stdlib")

        data = json.loads(capsys.readouterr().err.strip().split("\n")[-1])
        assert data["event"] == "from stdlib"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        from elastisink.core.logging import configure_logging, get_logger

        configure_logging(json_output=True, level="WARNING")
        get_logger("test").info("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_noisy_third_party_loggers_silenced(self) -> None:
        """HTTP client loggers stay at WARNING even in DEBUG mode."""
        from elastisink.core.logging import configure_logging

        configure_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        for name in ("elasticsearch", "elastic_transport", "urllib3"):
            assert logging.getLogger(name).level == logging.WARNING

    def test_noisy_loggers_follow_stricter_root(self) -> None:
        from elastisink.core.logging import configure_logging

        configure_logging(level="ERROR")

        assert logging.getLogger("urllib3").level == logging.ERROR
