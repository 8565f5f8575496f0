"""
Tests for logging setup — levels, formats, file output.
"""

import logging
from pathlib import Path

import pytest

from formkit.core.observability.logging_config import (
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def logger_name():
    name = "formkit.tests.logging"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestResolveLevel:
    def test_flags_win(self, monkeypatch):
        monkeypatch.setenv("FORMKIT_LOG_LEVEL", "ERROR")
        assert resolve_level(debug=True) == "DEBUG"
        assert resolve_level(verbose=True) == "INFO"

    def test_quiet(self, monkeypatch):
        monkeypatch.delenv("FORMKIT_LOG_LEVEL", raising=False)
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_then_default(self, monkeypatch):
        monkeypatch.setenv("FORMKIT_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"
        monkeypatch.delenv("FORMKIT_LOG_LEVEL")
        assert resolve_level() == "WARNING"


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_fallbacks(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("chatty") == logging.WARNING


class TestSetupLogging:
    def test_console_handler(self, logger_name):
        logger = setup_logging("INFO", logger_name=logger_name)
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.INFO
        assert logger.propagate is False

    def test_repeated_setup_replaces_handlers(self, logger_name):
        setup_logging("INFO", logger_name=logger_name)
        logger = setup_logging("DEBUG", logger_name=logger_name)
        assert len(logger.handlers) == 1
        assert "%(lineno)d" in logger.handlers[0].formatter._fmt

    def test_warning_format_is_minimal(self, logger_name):
        logger = setup_logging("WARNING", logger_name=logger_name)
        assert logger.handlers[0].formatter._fmt == "%(message)s"

    def test_file_output(self, logger_name, tmp_path: Path):
        log_file = tmp_path / "formkit.log"
        logger = setup_logging(
            "WARNING",
            log_file=str(log_file),
            log_file_level="DEBUG",
            logger_name=logger_name,
        )
        assert logger.level == logging.DEBUG
        logger.debug("field built")
        for handler in logger.handlers:
            handler.flush()
        assert "field built" in log_file.read_text()
