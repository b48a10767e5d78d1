"""
Tests for logging configuration module.
"""

import logging
import tempfile
from pathlib import Path

import pytest

from brewup.common import format_command, vlog
from brewup.logging_config import (
    ColoredFormatter,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self):
        """Test default logging setup."""
        logger = setup_logging()
        assert logger.name == "brewup"
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_setup_logging_verbose(self):
        """Test verbose logging enables DEBUG level."""
        logger = setup_logging(verbose=True)
        assert logger.level == logging.DEBUG

    def test_setup_logging_quiet(self, capsys):
        """Test quiet mode hides progress but keeps errors."""
        logger = setup_logging(quiet=True)
        logger.info("progress")
        logger.error("failure")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "failure" in captured.err

    def test_streams_split_by_level(self, capsys):
        """Test info goes to stdout and errors go to stderr."""
        logger = setup_logging()
        logger.info("Upgrading priority packages: node")
        logger.error("Error executing brew upgrade")
        captured = capsys.readouterr()
        assert captured.out == "Upgrading priority packages: node\n"
        assert captured.err == "[ERROR] Error executing brew upgrade\n"

    def test_setup_logging_with_file(self):
        """Test logging to file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "subdir" / "test.log"
            logger = setup_logging(log_file=str(log_file))

            logger.info("Test message")
            logger.debug("Debug detail")

            content = log_file.read_text()
            assert "[INFO] brewup: Test message" in content
            assert "Debug detail" in content

            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()

    def test_repeated_setup_replaces_handlers(self):
        """Test calling setup twice does not duplicate handlers."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 2


class TestGetLogger:
    """Test logger retrieval."""

    def test_get_logger_singleton(self):
        """Test get_logger returns same instance."""
        assert get_logger() is get_logger()

    def test_get_logger_after_setup(self):
        """Test get_logger returns the configured logger."""
        logger = setup_logging(verbose=True)
        assert get_logger() is logger


class TestColoredFormatter:
    """Test console formatter."""

    def _record(self, level, msg):
        return logging.LogRecord(
            name="brewup", level=level, pathname="", lineno=0,
            msg=msg, args=(), exc_info=None,
        )

    @pytest.mark.parametrize("level,expected", [
        (logging.DEBUG, "[VERBOSE] hello"),
        (logging.INFO, "hello"),
        (logging.WARNING, "[WARNING] hello"),
        (logging.ERROR, "[ERROR] hello"),
    ])
    def test_plain_prefixes(self, level, expected):
        """Test level prefixes without colors."""
        formatter = ColoredFormatter(use_colors=False)
        assert formatter.format(self._record(level, "hello")) == expected

    def test_colors(self):
        """Test ANSI colors wrap the prefix only."""
        formatter = ColoredFormatter(use_colors=True)
        output = formatter.format(self._record(logging.ERROR, "hello"))
        assert output == "\033[31m[ERROR]\033[0m hello"

    def test_info_never_colored(self):
        """Test INFO stays plain even with colors on."""
        formatter = ColoredFormatter(use_colors=True)
        assert formatter.format(self._record(logging.INFO, "hello")) == "hello"


class TestVlog:
    """Tests for vlog and format_command."""

    def test_vlog_verbose(self, capsys):
        """Test vlog emits a verbose line when enabled."""
        setup_logging(verbose=True)
        vlog("trace", verbose=True)
        assert capsys.readouterr().out == "[VERBOSE] trace\n"

    def test_vlog_silent(self, capsys):
        """Test vlog is silent when disabled."""
        setup_logging(verbose=True)
        vlog("trace", verbose=False)
        assert capsys.readouterr().out == ""

    def test_format_command(self):
        """Test commands are space-joined."""
        assert format_command(("brew", "cleanup", "--prune=all")) == "brew cleanup --prune=all"
