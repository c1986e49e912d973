"""Unit tests for CLI utilities."""

import logging

import pytest

from cubemk.cli_utils import (
    CONSOLE_HANDLER_NAME,
    ErrorFormatter,
    PathValidator,
    setup_logging,
)
from cubemk.config import MakefileInfoError


class TestErrorFormatter:
    """Tests for ErrorFormatter class."""

    def test_print_error(self, capsys):
        """Test that errors go to stderr with title and message."""
        ErrorFormatter.print_error("Something failed", "details here")
        captured = capsys.readouterr()

        assert captured.out == ""
        assert "Something failed" in captured.err
        assert "details here" in captured.err

    def test_handle_makefile_error_exits_1(self, capsys):
        """Test that Makefile errors exit with code 1."""
        with pytest.raises(SystemExit) as exc_info:
            ErrorFormatter.handle_makefile_error(MakefileInfoError("Makefile not found: x"))

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Makefile not found: x" in captured.err
        assert "STM32CubeMX" in captured.err

    def test_handle_keyboard_interrupt_exits_130(self):
        with pytest.raises(SystemExit) as exc_info:
            ErrorFormatter.handle_keyboard_interrupt()
        assert exc_info.value.code == 130

    def test_handle_unexpected_error_verbose(self, capsys):
        """Test that verbose mode prints a traceback."""
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            with pytest.raises(SystemExit) as exc_info:
                ErrorFormatter.handle_unexpected_error(e, verbose=True)

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "RuntimeError: boom" in captured.err
        assert "Traceback:" in captured.err


class TestPathValidator:
    """Tests for PathValidator class."""

    def test_existing_path(self, tmp_path):
        PathValidator.validate_project_path(tmp_path)

    def test_missing_path_exits_2(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            PathValidator.validate_project_path(tmp_path / "missing")
        assert exc_info.value.code == 2


class TestSetupLogging:
    """Tests for logging setup."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        logger = logging.getLogger()
        handlers = list(logger.handlers)
        level = logger.level
        yield
        logger.handlers = handlers
        logger.setLevel(level)

    def test_verbose_enables_debug(self):
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_is_warning(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_repeated_setup_keeps_one_console_handler(self):
        """Test that a second setup replaces the console handler."""
        setup_logging()
        setup_logging(verbose=True)

        console_handlers = [
            handler
            for handler in logging.getLogger().handlers
            if handler.name == CONSOLE_HANDLER_NAME
        ]
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.DEBUG
