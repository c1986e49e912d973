"""CLI utility functions for cubemk.

This module provides common utilities used by the CLI including:
- Logging setup
- Error handling and formatting
- Project path validation
"""

import logging
import sys
from pathlib import Path

from cubemk.config import MakefileInfoError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_HANDLER_NAME = "cubemk.console"


def setup_logging(verbose: bool = False) -> None:
    """Setup console logging for the CLI.

    Calling it again replaces the console handler instead of adding a
    second one.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.name == CONSOLE_HANDLER_NAME:
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message.

        Args:
            title: Error title (e.g., "Makefile not found")
            message: Error message details
        """
        print(file=sys.stderr)
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}", file=sys.stderr)
        print(file=sys.stderr)
        print(message, file=sys.stderr)
        print(file=sys.stderr)

    @staticmethod
    def print_warning(message: str) -> None:
        """Print formatted warning message."""
        print(file=sys.stderr)
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}", file=sys.stderr)

    @staticmethod
    def handle_makefile_error(error: MakefileInfoError) -> None:
        """Handle MakefileInfoError with standard formatting.

        Args:
            error: The MakefileInfoError to handle
        """
        ErrorFormatter.print_error("Error: Could not read Makefile information", str(error))
        print(
            "Make sure there is a Makefile and that the project is generated by STM32CubeMX.",
            file=sys.stderr,
        )
        sys.exit(1)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        ErrorFormatter.print_warning("Interrupted")
        sys.exit(130)  # Standard exit code for SIGINT

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:", file=sys.stderr)
            print(traceback.format_exc(), file=sys.stderr)

        sys.exit(1)


class PathValidator:
    """Validates project paths."""

    @staticmethod
    def validate_project_path(project_path: Path) -> None:
        """Validate that the project path exists.

        Args:
            project_path: Project directory or Makefile path

        Raises:
            SystemExit: If the path doesn't exist
        """
        if not project_path.exists():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path does not exist: {project_path}{ErrorFormatter.RESET}",
                file=sys.stderr,
            )
            sys.exit(2)
