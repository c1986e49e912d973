"""
Command-line interface for cubemk.

This module provides the `cubemk` CLI tool for reading build information
out of STM32CubeMX generated Makefiles.
"""

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from cubemk import __version__
from cubemk.cli_utils import ErrorFormatter, PathValidator, setup_logging
from cubemk.config import FieldValue, MakefileInfoError, get_makefile_info


@dataclass
class InfoArgs:
    """Arguments for the info command."""

    project_dir: Path
    makefile: Optional[Path] = None
    as_json: bool = False
    strict: bool = False
    verbose: bool = False


def format_report(makefile_info: Dict[str, FieldValue]) -> str:
    """Format extracted Makefile information for the terminal.

    Scalars are printed on one line, lists with one entry per line.
    """
    width = max((len(key) for key in makefile_info), default=0)

    lines = []
    for key, value in makefile_info.items():
        if isinstance(value, list):
            lines.append(f"{key:<{width}} : ({len(value)})")
            lines.extend(f"    {entry}" for entry in value)
        else:
            lines.append(f"{key:<{width}} : {value}")
    return "\n".join(lines)


def info_command(args: InfoArgs) -> None:
    """Print the build information of a CubeMX project.

    Examples:
        cubemk info                        # Makefile in current directory
        cubemk info path/to/project       # Makefile in project directory
        cubemk info -f build/Makefile     # Explicit Makefile
        cubemk info --json                # JSON output
    """
    location = args.makefile if args.makefile else args.project_dir

    try:
        makefile_info = get_makefile_info(location, strict=args.strict)
    except MakefileInfoError as e:
        ErrorFormatter.handle_makefile_error(e)
        return
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
        return
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)
        return

    if args.as_json:
        print(json.dumps(makefile_info, indent=2))
    else:
        print(format_report(makefile_info))


def main(argv: Optional[List[str]] = None) -> None:
    """cubemk - read build information from STM32CubeMX Makefiles."""
    parser = argparse.ArgumentParser(
        prog="cubemk",
        description="Read build information from STM32CubeMX generated Makefiles",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cubemk {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show build information extracted from the Makefile",
    )
    info_parser.add_argument(
        "project_dir",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Project directory (default: current directory)",
    )
    info_parser.add_argument(
        "-f",
        "--makefile",
        default=None,
        type=Path,
        help="Makefile path (default: PROJECT_DIR/Makefile)",
    )
    info_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the information as JSON",
    )
    info_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on multi-line blocks that are not terminated",
    )
    info_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Parse arguments
    parsed_args = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    setup_logging(parsed_args.verbose)

    # Execute command
    if parsed_args.command == "info":
        if parsed_args.makefile is None:
            PathValidator.validate_project_path(parsed_args.project_dir)
        info_args = InfoArgs(
            project_dir=parsed_args.project_dir,
            makefile=parsed_args.makefile,
            as_json=parsed_args.as_json,
            strict=parsed_args.strict,
            verbose=parsed_args.verbose,
        )
        info_command(info_args)


if __name__ == "__main__":
    main()
