"""
Makefile loading utilities.

This module locates and reads the Makefile of a CubeMX project and runs the
extractor over it.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .makefile_fields import FieldValue, new_makefile_info
from .makefile_parser import MakefileInfoError, extract_makefile_info

MAKEFILE_NAME = "Makefile"


def resolve_makefile_path(location: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the Makefile path from a file or directory location.

    Args:
        location: Makefile path or project directory (default: ./Makefile)

    Returns:
        Path to the Makefile

    Example:
        resolve_makefile_path('/project')           # /project/Makefile
        resolve_makefile_path('/project/Makefile')  # /project/Makefile
    """
    if not location:
        return Path(".") / MAKEFILE_NAME

    path = Path(location)
    # Anything not naming a Makefile is taken as the project directory
    if MAKEFILE_NAME not in path.name:
        path = path / MAKEFILE_NAME
    return path


def load_makefile(makefile_path: Path) -> str:
    """
    Read the Makefile contents.

    Args:
        makefile_path: Path to the Makefile

    Returns:
        Makefile contents

    Raises:
        MakefileInfoError: If the file doesn't exist or cannot be read
    """
    if not makefile_path.is_file():
        raise MakefileInfoError(f"Makefile not found: {makefile_path}")

    try:
        return makefile_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MakefileInfoError(f"Failed to read {makefile_path}: {e}") from e


def get_makefile_info(
    location: Optional[Union[str, Path]] = None, strict: bool = False
) -> Dict[str, FieldValue]:
    """
    Get the build information of a CubeMX project from its Makefile.

    Args:
        location: Makefile path or project directory (default: ./Makefile)
        strict: Raise MakefileBlockError on unterminated blocks

    Returns:
        Dictionary of field identifier to extracted value

    Raises:
        MakefileInfoError: If the Makefile cannot be loaded
    """
    makefile_path = resolve_makefile_path(location)
    logging.info(f"Reading Makefile information from {makefile_path}")

    makefile = load_makefile(makefile_path)
    return extract_makefile_info(new_makefile_info(), makefile, strict=strict)
