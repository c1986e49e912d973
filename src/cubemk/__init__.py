"""
cubemk - build information extractor for STM32CubeMX Makefiles.
"""

from cubemk.config import (
    MakefileInfoError,
    extract_makefile_info,
    get_makefile_info,
    new_makefile_info,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MakefileInfoError",
    "extract_makefile_info",
    "get_makefile_info",
    "new_makefile_info",
]
