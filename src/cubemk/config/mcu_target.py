"""
MCU target detection from CubeMX source file names.

CubeMX generates a `<family>_hal_msp.c` file (e.g. `Src/stm32l4xx_hal_msp.c`)
in every project, so the MCU family can be read back from the C source list.
"""

import re
from typing import Iterable

_HAL_MSP_PATTERN = re.compile(r"^(?:.*[/\\])?([^/\\]+?)_hal_msp\.c$", re.IGNORECASE)


def get_target_mcu(c_sources: Iterable[str]) -> str:
    """
    Get the MCU family from the HAL MSP source file.

    Args:
        c_sources: C source file names as listed in the Makefile

    Returns:
        MCU family as written in the file name (e.g., 'stm32h7xx'),
        or empty string if no source follows the naming convention
    """
    target = ""
    for file_name in c_sources:
        match = _HAL_MSP_PATTERN.match(file_name.strip())
        if match:
            # Keep going, the last matching file wins
            target = match.group(1)
    return target
