"""
Makefile field definitions.

This module defines the fields extracted from a STM32CubeMX generated
Makefile and the mapping between their camelCase identifiers (used in the
structured output) and the keys as they are spelled in the Makefile.
"""

import re
from typing import Dict, List, Tuple, Union

FieldValue = Union[str, List[str]]

# Field identifiers in output order, with the shape of their default value
MAKEFILE_INFO_FIELDS: Tuple[Tuple[str, type], ...] = (
    ("target", str),
    ("cpu", str),
    ("targetMCU", str),
    ("fpu", str),
    ("floatAbi", str),
    ("mcu", str),
    ("ldscript", str),
    ("cSources", list),
    ("cxxSources", list),
    ("asmSources", list),
    ("cDefs", list),
    ("cxxDefs", list),
    ("asDefs", list),
    ("cIncludes", list),
    ("cxxIncludes", list),
    ("asIncludes", list),
)

# Fields that are never read from the Makefile directly
DERIVED_FIELDS = frozenset({"targetMCU"})

# CubeMX spells this one key with a hyphen instead of an underscore
FLOAT_ABI_KEY = "float-abi"

_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")


def new_makefile_info() -> Dict[str, FieldValue]:
    """
    Create a fresh configuration schema filled with default values.

    Every call returns new list objects, so callers can never share state
    through the defaults.

    Returns:
        Ordered dict of field identifier to default value ('' or [])
    """
    return {name: shape() for name, shape in MAKEFILE_INFO_FIELDS}


def to_makefile_key(field_name: str) -> str:
    """
    Convert a camelCase field identifier to its Makefile key.

    Args:
        field_name: Field identifier (e.g., 'cSources', 'targetMCU')

    Returns:
        Makefile key in lower case (e.g., 'c_sources', 'target_mcu')

    Example:
        to_makefile_key('asmSources')  # 'asm_sources'
        to_makefile_key('floatAbi')    # 'float-abi'
    """
    words = _WORD_PATTERN.findall(field_name)
    makefile_key = "-".join(word.lower() for word in words).replace("-", "_")

    if makefile_key == "float_abi":
        return FLOAT_ABI_KEY
    return makefile_key
