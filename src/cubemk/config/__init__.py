"""Makefile parsing modules for cubemk."""

from .makefile_fields import (
    DERIVED_FIELDS,
    MAKEFILE_INFO_FIELDS,
    FieldValue,
    new_makefile_info,
    to_makefile_key,
)
from .makefile_loader import get_makefile_info, load_makefile, resolve_makefile_path
from .makefile_parser import (
    BlockState,
    ExtractedValue,
    MakefileBlockError,
    MakefileInfoError,
    MultiLineBlockScanner,
    ValueKind,
    extract_field,
    extract_fields,
    extract_makefile_info,
    extract_multi_line_info,
    extract_single_line_info,
)
from .mcu_target import get_target_mcu

__all__ = [
    "FieldValue",
    "MAKEFILE_INFO_FIELDS",
    "DERIVED_FIELDS",
    "new_makefile_info",
    "to_makefile_key",
    "MakefileInfoError",
    "MakefileBlockError",
    "ValueKind",
    "ExtractedValue",
    "BlockState",
    "MultiLineBlockScanner",
    "extract_single_line_info",
    "extract_multi_line_info",
    "extract_field",
    "extract_fields",
    "extract_makefile_info",
    "get_target_mcu",
    "resolve_makefile_path",
    "load_makefile",
    "get_makefile_info",
]
