"""
Makefile information extractor.

This module extracts build information out of a STM32CubeMX generated
Makefile. Only the flat assignment subset written by CubeMX is supported:

    TARGET = blinky
    CPU = -mcpu=cortex-m4
    C_SOURCES =  \\
    Src/main.c \\
    Src/stm32f4xx_it.c

Single-line assignments become scalar strings, backslash-continued
assignments become lists of entries.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional

from .makefile_fields import DERIVED_FIELDS, FieldValue, to_makefile_key
from .mcu_target import get_target_mcu

CONTINUATION_MARKER = "\\"

_LINE_SEPARATOR = re.compile(r"\r\n|\r|\n")
_EMPTY_LINE = re.compile(r"^\s*$")
# A line starting with a letter (or a flag dash) and not ending in a marker
_BLOCK_END_LINE = re.compile(r"^-?[a-z].*\b$", re.IGNORECASE)
_TRAILING_MARKER = re.compile(r"(\s\\$)|(\s.$)")


class MakefileInfoError(Exception):
    """Exception raised when Makefile information cannot be obtained."""

    pass


class MakefileBlockError(MakefileInfoError):
    """Exception raised for a multi-line block that is never terminated."""

    pass


class ValueKind(Enum):
    """Shape of a value extracted from the Makefile."""

    ABSENT = "absent"
    SCALAR = "scalar"
    LIST = "list"


@dataclass(frozen=True)
class ExtractedValue:
    """Result of extracting a single field from the Makefile."""

    kind: ValueKind
    value: Optional[FieldValue] = None

    @classmethod
    def absent(cls) -> "ExtractedValue":
        """Value for a key not set in the Makefile."""
        return cls(ValueKind.ABSENT)

    @classmethod
    def scalar(cls, value: str) -> "ExtractedValue":
        """Value of a single-line assignment."""
        return cls(ValueKind.SCALAR, value)

    @classmethod
    def list_of(cls, entries: List[str]) -> "ExtractedValue":
        """Entries of a multi-line block, copied."""
        return cls(ValueKind.LIST, list(entries))

    @property
    def is_absent(self) -> bool:
        """True if the key was not set in the Makefile."""
        return self.kind is ValueKind.ABSENT


class BlockState(Enum):
    """States of the multi-line block scanner."""

    SEARCHING = "searching"
    COLLECTING = "collecting"
    TERMINATED = "terminated"


def split_lines(makefile: str) -> List[str]:
    """Split Makefile text on \\r\\n, \\r or \\n."""
    return _LINE_SEPARATOR.split(makefile)


def _assignment_pattern(makefile_key: str) -> "re.Pattern[str]":
    return re.compile(
        rf"^[ \t]*{re.escape(makefile_key)}[ \t]*=[ \t]*(.*)$", re.IGNORECASE
    )


def strip_continuation(line: str) -> str:
    """
    Strip the trailing continuation marker from a block line.

    Args:
        line: Raw line (e.g., 'Src/main.c \\')

    Returns:
        Line without its marker (e.g., 'Src/main.c')
    """
    return _TRAILING_MARKER.sub("", line)


class MultiLineBlockScanner:
    """
    State machine collecting the entries of a backslash-continued block.

    Lines are fed one by one. The scanner moves from SEARCHING to
    COLLECTING on a `KEY = \\` line, and from COLLECTING to TERMINATED on
    either a blank line (not collected) or a plain line without a
    continuation marker (collected). Once TERMINATED, further lines are
    ignored.

    Usage:
        scanner = MultiLineBlockScanner("c_sources")
        for line in split_lines(makefile):
            scanner.feed(line)
        entries = scanner.entries
    """

    def __init__(self, makefile_key: str):
        """
        Initialize the scanner.

        Args:
            makefile_key: Makefile key opening the block (e.g., 'c_sources')
        """
        self.makefile_key = makefile_key
        self.state = BlockState.SEARCHING
        self.start_index: Optional[int] = None
        self.end_index: Optional[int] = None
        self.entries: List[str] = []
        self._start_pattern = _assignment_pattern(makefile_key)
        self._line_index = -1

    def feed(self, line: str) -> BlockState:
        """
        Process the next line of the Makefile.

        Args:
            line: Next line, without line separator

        Returns:
            State of the scanner after this line
        """
        self._line_index += 1

        if self.state is BlockState.SEARCHING:
            match = self._start_pattern.match(line)
            # Only an assignment ending in a marker opens the block
            if match and CONTINUATION_MARKER in match.group(1):
                self.start_index = self._line_index
                self.state = BlockState.COLLECTING
        elif self.state is BlockState.COLLECTING:
            if _EMPTY_LINE.match(line):
                self._terminate()
            else:
                self.entries.append(strip_continuation(line))
                if _BLOCK_END_LINE.match(line):
                    self._terminate()

        return self.state

    def feed_all(self, lines: Iterable[str]) -> BlockState:
        """Feed every line, completing the full pass over the input."""
        for line in lines:
            self.feed(line)
        return self.state

    def _terminate(self) -> None:
        self.end_index = self._line_index
        self.state = BlockState.TERMINATED


def extract_single_line_info(makefile_key: str, makefile: str) -> Optional[str]:
    """
    Extract single line info from a Makefile.

    Args:
        makefile_key: Makefile key to extract (e.g., 'float-abi')
        makefile: Makefile contents

    Returns:
        Value of the last `KEY = value` line, or None if the key is not set

    Example:
        extract_single_line_info('cpu', 'CPU = -mcpu=cortex-m7')
        # Returns: '-mcpu=cortex-m7'
    """
    pattern = _assignment_pattern(makefile_key)

    value = None
    for line in split_lines(makefile):
        match = pattern.match(line)
        if match:
            value = match.group(1)
    return value


def extract_multi_line_info(
    makefile_key: str, makefile: str, strict: bool = False
) -> List[str]:
    """
    Extract multi-line info from a Makefile.

    Args:
        makefile_key: Makefile key to extract (e.g., 'c_sources')
        makefile: Makefile contents
        strict: Raise instead of returning a partial list when the block
            runs into the end of the file

    Returns:
        Block entries in file order, empty list if the key is not found

    Raises:
        MakefileBlockError: If strict and the block is never terminated
    """
    scanner = MultiLineBlockScanner(makefile_key)
    state = scanner.feed_all(split_lines(makefile))

    if state is BlockState.COLLECTING:
        message = (
            f"Multi-line block '{makefile_key}' starting at line "
            + f"{scanner.start_index + 1} is not terminated"
        )
        if strict:
            raise MakefileBlockError(message)
        logging.warning(f"{message}, keeping {len(scanner.entries)} entries")

    return scanner.entries


def extract_field(makefile_key: str, makefile: str, strict: bool = False) -> ExtractedValue:
    """
    Extract a field, deciding between scalar and list from the raw value.

    Args:
        makefile_key: Makefile key to extract
        makefile: Makefile contents
        strict: Passed on to extract_multi_line_info

    Returns:
        ExtractedValue tagged ABSENT, SCALAR or LIST
    """
    info = extract_single_line_info(makefile_key, makefile)
    if not info:
        return ExtractedValue.absent()

    if CONTINUATION_MARKER in info:
        return ExtractedValue.list_of(
            extract_multi_line_info(makefile_key, makefile, strict=strict)
        )
    return ExtractedValue.scalar(info)


def extract_fields(
    field_names: Iterable[str], makefile: str, strict: bool = False
) -> Dict[str, ExtractedValue]:
    """
    Extract every non-derived field from the Makefile.

    Args:
        field_names: camelCase field identifiers (e.g., 'cSources')
        makefile: Makefile contents
        strict: Passed on to extract_multi_line_info

    Returns:
        Dictionary of field identifier to ExtractedValue, in input order
    """
    fields = {}
    for field_name in field_names:
        if field_name in DERIVED_FIELDS:
            continue

        makefile_key = to_makefile_key(field_name)
        extracted = extract_field(makefile_key, makefile, strict=strict)
        logging.debug(f"Extracted {field_name} ({makefile_key}): {extracted.kind.value}")
        fields[field_name] = extracted
    return fields


def extract_makefile_info(
    info_def: Mapping[str, FieldValue], makefile: str, strict: bool = False
) -> Dict[str, FieldValue]:
    """
    Fill a configuration schema with the information found in a Makefile.

    The given schema is left untouched; a populated copy is returned.
    Fields missing from the Makefile keep their default value.

    Args:
        info_def: Field identifiers with their default values
            (see new_makefile_info())
        makefile: Makefile contents
        strict: Raise MakefileBlockError on unterminated blocks

    Returns:
        New dictionary with the extracted values

    Example:
        info = extract_makefile_info(new_makefile_info(), makefile)
        info['cpu']       # '-mcpu=cortex-m4'
        info['cSources']  # ['Src/main.c', 'Src/stm32f4xx_hal_msp.c']
        info['targetMCU'] # 'stm32f4xx'
    """
    makefile_info = {
        key: list(value) if isinstance(value, list) else value
        for key, value in info_def.items()
    }

    for field_name, extracted in extract_fields(makefile_info, makefile, strict).items():
        if not extracted.is_absent:
            makefile_info[field_name] = extracted.value

    if makefile_info.get("targetMCU") == "":
        c_sources = makefile_info.get("cSources", [])
        if isinstance(c_sources, str):
            c_sources = [c_sources]
        makefile_info["targetMCU"] = get_target_mcu(c_sources)

    return makefile_info
