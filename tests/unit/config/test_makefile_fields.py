"""
Unit tests for Makefile field definitions.
"""

import pytest

from cubemk.config.makefile_fields import (
    DERIVED_FIELDS,
    MAKEFILE_INFO_FIELDS,
    new_makefile_info,
    to_makefile_key,
)


class TestToMakefileKey:
    """Test camelCase to Makefile key conversion."""

    @pytest.mark.parametrize(
        "field_name,expected",
        [
            ("target", "target"),
            ("cpu", "cpu"),
            ("fpu", "fpu"),
            ("mcu", "mcu"),
            ("ldscript", "ldscript"),
            ("cSources", "c_sources"),
            ("cxxSources", "cxx_sources"),
            ("asmSources", "asm_sources"),
            ("cDefs", "c_defs"),
            ("cxxDefs", "cxx_defs"),
            ("asDefs", "as_defs"),
            ("cIncludes", "c_includes"),
            ("cxxIncludes", "cxx_includes"),
            ("asIncludes", "as_includes"),
            ("targetMCU", "target_mcu"),
        ],
    )
    def test_uniform_conversion(self, field_name, expected):
        """Test fields following the underscore convention."""
        assert to_makefile_key(field_name) == expected

    def test_float_abi_keeps_hyphen(self):
        """Test that floatAbi is the one key spelled with a hyphen."""
        assert to_makefile_key("floatAbi") == "float-abi"

    def test_deterministic(self):
        """Test that conversion gives the same result every time."""
        for field_name, _ in MAKEFILE_INFO_FIELDS:
            assert to_makefile_key(field_name) == to_makefile_key(field_name)

    def test_digits_form_own_word(self):
        """Test that digit runs are split from letters."""
        assert to_makefile_key("stm32Family") == "stm_32_family"

    def test_only_float_abi_has_hyphen(self):
        """Test that no other field maps to a hyphenated key."""
        hyphenated = [
            name for name, _ in MAKEFILE_INFO_FIELDS if "-" in to_makefile_key(name)
        ]
        assert hyphenated == ["floatAbi"]


class TestNewMakefileInfo:
    """Test default configuration schema creation."""

    def test_field_order(self):
        """Test that fields come out in declaration order."""
        info = new_makefile_info()
        assert list(info) == [name for name, _ in MAKEFILE_INFO_FIELDS]

    def test_default_shapes(self):
        """Test scalar and list defaults."""
        info = new_makefile_info()
        assert info["cpu"] == ""
        assert info["floatAbi"] == ""
        assert info["targetMCU"] == ""
        assert info["cSources"] == []
        assert info["asIncludes"] == []

    def test_fresh_lists_per_call(self):
        """Test that defaults are not shared between calls."""
        first = new_makefile_info()
        first["cSources"].append("Src/main.c")

        second = new_makefile_info()
        assert second["cSources"] == []

    def test_target_mcu_is_derived(self):
        """Test that targetMCU is marked as derived."""
        assert "targetMCU" in DERIVED_FIELDS
