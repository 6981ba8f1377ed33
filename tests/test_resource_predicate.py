"""
Tests for compiling the --resource flag into an entry filter.
"""

import pytest

from bundle_inspect.core.resource_predicate import (
    ResourceTableEntry,
    compileResourcePredicate,
    decodeLong,
    decodeResourceId,
    parseResourceFlag,
    toInt32,
)
from bundle_inspect.utils.exceptions import InvalidCommandException

ICON = ResourceTableEntry("drawable", "icon", 0x7F0E013A)
LOGO = ResourceTableEntry("drawable", "logo", 0x7F0E013B)
APP_NAME = ResourceTableEntry("string", "icon", 0x7F100000)
HIGH_BIT = ResourceTableEntry("id", "high", 0xFFFFFFFF)


class TestDecodeResourceId:

    @pytest.mark.parametrize("literal, expected", [
        ("0", 0),
        ("2131624250", 0x7F0E013A),
        ("0x7f0e013a", 0x7F0E013A),
        ("0X7F0E013A", 0x7F0E013A),
        ("#7f0e013a", 0x7F0E013A),
        ("+42", 42),
        ("-42", -42),
        ("010", 8),
        ("-0x10", -16),
    ])
    def test_numeric_literals(self, literal, expected):
        assert decodeResourceId(literal) == expected

    @pytest.mark.parametrize("literal", ["-1", "0xffffffff", "#FFFFFFFF", "0x1ffffffff"])
    def test_values_wrap_to_32_bits(self, literal):
        assert decodeResourceId(literal) == -1

    def test_high_bit_ids_are_negative(self):
        assert decodeResourceId("0x80000000") == -(2 ** 31)

    @pytest.mark.parametrize("literal", [
        "drawable/icon", "", "0x", "08", "1_000", " 12", "12 ", "0x-1", "--1", "1.0", "0x7fffffffffffffffff",
    ])
    def test_non_numbers(self, literal):
        assert decodeResourceId(literal) is None

    def test_64_bit_bounds(self):
        assert decodeLong("0x7fffffffffffffff") == 2 ** 63 - 1
        assert decodeLong("-0x8000000000000000") == -(2 ** 63)
        assert decodeLong("0x8000000000000000") is None

    def test_to_int32(self):
        assert toInt32(0x7F0E013A) == 0x7F0E013A
        assert toInt32(0xFFFFFFFF) == -1
        assert toInt32(2 ** 32) == 0


class TestParseResourceFlag:

    def test_absent(self):
        assert parseResourceFlag(None) == (None, None)

    def test_number_becomes_id(self):
        assert parseResourceFlag("0x7f0e013a") == (0x7F0E013A, None)

    def test_anything_else_becomes_name(self):
        assert parseResourceFlag("drawable/icon") == (None, "drawable/icon")
        assert parseResourceFlag("icon") == (None, "icon")


class TestCompileResourcePredicate:

    def test_no_filter_accepts_everything(self):
        predicate = compileResourcePredicate()
        assert all(predicate(e) for e in (ICON, LOGO, APP_NAME, HIGH_BIT))

    def test_hex_and_decimal_ids_match_the_same_entries(self):
        fromHex = compileResourcePredicate(resourceId=decodeResourceId("0x7f0e013a"))
        fromDecimal = compileResourcePredicate(resourceId=decodeResourceId("2131624250"))
        for entry in (ICON, LOGO, APP_NAME, HIGH_BIT):
            assert fromHex(entry) == fromDecimal(entry) == (entry is ICON)

    def test_negative_id_matches_high_bit_entry(self):
        predicate = compileResourcePredicate(resourceId=decodeResourceId("-1"))
        assert predicate(HIGH_BIT)
        assert not predicate(ICON)

    def test_name_matches_type_and_entry(self):
        predicate = compileResourcePredicate(resourceName="drawable/icon")
        assert predicate(ICON)
        assert not predicate(LOGO)
        assert not predicate(APP_NAME)

    def test_name_is_case_sensitive(self):
        predicate = compileResourcePredicate(resourceName="Drawable/Icon")
        assert not predicate(ICON)

    @pytest.mark.parametrize("name", ["icon", "drawable/", "/icon", "drawable/icon/extra", "a//b"])
    def test_malformed_name_is_rejected(self, name):
        with pytest.raises(InvalidCommandException, match="Resource name must match the format '<type>/<name>'"):
            compileResourcePredicate(resourceName=name)

    def test_id_and_name_together_are_rejected(self):
        with pytest.raises(InvalidCommandException, match="Pick one"):
            compileResourcePredicate(resourceId=1, resourceName="drawable/icon")
