"""Tests for compact Roman numeral validation."""
import pytest

from romanizer.common.config import COMPACT_ROMAN_PATTERN
from romanizer.common.validators import (
    InvalidRomanNumeral,
    is_valid_compact_roman,
    validate_compact_roman,
)


def test_pattern_is_standard_grammar():
    assert COMPACT_ROMAN_PATTERN == r"^M{0,4}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$"


@pytest.mark.parametrize(
    "roman",
    ["", "I", "III", "IV", "IX", "XL", "XC", "CD", "CM", "MCMXCIV", "MMXXIV", "MMMCMXCIX", "MMMM"],
)
def test_valid(roman):
    assert is_valid_compact_roman(roman) is True


@pytest.mark.parametrize(
    "roman",
    [
        # Too many repeats
        "IIII",
        "XXXX",
        "CCCC",
        "MMMMM",
        # Repeated V, L, D
        "VV",
        "LL",
        "DD",
        # Invalid subtractive pairs
        "VX",
        "IC",
        "IL",
        "IM",
        "XD",
        # Case, whitespace and foreign characters
        "iv",
        "Iv",
        " IV",
        "IV\n",
        "XIIA",
        "123",
    ],
)
def test_invalid(roman):
    assert is_valid_compact_roman(roman) is False


@pytest.mark.parametrize("value", [None, 4, ["IV"], b"IV"])
def test_non_string_is_invalid(value):
    assert is_valid_compact_roman(value) is False


def test_validate_accepts_valid_numeral():
    validate_compact_roman("XLII")


def test_validate_raises_with_name():
    with pytest.raises(InvalidRomanNumeral) as excinfo:
        validate_compact_roman("VX", "Chapter number")

    assert excinfo.value.roman == "VX"
    assert "Chapter number is not a valid compact Roman numeral" in str(excinfo.value)


def test_invalid_roman_numeral_is_value_error():
    with pytest.raises(ValueError):
        validate_compact_roman("IIII")
