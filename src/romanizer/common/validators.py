"""Validation utilities for the romanizer package.

This module checks strings against the compact Roman numeral grammar,
either as a plain predicate or as a validator that raises, so callers
can choose between testing input and rejecting it.
"""
import re

from .config import COMPACT_ROMAN_PATTERN

_COMPACT_ROMAN_RE = re.compile(COMPACT_ROMAN_PATTERN)


class InvalidRomanNumeral(ValueError):
    """Raised when a string is not a well-formed compact Roman numeral."""

    def __init__(self, roman: str, name: str = "Roman numeral"):
        self.roman = roman
        super().__init__(f"Error: {name} is not a valid compact Roman numeral: {roman!r}")


def is_valid_compact_roman(roman: str) -> bool:
    """Check whether a string is a well-formed compact Roman numeral.

    The string must match the standard subtractive notation grammar
    exactly. Lowercase letters, whitespace, over-long runs (IIII) and
    invalid subtractive pairs (IC, VX) are all rejected. The empty
    string is accepted and stands for zero.

    Args:
        roman: String to check

    Returns:
        True if the string matches the compact grammar, False otherwise.
        Never raises; values that are not strings yield False.

    Examples:
        >>> is_valid_compact_roman("MCMXCIV")
        True
        >>> is_valid_compact_roman("IIII")
        False
        >>> is_valid_compact_roman("")
        True
    """
    if not isinstance(roman, str):
        return False
    # fullmatch keeps "$" from accepting a trailing newline
    return _COMPACT_ROMAN_RE.fullmatch(roman) is not None


def validate_compact_roman(roman: str, name: str = "Roman numeral") -> None:
    """Validate that a string is a well-formed compact Roman numeral.

    Args:
        roman: String to validate
        name: Descriptive name for the value, used in error messages
              (e.g., "Chapter number", "Page label")

    Raises:
        InvalidRomanNumeral: If the string does not match the compact grammar

    Example:
        >>> validate_compact_roman("VX", "Chapter number")
        # Raises InvalidRomanNumeral
    """
    if not is_valid_compact_roman(roman):
        raise InvalidRomanNumeral(roman, name)
