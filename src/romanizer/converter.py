"""Conversion between arabic numbers and Roman numerals.

Arabic numbers are first expanded into a purely additive (non-compact)
numeral such as VIIII, which is then compacted into standard subtractive
notation such as IX. Parsing goes the other way, scanning a numeral left
to right with one symbol of lookahead.

Examples:
    >>> to_non_compact_roman(9)
    'VIIII'
    >>> to_compact_roman(1994)
    'MCMXCIV'
    >>> to_arabic("MMXXIV")
    2024
"""
import logging
from typing import List

from pydantic import NonNegativeInt, StrictStr, TypeAdapter

from .common.config import MAX_CONVENTIONAL_VALUE
from .common.validators import is_valid_compact_roman, validate_compact_roman
from .numerals import Symbol, promote, sorted_descending, value_of

__all__ = [
    "compact_roman",
    "is_valid_compact_roman",
    "to_arabic",
    "to_arabic_strict",
    "to_compact_roman",
    "to_non_compact_roman",
]

logger = logging.getLogger(__name__)

_arabic_adapter = TypeAdapter(NonNegativeInt)
_roman_adapter = TypeAdapter(StrictStr)


def to_non_compact_roman(arabic: int) -> str:
    """Convert an arabic number to a purely additive Roman numeral.

    No subtractive pairs are produced, so 4 becomes IIII and 9 becomes
    VIIII. Values of 4000 and above are allowed; M simply repeats.

    Args:
        arabic: Non-negative integer to convert

    Returns:
        Non-compact Roman numeral string; empty for 0

    Raises:
        pydantic.ValidationError: If arabic is not a non-negative int
            (bools and floats are rejected too)
    """
    remaining = _arabic_adapter.validate_python(arabic, strict=True)

    parts = []
    for symbol, value in sorted_descending():
        count, remaining = divmod(remaining, value)
        parts.append(symbol.value * count)
    return "".join(parts)


def _is_run_of_four(roman: str, i: int) -> bool:
    # M is never compacted since there is nothing above it
    return (
        i >= 3
        and roman[i] != Symbol.M.value
        and roman[i] == roman[i - 1] == roman[i - 2] == roman[i - 3]
    )


def compact_roman(non_compact: str) -> str:
    """Rewrite a non-compact Roman numeral into subtractive notation.

    The numeral is scanned from right to left. Every run of four
    identical symbols (other than M) becomes a subtractive pair: IIII
    becomes IV. When the symbol just before the run is the promotion of
    the run's symbol, all five collapse together: VIIII becomes IX.

    Args:
        non_compact: Numeral as produced by to_non_compact_roman

    Returns:
        Compact Roman numeral string
    """
    segments: List[str] = []
    i = len(non_compact) - 1
    while i >= 0:
        if _is_run_of_four(non_compact, i):
            current = non_compact[i]
            if i >= 4 and promote(non_compact[i - 3]).value == non_compact[i - 4]:
                segment = current + promote(non_compact[i - 4]).value
                i -= 5
            else:
                segment = current + promote(non_compact[i - 3]).value
                i -= 4
            logger.debug("Compacted run of %s into %s", current, segment)
        else:
            segment = non_compact[i]
            i -= 1
        segments.append(segment)

    compact = "".join(reversed(segments))
    return compact if compact else non_compact


def to_compact_roman(arabic: int) -> str:
    """Convert an arabic number to a standard Roman numeral.

    Examples:
        >>> to_compact_roman(4)
        'IV'
        >>> to_compact_roman(3999)
        'MMMCMXCIX'
        >>> to_compact_roman(0)
        ''
    """
    non_compact = to_non_compact_roman(arabic)
    if arabic > MAX_CONVENTIONAL_VALUE:
        logger.debug(
            "Value %d exceeds %d; M will repeat beyond the compact grammar",
            arabic,
            MAX_CONVENTIONAL_VALUE,
        )
    return compact_roman(non_compact)


def to_arabic(roman: str) -> int:
    """Convert a Roman numeral string to an integer.

    The numeral is scanned left to right. A symbol followed by a larger
    one forms a subtractive pair (IV = 4) and both are consumed at once;
    anything else adds its own value.

    Parsing is permissive: the input is not checked against the compact
    grammar, so "IIII" parses as 4 and "IC" as 99. Use to_arabic_strict
    to reject such input.

    Args:
        roman: Uppercase Roman numeral string

    Returns:
        Integer value of the numeral; 0 for the empty string

    Raises:
        UnknownSymbol: If any character is not one of I, V, X, L, C, D, M
        pydantic.ValidationError: If roman is not a str
    """
    roman = _roman_adapter.validate_python(roman, strict=True)

    total = 0
    i = 0
    while i < len(roman):
        current = value_of(roman[i])
        if i + 1 < len(roman):
            following = value_of(roman[i + 1])
            if current < following:
                total += following - current
                i += 2
                continue
        total += current
        i += 1
    return total


def to_arabic_strict(roman: str) -> int:
    """Convert a compact Roman numeral to an integer, rejecting malformed input.

    Raises:
        InvalidRomanNumeral: If roman does not match the compact grammar
    """
    validate_compact_roman(roman)
    return to_arabic(roman)
