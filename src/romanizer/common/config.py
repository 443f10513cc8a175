"""Configuration constants for the romanizer package.

This module contains the fixed settings shared by the converter and the
validators:
- The compact Roman numeral grammar
- The conventional upper bound of Roman numerals
"""

# Standard subtractive notation, 0 (empty string) through 3999.
# Adapted from: https://stackoverflow.com/a/267405/5026036
COMPACT_ROMAN_PATTERN = r"^M{0,4}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$"

# Largest value with a conventional compact form (MMMCMXCIX).
# Larger values still convert, but M simply repeats.
MAX_CONVENTIONAL_VALUE = 3999
