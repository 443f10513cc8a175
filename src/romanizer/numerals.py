"""Numeral table for the Roman numeral converter.

This module is the single source of truth for the seven canonical Roman
numeral symbols, their integer values, and the promotion ladder
(I -> V -> X -> L -> C -> D -> M) used when compacting numerals.

The table is a fixed constant: it is built once at import time and never
mutated, so it is safe to read from any number of threads.
"""
from enum import Enum
from typing import Dict, Final, Tuple, Union


class Symbol(str, Enum):
    """One of the seven canonical Roman numeral characters."""

    I = "I"
    V = "V"
    X = "X"
    L = "L"
    C = "C"
    D = "D"
    M = "M"


class UnknownSymbol(ValueError):
    """Raised when a character outside I, V, X, L, C, D, M is looked up."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Invalid Roman numeral character: {symbol!r}")


class NotPromotable(ValueError):
    """Raised when promotion is attempted on M, the largest symbol."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Roman numeral {symbol!r} has no higher symbol to promote to")


# Symbol values in ascending order
NUMERAL_VALUES: Final[Dict[Symbol, int]] = {
    Symbol.I: 1,
    Symbol.V: 5,
    Symbol.X: 10,
    Symbol.L: 50,
    Symbol.C: 100,
    Symbol.D: 500,
    Symbol.M: 1000,
}

# Same entries, largest first
SORTED_NUMERALS: Final[Tuple[Tuple[Symbol, int], ...]] = (
    (Symbol.M, 1000),
    (Symbol.D, 500),
    (Symbol.C, 100),
    (Symbol.L, 50),
    (Symbol.X, 10),
    (Symbol.V, 5),
    (Symbol.I, 1),
)

_PROMOTIONS: Final[Dict[Symbol, Symbol]] = {
    Symbol.I: Symbol.V,
    Symbol.V: Symbol.X,
    Symbol.X: Symbol.L,
    Symbol.L: Symbol.C,
    Symbol.C: Symbol.D,
    Symbol.D: Symbol.M,
}


def sorted_descending() -> Tuple[Tuple[Symbol, int], ...]:
    """Return the (symbol, value) entries sorted by value, largest first.

    Example:
        >>> sorted_descending()[0]
        (<Symbol.M: 'M'>, 1000)
    """
    return SORTED_NUMERALS


def _lookup(symbol: Union[Symbol, str]) -> Symbol:
    try:
        return Symbol(symbol)
    except ValueError:
        raise UnknownSymbol(symbol) from None


def value_of(symbol: Union[Symbol, str]) -> int:
    """Look up the integer value of a Roman numeral symbol.

    Args:
        symbol: A Symbol member or a single uppercase character

    Returns:
        Integer value of the symbol (e.g. 10 for "X")

    Raises:
        UnknownSymbol: If the symbol is not one of I, V, X, L, C, D, M

    Examples:
        >>> value_of("X")
        10
        >>> value_of(Symbol.M)
        1000
    """
    return NUMERAL_VALUES[_lookup(symbol)]


def promote(symbol: Union[Symbol, str]) -> Symbol:
    """Return the next symbol up the ladder I < V < X < L < C < D < M.

    Args:
        symbol: A Symbol member or a single uppercase character

    Returns:
        The promoted Symbol (e.g. Symbol.V for "I")

    Raises:
        UnknownSymbol: If the symbol is not one of the seven canonical symbols
        NotPromotable: If the symbol is M

    Examples:
        >>> promote("I")
        <Symbol.V: 'V'>
        >>> promote("D")
        <Symbol.M: 'M'>
    """
    canonical = _lookup(symbol)
    if canonical is Symbol.M:
        raise NotPromotable(canonical.value)
    return _PROMOTIONS[canonical]
