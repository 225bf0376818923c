"""Positional renderer — big-endian place-value notation.

0 renders as the dedicated zero digit symbols[0]; otherwise digits are
peeled most-significant-first (see numerals.core.math.radix).
"""

from numerals.core.domain.numeral_system import Positional
from numerals.core.math.radix import positional_digits


def render_positional(system: Positional, n: int) -> str:
    """
    Render n >= 0 in positional notation.

    Examples:
        >>> render_positional(Positional(symbols=("0", "1", "2")), 5)
        '12'
    """
    symbols = system.symbols
    return "".join(symbols[digit] for digit in positional_digits(n, system.radix))
