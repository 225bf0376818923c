"""Bijective renderer — place-value notation without a zero digit.

With symbols a..z this is spreadsheet column labelling:
1 → a, 26 → z, 27 → aa, 702 → zz, 703 → aaa.
"""

from numerals.core.domain.numeral_system import Bijective
from numerals.core.math.radix import bijective_digits


def render_bijective(system: Bijective, n: int) -> str:
    """
    Render n >= 1 in bijective base len(symbols).

    Examples:
        >>> render_bijective(Bijective(symbols=("A", "B", "C")), 7)
        'BA'
    """
    symbols = system.symbols
    return "".join(symbols[index] for index in bijective_digits(n, system.radix))
