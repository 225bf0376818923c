"""Symbolic renderer — repeating cycling symbols.

With symbols A, B, C: 1 → A, 3 → C, 4 → AA, 6 → CC, 7 → AAA.
"""

from numerals.core.domain.numeral_system import Symbolic
from numerals.core.math.integer_safeguards import ceil_div


def render_symbolic(system: Symbolic, n: int) -> str:
    """Render n >= 1: symbol (n-1) mod k repeated ceil(n/k) times."""
    k = len(system.symbols)
    return system.symbols[(n - 1) % k] * ceil_div(n, k)
