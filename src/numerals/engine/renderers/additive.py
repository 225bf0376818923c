"""
Additive renderer — sign-value notation by greedy decomposition

For each numeral (heaviest first) that still fits, emit it as many times as
it fits and subtract. Canonical forms such as Roman "iv" come out only
because subtractive pairs are listed explicitly ahead of their parts; the
renderer does no canonicalization of its own.

With [("V", 5), ("IV", 4), ("I", 1)]:
    1 → I, 3 → III, 4 → IV, 6 → VI, 8 → VIII
"""

from numerals.core.domain.numeral_system import Additive


def render_additive(system: Additive, n: int) -> str:
    """
    Render n by greedy decomposition over system.numerals.

    n == 0 renders the trailing weight-0 numeral (only reachable after
    validation proved it exists). An incomplete numeral list (no weight 1)
    yields a truncated string; check_definition() rejects such lists.
    """
    if n == 0:
        return system.numerals[-1].symbol

    parts: list[str] = []
    for numeral in system.numerals:
        weight = numeral.weight
        if weight == 0 or weight > n:
            continue
        reps = n // weight
        parts.append(numeral.symbol * reps)
        n -= weight * reps
        if n == 0:
            break
    return "".join(parts)
