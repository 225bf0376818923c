"""Fixed lookup renderers. Bounds are established by the validator."""

from numerals.core.domain.numeral_system import NonZeroableFixed, ZeroableFixed


def render_zeroable_fixed(system: ZeroableFixed, n: int) -> str:
    return system.symbols[n]


def render_non_zeroable_fixed(system: NonZeroableFixed, n: int) -> str:
    return system.symbols[n - 1]
