"""
Validator — is this number representable in this system?

Pure function of (system, n). Each kind has a fixed domain:

| Kind              | Domain                                       | Failure   |
|-------------------|----------------------------------------------|-----------|
| Positional        | n >= 0                                       | —         |
| Chinese           | n >= 0                                       | —         |
| Bijective         | n >= 1                                       | ZERO      |
| Symbolic          | n >= 1                                       | ZERO      |
| Additive          | n >= 1, or n == 0 with a trailing weight 0   | ZERO      |
| ZeroableFixed     | n < len(symbols)                             | TOO_LARGE |
| NonZeroableFixed  | 1 <= n <= len(symbols)                       | ZERO / TOO_LARGE |

Validation succeeds iff rendering succeeds: renderers only ever receive a
RepresentedNumber built here.
"""

from numerals.core.domain.errors import (
    ERROR_BY_KIND,
    RepresentationErrorKind,
)
from numerals.core.domain.numeral_system import (
    Additive,
    Bijective,
    Chinese,
    NonZeroableFixed,
    NumeralSystemKind,
    Positional,
    Symbolic,
    ZeroableFixed,
)
from numerals.core.domain.represented import RepresentedNumber
from numerals.core.math.integer_safeguards import validate_u64


def representation_error(
    system: NumeralSystemKind, n: int
) -> RepresentationErrorKind | None:
    """
    Reason n cannot be expressed in system, None if it can.

    Args:
        system: Numeral system definition
        n: Value in [0, 2**64 - 1]

    Returns:
        RepresentationErrorKind or None

    Raises:
        ValueError: If n is not a u64 integer
        TypeError: If system is not a known numeral system kind
    """
    validate_u64(n)

    if isinstance(system, (Positional, Chinese)):
        return None

    if isinstance(system, (Bijective, Symbolic)):
        return RepresentationErrorKind.ZERO if n == 0 else None

    if isinstance(system, Additive):
        if n == 0 and system.zero_symbol is None:
            return RepresentationErrorKind.ZERO
        return None

    if isinstance(system, ZeroableFixed):
        return RepresentationErrorKind.TOO_LARGE if n >= len(system.symbols) else None

    if isinstance(system, NonZeroableFixed):
        if n == 0:
            return RepresentationErrorKind.ZERO
        if n > len(system.symbols):
            return RepresentationErrorKind.TOO_LARGE
        return None

    raise TypeError(f"Unknown numeral system kind: {type(system).__name__}")


def is_representable(system: NumeralSystemKind, n: int) -> bool:
    """True if system can render n"""
    return representation_error(system, n) is None


def validate(system: NumeralSystemKind, n: int) -> RepresentedNumber:
    """
    Validate n against system.

    Returns:
        RepresentedNumber guaranteed renderable

    Raises:
        ZeroNotRepresentable: The system has no zero
        TooLargeToRepresent: n exceeds a fixed table
        ValueError: If n is not a u64 integer
    """
    reason = representation_error(system, n)
    if reason is not None:
        raise ERROR_BY_KIND[reason](n, system)
    return RepresentedNumber(system=system, value=n)
