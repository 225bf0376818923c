"""
Integer Safeguards — Exact integer primitives

Every numeral algorithm works on unsigned 64-bit inputs with exact integer
arithmetic:
- Input validation against the u64 domain
- Integer logarithm (floor) without floating point
- Ceiling division

CRITICAL INVARIANTS:
1. No float is ever involved (log/ceil are computed on ints)
2. bool is not accepted as a number
3. All operations are deterministic
"""

from typing import Final

# =============================================================================
# DOMAIN BOUNDS
# =============================================================================

# Largest value accepted by the engine (native unsigned 64-bit range)
U64_MAX: Final[int] = 2**64 - 1


# =============================================================================
# VALIDATION
# =============================================================================


def is_u64(value: object) -> bool:
    """
    Check that value is an int in [0, U64_MAX].

    Examples:
        >>> is_u64(0)
        True
        >>> is_u64(2**64)
        False
        >>> is_u64(True)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX


def validate_u64(value: object, name: str = "n") -> int:
    """
    Validate that value is an unsigned 64-bit integer.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Returns:
        value, unchanged

    Raises:
        ValueError: If value is not an int, is a bool, or is outside [0, U64_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > U64_MAX:
        raise ValueError(f"{name} must be <= {U64_MAX}, got {value}")

    return value


# =============================================================================
# INTEGER ARITHMETIC
# =============================================================================


def ilog(n: int, base: int) -> int:
    """
    Floor of log_base(n) computed exactly.

    Args:
        n: Argument, n >= 1
        base: Logarithm base, base >= 2

    Returns:
        Largest k such that base**k <= n

    Raises:
        ValueError: If n < 1 or base < 2

    Examples:
        >>> ilog(1, 10)
        0
        >>> ilog(999, 10)
        2
        >>> ilog(1000, 10)
        3
    """
    if n < 1:
        raise ValueError(f"ilog argument must be >= 1, got {n}")
    if base < 2:
        raise ValueError(f"ilog base must be >= 2, got {base}")

    k = 0
    power = base
    while power <= n:
        power *= base
        k += 1
    return k


def ceil_div(a: int, b: int) -> int:
    """
    Ceiling of a / b for a >= 0, b > 0.

    Examples:
        >>> ceil_div(7, 6)
        2
        >>> ceil_div(12, 6)
        2
    """
    return -(-a // b)
