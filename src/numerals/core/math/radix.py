"""
Radix arithmetic — digit extraction for positional and bijective notation

Both notations peel digits most-significant-first from a precomputed place
value. They differ only in how the digit count is derived and in the offset
applied before peeling.

FORMULAS:
    Positional (radix b >= 2, n >= 1):
        size   = floor(log_b(n)) + 1
        place  = b**(size - 1)

    Bijective (radix b >= 2, n >= 1):
        size   = floor(log_b((n + 1) * (b - 1)))
        offset = (b**size - 1) / (b - 1)
        digits = positional digits of (n - offset), zero-padded to size

    Strings of length k in bijective base b cover the values
    (b**k - 1)/(b - 1) .. (b**(k+1) - 1)/(b - 1) - 1, so subtracting the offset
    moves n into the 0-based range [0, b**size) and every peeled digit is a
    valid 0-based symbol index.
"""

from numerals.core.math.integer_safeguards import ilog


# =============================================================================
# DIGIT COUNTS
# =============================================================================


def positional_digit_count(n: int, radix: int) -> int:
    """
    Number of digits of n >= 1 in positional base radix.

    Examples:
        >>> positional_digit_count(9, 10)
        1
        >>> positional_digit_count(10, 10)
        2
    """
    return ilog(n, radix) + 1


def bijective_digit_count(n: int, radix: int) -> int:
    """
    Number of digits of n >= 1 in bijective base radix (radix >= 2).

    Examples:
        >>> bijective_digit_count(26, 26)
        1
        >>> bijective_digit_count(27, 26)
        2
        >>> bijective_digit_count(703, 26)
        3
    """
    return ilog((n + 1) * (radix - 1), radix)


def bijective_offset(size: int, radix: int) -> int:
    """
    Smallest value having size digits in bijective base radix.

    Equals 1 + radix + ... + radix**(size-1).
    """
    return (radix**size - 1) // (radix - 1)


# =============================================================================
# DIGIT EXTRACTION
# =============================================================================


def peel_digits(n: int, radix: int, size: int) -> list[int]:
    """
    Extract exactly size digits of n, most significant first.

    Args:
        n: Value in [0, radix**size)
        radix: Base
        size: Number of digits to emit (leading zeros included)

    Returns:
        Digit values, each in [0, radix)
    """
    digits: list[int] = []
    place = radix ** (size - 1)
    for _ in range(size):
        digit = n // place
        digits.append(digit)
        n -= digit * place
        place //= radix
    return digits


def positional_digits(n: int, radix: int) -> list[int]:
    """
    Positional digits of n >= 0, most significant first.

    Zero is the single digit [0].

    Examples:
        >>> positional_digits(0, 10)
        [0]
        >>> positional_digits(1994, 10)
        [1, 9, 9, 4]
        >>> positional_digits(5, 2)
        [1, 0, 1]
    """
    if n == 0:
        return [0]
    return peel_digits(n, radix, positional_digit_count(n, radix))


def bijective_digits(n: int, radix: int) -> list[int]:
    """
    0-based symbol indices of n >= 1 in bijective base radix.

    Index 0 stands for the digit worth 1. Radix 1 is unary: n copies of
    index 0.

    Examples:
        >>> bijective_digits(1, 26)
        [0]
        >>> bijective_digits(28, 26)
        [0, 1]
        >>> bijective_digits(3, 1)
        [0, 0, 0]
    """
    if radix == 1:
        return [0] * n

    size = bijective_digit_count(n, radix)
    return peel_digits(n - bijective_offset(size, radix), radix, size)
