"""
Core math modules for numerals

Exact integer primitives and digit arithmetic shared by the renderers.
"""

# Integer Safeguards
from numerals.core.math.integer_safeguards import (
    U64_MAX,
    ceil_div,
    ilog,
    is_u64,
    validate_u64,
)

# Radix arithmetic
from numerals.core.math.radix import (
    bijective_digit_count,
    bijective_digits,
    bijective_offset,
    peel_digits,
    positional_digit_count,
    positional_digits,
)

__all__ = [
    # Integer Safeguards — Constants
    "U64_MAX",
    # Integer Safeguards — Functions
    "ceil_div",
    "ilog",
    "is_u64",
    "validate_u64",
    # Radix — Functions
    "bijective_digit_count",
    "bijective_digits",
    "bijective_offset",
    "peel_digits",
    "positional_digit_count",
    "positional_digits",
]
