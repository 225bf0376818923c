"""
Domain models and value objects.

Contains the numeral system kinds, the validated RepresentedNumber and the
representation error taxonomy.
"""

from numerals.core.domain.errors import (
    ERROR_BY_KIND,
    MalformedSystemError,
    RepresentationError,
    RepresentationErrorKind,
    TooLargeToRepresent,
    ZeroNotRepresentable,
)
from numerals.core.domain.numeral_system import (
    NUMERAL_SYSTEM_KINDS,
    Additive,
    Bijective,
    Chinese,
    ChineseCase,
    ChineseVariant,
    NonZeroableFixed,
    NumeralSystemKind,
    Positional,
    Symbolic,
    WeightedSymbol,
    ZeroableFixed,
)
from numerals.core.domain.represented import RepresentedNumber

__all__ = [
    # System kinds
    "NumeralSystemKind",
    "NUMERAL_SYSTEM_KINDS",
    "Positional",
    "Bijective",
    "Additive",
    "WeightedSymbol",
    "Symbolic",
    "ZeroableFixed",
    "NonZeroableFixed",
    "Chinese",
    "ChineseVariant",
    "ChineseCase",
    # Validated value
    "RepresentedNumber",
    # Errors
    "RepresentationErrorKind",
    "RepresentationError",
    "ZeroNotRepresentable",
    "TooLargeToRepresent",
    "MalformedSystemError",
    "ERROR_BY_KIND",
]
