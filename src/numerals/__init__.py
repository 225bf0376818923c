"""
numerals — render non-negative integers in numeral systems

    >>> from numerals import NumeralSystem, render
    >>> NumeralSystem.LOWER_ROMAN.apply(1994)
    'mcmxciv'
    >>> render(NumeralSystem.LOWER_LATIN.kind, 27)
    'aa'
"""

from numerals.catalog import NumeralSystem, get_system
from numerals.core.domain import (
    Additive,
    Bijective,
    Chinese,
    ChineseCase,
    ChineseVariant,
    MalformedSystemError,
    NonZeroableFixed,
    NumeralSystemKind,
    Positional,
    RepresentationError,
    RepresentationErrorKind,
    RepresentedNumber,
    Symbolic,
    TooLargeToRepresent,
    ZeroableFixed,
    ZeroNotRepresentable,
)
from numerals.engine import (
    DEFAULT_ENGINE_CONFIG,
    EngineConfig,
    NumeralEngine,
    check_definition,
    is_representable,
    render,
    render_lenient,
    render_many,
    render_represented,
    validate,
)

__all__ = [
    # Catalog
    "NumeralSystem",
    "get_system",
    # System kinds
    "NumeralSystemKind",
    "Positional",
    "Bijective",
    "Additive",
    "Symbolic",
    "ZeroableFixed",
    "NonZeroableFixed",
    "Chinese",
    "ChineseVariant",
    "ChineseCase",
    "RepresentedNumber",
    # Errors
    "RepresentationError",
    "RepresentationErrorKind",
    "ZeroNotRepresentable",
    "TooLargeToRepresent",
    "MalformedSystemError",
    # Engine
    "DEFAULT_ENGINE_CONFIG",
    "EngineConfig",
    "NumeralEngine",
    "check_definition",
    "is_representable",
    "render",
    "render_lenient",
    "render_many",
    "render_represented",
    "validate",
]
