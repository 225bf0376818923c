"""Numeral Engine — validation and rendering of numbers in numeral systems.

- validator: domain of each system kind (ZERO / TOO_LARGE)
- renderers: positional, bijective, additive, symbolic, fixed, delegated
- engine: kind dispatch, strict/lenient/batch rendering
- definition_checks: debug-time preconditions of definitions
"""

from .config import (
    DEFAULT_ENGINE_CONFIG,
    STRICT_ENGINE_CONFIG,
    ChineseConverter,
    EngineConfig,
)
from .definition_checks import check_definition
from .engine import (
    NumeralEngine,
    render,
    render_lenient,
    render_many,
    render_represented,
)
from .validator import is_representable, representation_error, validate

__all__ = [
    "DEFAULT_ENGINE_CONFIG",
    "STRICT_ENGINE_CONFIG",
    "ChineseConverter",
    "EngineConfig",
    "NumeralEngine",
    "check_definition",
    "is_representable",
    "render",
    "render_lenient",
    "render_many",
    "render_represented",
    "representation_error",
    "validate",
]
