"""
Contract Validation Module

Validation of numeral system definitions supplied as plain data.
"""

from .validators import (
    NumeralSystemValidator,
    SchemaLoader,
    dump_numeral_system,
    load_numeral_system,
    validate_numeral_system,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "NumeralSystemValidator",
    # Functions
    "validate_numeral_system",
    "load_numeral_system",
    "dump_numeral_system",
]
