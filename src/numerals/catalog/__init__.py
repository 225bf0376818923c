"""System Catalog — predefined numeral systems (static configuration data)."""

from .systems import NumeralSystem, get_system

__all__ = [
    "NumeralSystem",
    "get_system",
]
