"""
Definition checks — debug-time preconditions of system definitions

Pydantic enforces the shape of a definition (types, minimum table sizes,
non-negative weights). What it does not enforce is checked here:
- Positional/Bijective/Symbolic digits must be distinct
- Additive weights strictly decreasing, weight 0 only as the last entry
- Additive list complete: the smallest positive weight is 1, otherwise the
  greedy decomposition leaves a remainder and silently truncates the output

The engine runs these only when EngineConfig.check_definitions is set.
"""

import logging

from numerals.core.domain.errors import MalformedSystemError
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

logger = logging.getLogger(__name__)


def _fail(system: NumeralSystemKind, message: str) -> None:
    logger.warning("Malformed %s numeral system: %s", system.kind, message)
    raise MalformedSystemError(f"{system.kind} system: {message}")


def _check_distinct(system: NumeralSystemKind, symbols: tuple[str, ...]) -> None:
    if len(set(symbols)) != len(symbols):
        duplicates = sorted({s for s in symbols if symbols.count(s) > 1})
        _fail(system, f"duplicate symbols {duplicates}")


def _check_additive(system: Additive) -> None:
    weights = [numeral.weight for numeral in system.numerals]

    for index, (heavier, lighter) in enumerate(zip(weights, weights[1:])):
        if lighter >= heavier:
            _fail(
                system,
                f"weights must be strictly decreasing, entry {index + 1} "
                f"({lighter}) follows {heavier}",
            )

    # Strictly decreasing non-negative weights put any 0 last already
    positive = [w for w in weights if w > 0]
    if not positive or positive[-1] != 1:
        smallest = positive[-1] if positive else None
        _fail(
            system,
            f"incomplete numeral list, smallest positive weight is {smallest} (expected 1)",
        )


def check_definition(system: NumeralSystemKind) -> None:
    """
    Verify the preconditions of a numeral system definition.

    Args:
        system: Definition to check

    Raises:
        MalformedSystemError: If the definition breaks a precondition
        TypeError: If system is not a known numeral system kind
    """
    if isinstance(system, Positional):
        if system.radix < 2:
            _fail(system, f"radix must be >= 2, got {system.radix}")
        _check_distinct(system, system.symbols)
    elif isinstance(system, (Bijective, Symbolic)):
        if not system.symbols:
            _fail(system, "symbol table is empty")
        _check_distinct(system, system.symbols)
    elif isinstance(system, (ZeroableFixed, NonZeroableFixed)):
        if not system.symbols:
            _fail(system, "symbol table is empty")
    elif isinstance(system, Additive):
        _check_additive(system)
    elif isinstance(system, Chinese):
        pass
    else:
        raise TypeError(f"Unknown numeral system kind: {type(system).__name__}")
