"""
Numeral Engine — kind dispatch and public rendering contract

render(system, n):
1. (optional) check_definition(system) when config.check_definitions
2. validate(system, n) → RepresentedNumber, or RepresentationError
3. dispatch to the kind's renderer

render_lenient() reproduces the historical never-failing behaviour:
zero in a zero-less system prints a placeholder ("0" for additive and
non-zeroable fixed systems), too-large fixed values print in decimal.

CRITICAL INVARIANTS:
1. validate succeeds iff render succeeds
2. Renderers only see validated values (no out-of-bounds table access)
3. Same (system, n, config) → byte-identical output
"""

import logging
from typing import Iterable

from numerals.core.domain.errors import RepresentationError, RepresentationErrorKind
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
from numerals.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from numerals.engine.definition_checks import check_definition
from numerals.engine.renderers import (
    render_additive,
    render_bijective,
    render_chinese,
    render_non_zeroable_fixed,
    render_positional,
    render_symbolic,
    render_zeroable_fixed,
)
from numerals.engine.validator import validate

logger = logging.getLogger(__name__)

# Decimal digits used by render_lenient for too-large fixed values
_DECIMAL = Positional(symbols=tuple("0123456789"))


class NumeralEngine:
    """Renders numbers in numeral systems.

    Stateless apart from its frozen config; one instance may be shared.
    """

    def __init__(self, config: EngineConfig = DEFAULT_ENGINE_CONFIG):
        self.config = config

    def validate(self, system: NumeralSystemKind, n: int) -> RepresentedNumber:
        """Validate n against system (definition checked first if configured).

        Raises:
            RepresentationError: n is not representable
            MalformedSystemError: definition check failed
        """
        if self.config.check_definitions:
            check_definition(system)
        return validate(system, n)

    def render_represented(self, number: RepresentedNumber) -> str:
        """Render an already validated number. No re-validation."""
        system = number.system
        n = number.value

        if isinstance(system, Positional):
            return render_positional(system, n)
        if isinstance(system, Bijective):
            return render_bijective(system, n)
        if isinstance(system, Additive):
            return render_additive(system, n)
        if isinstance(system, Symbolic):
            return render_symbolic(system, n)
        if isinstance(system, ZeroableFixed):
            return render_zeroable_fixed(system, n)
        if isinstance(system, NonZeroableFixed):
            return render_non_zeroable_fixed(system, n)
        if isinstance(system, Chinese):
            return render_chinese(system, n, self.config.chinese_converter)

        raise TypeError(f"Unknown numeral system kind: {type(system).__name__}")

    def render(self, system: NumeralSystemKind, n: int) -> str:
        """
        Validate then render n in system.

        Args:
            system: Numeral system definition
            n: Value in [0, 2**64 - 1]

        Returns:
            Canonical rendering of n

        Raises:
            ZeroNotRepresentable: The system has no zero
            TooLargeToRepresent: n exceeds a fixed table
            MalformedSystemError: Definition check failed (check_definitions only)
            ValueError: n is not a u64 integer
        """
        return self.render_represented(self.validate(system, n))

    def render_many(self, system: NumeralSystemKind, values: Iterable[int]) -> list[str]:
        """
        Render several values in one system.

        The definition is checked once (if configured). The first
        unrepresentable value raises its RepresentationError.
        """
        if self.config.check_definitions:
            check_definition(system)
        return [self.render_represented(validate(system, n)) for n in values]

    def render_lenient(self, system: NumeralSystemKind, n: int) -> str:
        """
        Render n, substituting instead of raising on representation errors.

        ZERO → config.numeric_zero for additive and non-zeroable fixed
        systems, config.zero_placeholder otherwise; TOO_LARGE → n in decimal.
        """
        try:
            return self.render(system, n)
        except RepresentationError as e:
            if e.kind is RepresentationErrorKind.ZERO:
                if isinstance(system, (Additive, NonZeroableFixed)):
                    logger.debug("%s has no zero, using numeric zero", system.kind)
                    return self.config.numeric_zero
                logger.debug("%s has no zero, using placeholder", system.kind)
                return self.config.zero_placeholder
            logger.debug("%d exceeds %s table, using decimal", n, system.kind)
            return render_positional(_DECIMAL, n)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def render(
    system: NumeralSystemKind, n: int, config: EngineConfig = DEFAULT_ENGINE_CONFIG
) -> str:
    """
    Render n in system.

    Raises:
        RepresentationError: If system cannot represent n
    """
    return NumeralEngine(config).render(system, n)


def render_represented(
    number: RepresentedNumber, config: EngineConfig = DEFAULT_ENGINE_CONFIG
) -> str:
    """Render a value previously returned by validate()."""
    return NumeralEngine(config).render_represented(number)


def render_many(
    system: NumeralSystemKind,
    values: Iterable[int],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[str]:
    """Render each of values in system."""
    return NumeralEngine(config).render_many(system, values)


def render_lenient(
    system: NumeralSystemKind, n: int, config: EngineConfig = DEFAULT_ENGINE_CONFIG
) -> str:
    """Render n in system, never raising RepresentationError."""
    return NumeralEngine(config).render_lenient(system, n)
