"""RepresentedNumber — a number proven renderable by its system.

Produced only by numerals.engine.validate. Holds the (immutable) system
definition and the validated value; renderers trust it and never re-check.
"""

from dataclasses import dataclass

from numerals.core.domain.numeral_system import NumeralSystemKind


@dataclass(frozen=True)
class RepresentedNumber:
    """Validated (system, value) pair.

    Do not construct directly: the invariant "system can render value" is
    established by the validator.
    """

    system: NumeralSystemKind
    value: int
