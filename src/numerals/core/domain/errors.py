"""
Representation errors

Exactly two reasons a well-formed system rejects a number:
- ZERO: the system has no representation of zero
- TOO_LARGE: the number exceeds a fixed-size table

Both are deterministic functions of (system, n) and recur identically on
retry. MalformedSystemError is a caller programming error (a definition that
breaks its own preconditions), not a representation failure.
"""

from enum import Enum
from typing import Any


# =============================================================================
# ENUMS
# =============================================================================


class RepresentationErrorKind(str, Enum):
    """Why a number cannot be expressed in a numeral system"""

    ZERO = "zero"
    TOO_LARGE = "too_large"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RepresentationError(Exception):
    """
    The number cannot be expressed in the chosen numeral system.

    Abstract: raise ZeroNotRepresentable or TooLargeToRepresent (or look the
    subclass up in ERROR_BY_KIND). Catch this base to handle both reasons.

    Attributes:
        kind: RepresentationErrorKind reason
        value: The rejected number
        system: The system definition that rejected it
    """

    kind: RepresentationErrorKind

    def __init__(self, value: int, system: Any):
        if type(self) is RepresentationError:
            raise TypeError("RepresentationError is abstract; raise a reason subclass")
        self.value = value
        self.system = system
        super().__init__(self._describe())


class ZeroNotRepresentable(RepresentationError):
    """The system's numeral space has no zero"""

    kind = RepresentationErrorKind.ZERO

    def _describe(self) -> str:
        return f"zero cannot be represented in {_kind_name(self.system)} system"


class TooLargeToRepresent(RepresentationError):
    """The number exceeds the capacity of a fixed-size system"""

    kind = RepresentationErrorKind.TOO_LARGE

    def _describe(self) -> str:
        capacity = len(getattr(self.system, "symbols", ()))
        return (
            f"{self.value} is too large for {_kind_name(self.system)} system "
            f"with {capacity} symbols"
        )


class MalformedSystemError(ValueError):
    """A numeral system definition violates its own preconditions"""

    pass


ERROR_BY_KIND: dict[RepresentationErrorKind, type[RepresentationError]] = {
    RepresentationErrorKind.ZERO: ZeroNotRepresentable,
    RepresentationErrorKind.TOO_LARGE: TooLargeToRepresent,
}


def _kind_name(system: Any) -> str:
    return getattr(system, "kind", type(system).__name__)
