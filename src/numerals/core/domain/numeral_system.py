"""
NumeralSystemKind — Numeral system definitions

Closed set of immutable Pydantic models, one per system kind:
- Positional: place-value digits, dedicated zero digit (radix >= 2)
- Bijective: place-value without zero (spreadsheet column labels)
- Additive: sign-value notation over weighted numerals (Roman, Greek, Hebrew)
- Symbolic: cycling symbols repeated once more every full cycle
- ZeroableFixed / NonZeroableFixed: bounded lookup tables
- Chinese: rendering delegated to an external Chinese numeral converter

The models are discriminated by the `kind` field so a definition can be
round-tripped through plain data (see numerals.core.contracts).

CRITICAL INVARIANTS:
1. Definitions are frozen after construction and safe to share
2. Additive numerals are supplied in strictly decreasing weight order;
   the engine never re-sorts them
3. A weight of 0 is only meaningful as the last additive entry
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class ChineseVariant(str, Enum):
    """Chinese script variant"""

    SIMPLE = "simple"
    TRADITIONAL = "traditional"


class ChineseCase(str, Enum):
    """Chinese numeral case.

    LOWER — everyday numerals (一, 二, 三)
    UPPER — "banknote" numerals (壹, 贰, 叁)
    """

    LOWER = "lower"
    UPPER = "upper"


# =============================================================================
# NESTED MODELS
# =============================================================================


class WeightedSymbol(BaseModel):
    """
    One entry of an additive numeral list.

    The symbol may span several code points (e.g. "cm", or a letter with a
    combining overline).
    """

    symbol: str = Field(..., min_length=1, description="Literal text of the numeral")
    weight: int = Field(..., ge=0, description="Value contributed by one occurrence")

    model_config = {"frozen": True}


# =============================================================================
# SYSTEM KINDS
# =============================================================================


class Positional(BaseModel):
    """
    Big-endian positional notation; symbols[0] is the zero digit.

    Radix is the number of symbols.
    """

    kind: Literal["positional"] = "positional"
    symbols: tuple[str, ...] = Field(..., min_length=2, description="Digits, zero first")

    model_config = {"frozen": True}

    @property
    def radix(self) -> int:
        return len(self.symbols)


class Bijective(BaseModel):
    """
    Bijective base-k numeration: no zero digit, symbols[0] is worth 1.
    """

    kind: Literal["bijective"] = "bijective"
    symbols: tuple[str, ...] = Field(..., min_length=1, description="Digits worth 1..k")

    model_config = {"frozen": True}

    @property
    def radix(self) -> int:
        return len(self.symbols)


class Additive(BaseModel):
    """
    Sign-value notation rendered by greedy decomposition.

    Numerals must be ordered by strictly decreasing weight. A trailing
    weight-0 entry is the literal rendering of zero.
    """

    kind: Literal["additive"] = "additive"
    numerals: tuple[WeightedSymbol, ...] = Field(
        ..., min_length=1, description="Weighted numerals, heaviest first"
    )

    model_config = {"frozen": True}

    @field_validator("numerals", mode="before")
    @classmethod
    def coerce_pairs(cls, v: Any) -> Any:
        """Accept (symbol, weight) pairs alongside WeightedSymbol/dict entries"""
        if isinstance(v, (list, tuple)):
            return tuple(
                {"symbol": item[0], "weight": item[1]}
                if isinstance(item, (list, tuple))
                else item
                for item in v
            )
        return v

    @property
    def zero_symbol(self) -> str | None:
        """Symbol of the trailing weight-0 entry, None if zero is not representable"""
        last = self.numerals[-1]
        return last.symbol if last.weight == 0 else None


class Symbolic(BaseModel):
    """
    Repeating symbols: 1..k map to one copy of each symbol, k+1..2k to two
    copies, and so on.
    """

    kind: Literal["symbolic"] = "symbolic"
    symbols: tuple[str, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}


class ZeroableFixed(BaseModel):
    """Fixed lookup table indexed from 0"""

    kind: Literal["zeroable_fixed"] = "zeroable_fixed"
    symbols: tuple[str, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}


class NonZeroableFixed(BaseModel):
    """Fixed lookup table indexed from 1"""

    kind: Literal["non_zeroable_fixed"] = "non_zeroable_fixed"
    symbols: tuple[str, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}


class Chinese(BaseModel):
    """
    Chinese numerals. No symbol table: rendering is delegated to the
    configured Chinese numeral converter.
    """

    kind: Literal["chinese"] = "chinese"
    variant: ChineseVariant = Field(..., description="Simplified or traditional script")
    case: ChineseCase = Field(..., description="Everyday or banknote numerals")

    model_config = {"frozen": True}


NumeralSystemKind = Annotated[
    Union[
        Positional,
        Bijective,
        Additive,
        Symbolic,
        ZeroableFixed,
        NonZeroableFixed,
        Chinese,
    ],
    Field(discriminator="kind"),
]

NUMERAL_SYSTEM_KINDS: tuple[type[BaseModel], ...] = (
    Positional,
    Bijective,
    Additive,
    Symbolic,
    ZeroableFixed,
    NonZeroableFixed,
    Chinese,
)
