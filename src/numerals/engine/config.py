"""Engine configuration.

Frozen, shared between callers; the default instance is used by the
module-level convenience functions.
"""

from dataclasses import dataclass
from typing import Callable, Final

from numerals.chinese import chinese_numeral
from numerals.core.domain.numeral_system import ChineseCase, ChineseVariant

ChineseConverter = Callable[[ChineseVariant, ChineseCase, int], str]


@dataclass(frozen=True)
class EngineConfig:
    """Configuration of the numeral engine.

    check_definitions — run check_definition() on the system before
        validating/rendering (catches unsorted or incomplete additive lists,
        empty tables, duplicate digits)
    zero_placeholder — text used by render_lenient() for zero in a bijective
        or symbolic system
    numeric_zero — text used by render_lenient() for zero in an additive or
        non-zeroable fixed system
    chinese_converter — external converter for the Chinese kind
    """
    check_definitions: bool = False
    zero_placeholder: str = "-"
    numeric_zero: str = "0"
    chinese_converter: ChineseConverter = chinese_numeral


DEFAULT_ENGINE_CONFIG: Final[EngineConfig] = EngineConfig()

# Debug configuration: definition checks enabled
STRICT_ENGINE_CONFIG: Final[EngineConfig] = EngineConfig(check_definitions=True)
