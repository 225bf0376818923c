"""
Chinese numerals — ten-thousand grouping

Converts u64 values to Chinese numerals using the myriad scale:
万/萬 = 10**4, 亿/億 = 10**8, 兆 = 10**12, 京 = 10**16 (u64 ends below 10**20).

Rules:
- The number is split into 4-digit groups, each rendered with 千/百/十
  (仟/佰/拾 in upper case) and followed by its myriad unit
- A run of zeros between non-zero digits is written as a single 零, also
  across group boundaries and across empty groups
- In lower case a leading 一十 is shortened to 十 (10 → 十, 150000 → 十五万);
  upper case keeps it (10 → 壹拾)
"""

from typing import Final

from numerals.core.domain.numeral_system import ChineseCase, ChineseVariant
from numerals.core.math.integer_safeguards import validate_u64

# =============================================================================
# SYMBOL TABLES
# =============================================================================

_DIGITS: Final[dict[tuple[ChineseVariant, ChineseCase], str]] = {
    (ChineseVariant.SIMPLE, ChineseCase.LOWER): "零一二三四五六七八九",
    (ChineseVariant.SIMPLE, ChineseCase.UPPER): "零壹贰叁肆伍陆柒捌玖",
    (ChineseVariant.TRADITIONAL, ChineseCase.LOWER): "零一二三四五六七八九",
    (ChineseVariant.TRADITIONAL, ChineseCase.UPPER): "零壹貳參肆伍陸柒捌玖",
}

# 千, 百, 十 per case (index = power of ten within a group, 0 is the ones place)
_SMALL_UNITS: Final[dict[ChineseCase, tuple[str, str, str, str]]] = {
    ChineseCase.LOWER: ("", "十", "百", "千"),
    ChineseCase.UPPER: ("", "拾", "佰", "仟"),
}

_MYRIAD_UNITS: Final[dict[ChineseVariant, tuple[str, ...]]] = {
    ChineseVariant.SIMPLE: ("", "万", "亿", "兆", "京"),
    ChineseVariant.TRADITIONAL: ("", "萬", "億", "兆", "京"),
}

GROUP_SIZE: Final[int] = 10_000


# =============================================================================
# CONVERSION
# =============================================================================


def _render_group(group: int, digits: str, units: tuple[str, str, str, str]) -> str:
    """Render 1..9999 without leading zeros; inner zero runs become one 零."""
    out: list[str] = []
    pending_zero = False
    for power in (3, 2, 1, 0):
        digit = (group // 10**power) % 10
        if digit == 0:
            if out:
                pending_zero = True
            continue
        if pending_zero:
            out.append(digits[0])
            pending_zero = False
        out.append(digits[digit] + units[power])
    return "".join(out)


def chinese_numeral(variant: ChineseVariant, case: ChineseCase, n: int) -> str:
    """
    Render n as a Chinese numeral.

    Args:
        variant: Simplified or traditional script
        case: Everyday (lower) or banknote (upper) numerals
        n: Value in [0, 2**64 - 1]

    Returns:
        Chinese numeral string

    Raises:
        ValueError: If n is outside the u64 range

    Examples:
        >>> chinese_numeral(ChineseVariant.SIMPLE, ChineseCase.LOWER, 1001)
        '一千零一'
        >>> chinese_numeral(ChineseVariant.SIMPLE, ChineseCase.LOWER, 100000)
        '十万'
        >>> chinese_numeral(ChineseVariant.TRADITIONAL, ChineseCase.UPPER, 10)
        '壹拾'
    """
    validate_u64(n)
    digits = _DIGITS[(variant, case)]
    units = _SMALL_UNITS[case]
    myriads = _MYRIAD_UNITS[variant]

    if n == 0:
        return digits[0]

    groups: list[int] = []
    while n:
        groups.append(n % GROUP_SIZE)
        n //= GROUP_SIZE

    out: list[str] = []
    pending_zero = False
    for index in range(len(groups) - 1, -1, -1):
        group = groups[index]
        if group == 0:
            if out:
                pending_zero = True
            continue
        if out and (pending_zero or group < 1000):
            out.append(digits[0])
        out.append(_render_group(group, digits, units) + myriads[index])
        pending_zero = False

    text = "".join(out)
    if case is ChineseCase.LOWER and text.startswith(digits[1] + units[1]):
        text = text[1:]
    return text
