"""
System Catalog — predefined named numeral systems

Static, read-only definitions built once at import time and shared by every
caller. Each entry of the NumeralSystem enum carries its lookup name
(e.g. "roman", "Roman", "chinese.simplified") as its value; lower/upper case
variants differ by the capitalisation of the name.
"""

from enum import Enum
from typing import Final

from numerals.core.domain.numeral_system import (
    Additive,
    Bijective,
    Chinese,
    ChineseCase,
    ChineseVariant,
    NonZeroableFixed,
    NumeralSystemKind,
    Positional,
    Symbolic,
    ZeroableFixed,
)
from numerals.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from numerals.engine.engine import render

# Combining overline: multiplies a Roman numeral by 1000
_OVERLINE: Final[str] = "\u0305"
# Greek lower numeral sign (keraia below): multiplies a letter by 1000
_GREEK_THOUSANDS: Final[str] = "\u0375"
# Greek zero sign
_GREEK_ZERO: Final[str] = "\U0001018a"


# =============================================================================
# POSITIONAL SYSTEMS
# =============================================================================

ARABIC: Final = Positional(symbols=tuple("0123456789"))
EASTERN_ARABIC: Final = Positional(symbols=tuple("٠١٢٣٤٥٦٧٨٩"))
EASTERN_ARABIC_PERSIAN: Final = Positional(symbols=tuple("۰۱۲۳۴۵۶۷۸۹"))
DEVANAGARI_NUMBER: Final = Positional(symbols=tuple("०१२३४५६७८९"))
BENGALI_NUMBER: Final = Positional(symbols=tuple("০১২৩৪৫৬৭৮৯"))


# =============================================================================
# BIJECTIVE SYSTEMS
# =============================================================================

LOWER_LATIN: Final = Bijective(symbols=tuple("abcdefghijklmnopqrstuvwxyz"))
UPPER_LATIN: Final = Bijective(symbols=tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ"))

# Gojūon order: includes ん, excludes ゐ and ゑ
HIRAGANA_AIUEO: Final = Bijective(
    symbols=tuple(
        "あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみむめもやゆよらりるれろわをん"
    )
)
# Iroha order: includes ゐ and ゑ, excludes ん
HIRAGANA_IROHA: Final = Bijective(
    symbols=tuple(
        "いろはにほへとちりぬるをわかよたれそつねならむうゐのおくやまけふこえてあさきゆめみしゑひもせす"
    )
)
KATAKANA_AIUEO: Final = Bijective(
    symbols=tuple(
        "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヲン"
    )
)
KATAKANA_IROHA: Final = Bijective(
    symbols=tuple(
        "イロハニホヘトチリヌルヲワカヨタレソツネナラムウヰノオクヤマケフコエテアサキユメミシヱヒモセス"
    )
)
KOREAN_JAMO: Final = Bijective(symbols=tuple("ㄱㄴㄷㄹㅁㅂㅅㅇㅈㅊㅋㅌㅍㅎ"))
KOREAN_SYLLABLE: Final = Bijective(symbols=tuple("가나다라마바사아자차카타파하"))
BENGALI_LETTER: Final = Bijective(
    symbols=tuple("কখগঘঙচছজঝঞটঠডঢণতথদধনপফবভমযরলশষসহ")
)


# =============================================================================
# ADDITIVE SYSTEMS
# =============================================================================


def _roman(one: str, five: str, ten: str, fifty: str, hundred: str, five_hundred: str,
           thousand: str, zero: str) -> Additive:
    """Roman numerals with overlined (x1000) numerals up to 1 000 000."""

    def bar(symbol: str) -> str:
        return "".join(ch + _OVERLINE for ch in symbol)

    return Additive(
        numerals=(
            (bar(thousand), 1_000_000),
            (bar(five_hundred), 500_000),
            (bar(hundred), 100_000),
            (bar(fifty), 50_000),
            (bar(ten), 10_000),
            (bar(five), 5_000),
            (bar(one + five), 4_000),
            (thousand, 1000),
            (hundred + thousand, 900),
            (five_hundred, 500),
            (hundred + five_hundred, 400),
            (hundred, 100),
            (ten + hundred, 90),
            (fifty, 50),
            (ten + fifty, 40),
            (ten, 10),
            (one + ten, 9),
            (five, 5),
            (one + five, 4),
            (one, 1),
            (zero, 0),
        )
    )


LOWER_ROMAN: Final = _roman("i", "v", "x", "l", "c", "d", "m", "n")
UPPER_ROMAN: Final = _roman("I", "V", "X", "L", "C", "D", "M", "N")


def _greek(units: str, tens: str, hundreds: str) -> Additive:
    """Greek alphabetic numerals; thousands are units with the numeral sign."""
    numerals: list[tuple[str, int]] = []
    for i in range(9, 0, -1):
        numerals.append((_GREEK_THOUSANDS + units[i - 1], i * 1000))
    for i in range(9, 0, -1):
        numerals.append((hundreds[i - 1], i * 100))
    for i in range(9, 0, -1):
        numerals.append((tens[i - 1], i * 10))
    for i in range(9, 0, -1):
        numerals.append((units[i - 1], i))
    numerals.append((_GREEK_ZERO, 0))
    return Additive(numerals=tuple(numerals))


LOWER_GREEK: Final = _greek("αβγδεϛζηθ", "ικλμνξοπϟ", "ρστυφχψωϡ")
UPPER_GREEK: Final = _greek("ΑΒΓΔΕϚΖΗΘ", "ΙΚΛΜΝΞΟΠϞ", "ΡΣΤΥΦΧΨΩϠ")

# 15 and 16 are written טו/טז (9+6, 9+7) to avoid spelling the divine name
HEBREW: Final = Additive(
    numerals=(
        ("ת", 400),
        ("ש", 300),
        ("ר", 200),
        ("ק", 100),
        ("צ", 90),
        ("פ", 80),
        ("ע", 70),
        ("ס", 60),
        ("נ", 50),
        ("מ", 40),
        ("ל", 30),
        ("כ", 20),
        ("יט", 19),
        ("יח", 18),
        ("יז", 17),
        ("טז", 16),
        ("טו", 15),
        ("י", 10),
        ("ט", 9),
        ("ח", 8),
        ("ז", 7),
        ("ו", 6),
        ("ה", 5),
        ("ד", 4),
        ("ג", 3),
        ("ב", 2),
        ("א", 1),
        ("-", 0),
    )
)


# =============================================================================
# SYMBOLIC AND FIXED SYSTEMS
# =============================================================================

SYMBOLS: Final = Symbolic(symbols=("*", "†", "‡", "§", "¶", "‖"))

# ⓪ through ㊿
CIRCLED_NUMBER: Final = ZeroableFixed(
    symbols=(
        "⓪", "①", "②", "③", "④", "⑤", "⑥", "⑦", "⑧", "⑨", "⑩",
        "⑪", "⑫", "⑬", "⑭", "⑮", "⑯", "⑰", "⑱", "⑲", "⑳",
        "㉑", "㉒", "㉓", "㉔", "㉕", "㉖", "㉗", "㉘", "㉙", "㉚",
        "㉛", "㉜", "㉝", "㉞", "㉟", "㊱", "㊲", "㊳", "㊴", "㊵",
        "㊶", "㊷", "㊸", "㊹", "㊺", "㊻", "㊼", "㊽", "㊾", "㊿",
    )
)
DOUBLE_CIRCLED_NUMBER: Final = NonZeroableFixed(symbols=tuple("⓵⓶⓷⓸⓹⓺⓻⓼⓽⓾"))


# =============================================================================
# CHINESE SYSTEMS
# =============================================================================

LOWER_SIMPLIFIED_CHINESE: Final = Chinese(variant=ChineseVariant.SIMPLE, case=ChineseCase.LOWER)
UPPER_SIMPLIFIED_CHINESE: Final = Chinese(variant=ChineseVariant.SIMPLE, case=ChineseCase.UPPER)
LOWER_TRADITIONAL_CHINESE: Final = Chinese(
    variant=ChineseVariant.TRADITIONAL, case=ChineseCase.LOWER
)
UPPER_TRADITIONAL_CHINESE: Final = Chinese(
    variant=ChineseVariant.TRADITIONAL, case=ChineseCase.UPPER
)


# =============================================================================
# NAMED CATALOG
# =============================================================================


class NumeralSystem(str, Enum):
    """Predefined numeral systems, valued by their lookup name."""

    ARABIC = "arabic"
    LOWER_LATIN = "latin"
    UPPER_LATIN = "Latin"
    LOWER_ROMAN = "roman"
    UPPER_ROMAN = "Roman"
    LOWER_GREEK = "greek"
    UPPER_GREEK = "Greek"
    SYMBOL = "symbols"
    HEBREW = "hebrew"
    LOWER_SIMPLIFIED_CHINESE = "chinese.simplified"
    UPPER_SIMPLIFIED_CHINESE = "Chinese.simplified"
    LOWER_TRADITIONAL_CHINESE = "chinese.traditional"
    UPPER_TRADITIONAL_CHINESE = "Chinese.traditional"
    HIRAGANA_AIUEO = "hiragana.aiueo"
    HIRAGANA_IROHA = "hiragana.iroha"
    KATAKANA_AIUEO = "katakana.aiueo"
    KATAKANA_IROHA = "katakana.iroha"
    KOREAN_JAMO = "korean.jamo"
    KOREAN_SYLLABLE = "korean.syllable"
    EASTERN_ARABIC = "arabic.eastern"
    EASTERN_ARABIC_PERSIAN = "arabic.persian"
    DEVANAGARI_NUMBER = "devanagari"
    BENGALI_NUMBER = "bengali.number"
    BENGALI_LETTER = "bengali.letter"
    CIRCLED_NUMBER = "circled"
    DOUBLE_CIRCLED_NUMBER = "circled.double"

    @classmethod
    def from_name(cls, name: str) -> "NumeralSystem | None":
        """Look up a system by name, None if unknown"""
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def kind(self) -> NumeralSystemKind:
        """Definition of this system"""
        return _DEFINITIONS[self]

    def apply(self, n: int, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> str:
        """
        Render n in this system.

        Raises:
            RepresentationError: If the system cannot represent n
        """
        return render(self.kind, n, config)


_DEFINITIONS: Final[dict[NumeralSystem, NumeralSystemKind]] = {
    NumeralSystem.ARABIC: ARABIC,
    NumeralSystem.LOWER_LATIN: LOWER_LATIN,
    NumeralSystem.UPPER_LATIN: UPPER_LATIN,
    NumeralSystem.LOWER_ROMAN: LOWER_ROMAN,
    NumeralSystem.UPPER_ROMAN: UPPER_ROMAN,
    NumeralSystem.LOWER_GREEK: LOWER_GREEK,
    NumeralSystem.UPPER_GREEK: UPPER_GREEK,
    NumeralSystem.SYMBOL: SYMBOLS,
    NumeralSystem.HEBREW: HEBREW,
    NumeralSystem.LOWER_SIMPLIFIED_CHINESE: LOWER_SIMPLIFIED_CHINESE,
    NumeralSystem.UPPER_SIMPLIFIED_CHINESE: UPPER_SIMPLIFIED_CHINESE,
    NumeralSystem.LOWER_TRADITIONAL_CHINESE: LOWER_TRADITIONAL_CHINESE,
    NumeralSystem.UPPER_TRADITIONAL_CHINESE: UPPER_TRADITIONAL_CHINESE,
    NumeralSystem.HIRAGANA_AIUEO: HIRAGANA_AIUEO,
    NumeralSystem.HIRAGANA_IROHA: HIRAGANA_IROHA,
    NumeralSystem.KATAKANA_AIUEO: KATAKANA_AIUEO,
    NumeralSystem.KATAKANA_IROHA: KATAKANA_IROHA,
    NumeralSystem.KOREAN_JAMO: KOREAN_JAMO,
    NumeralSystem.KOREAN_SYLLABLE: KOREAN_SYLLABLE,
    NumeralSystem.EASTERN_ARABIC: EASTERN_ARABIC,
    NumeralSystem.EASTERN_ARABIC_PERSIAN: EASTERN_ARABIC_PERSIAN,
    NumeralSystem.DEVANAGARI_NUMBER: DEVANAGARI_NUMBER,
    NumeralSystem.BENGALI_NUMBER: BENGALI_NUMBER,
    NumeralSystem.BENGALI_LETTER: BENGALI_LETTER,
    NumeralSystem.CIRCLED_NUMBER: CIRCLED_NUMBER,
    NumeralSystem.DOUBLE_CIRCLED_NUMBER: DOUBLE_CIRCLED_NUMBER,
}


def get_system(name: str) -> NumeralSystemKind:
    """
    Definition of the predefined system called name.

    Raises:
        KeyError: If no system has that name
    """
    system = NumeralSystem.from_name(name)
    if system is None:
        raise KeyError(f"Unknown numeral system: {name!r}")
    return system.kind
