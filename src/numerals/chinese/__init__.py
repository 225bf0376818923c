"""Chinese numeral converter used by the delegated (Chinese) system kind."""

from numerals.chinese.converter import chinese_numeral

__all__ = [
    "chinese_numeral",
]
