"""Delegated renderer — forwards Chinese systems to the external converter."""

from numerals.core.domain.numeral_system import Chinese
from numerals.engine.config import ChineseConverter


def render_chinese(system: Chinese, n: int, converter: ChineseConverter) -> str:
    """Forward (variant, case, n) unchanged to converter."""
    return converter(system.variant, system.case, n)
