"""
Unit tests for definition checks

Coverage:
- Well-formed catalog definitions pass
- Duplicate digits, too-small radix, empty tables
- Additive ordering, zero placement and completeness
"""

import logging

import pytest

from numerals.catalog import NumeralSystem
from numerals.core.domain import (
    Additive,
    Bijective,
    Chinese,
    ChineseCase,
    ChineseVariant,
    MalformedSystemError,
    Positional,
    Symbolic,
    ZeroableFixed,
)
from numerals.engine import check_definition


class TestWellFormed:
    """Definitions that satisfy every precondition"""

    @pytest.mark.parametrize("system", list(NumeralSystem), ids=lambda s: s.value)
    def test_catalog_is_well_formed(self, system: NumeralSystem) -> None:
        check_definition(system.kind)

    def test_chinese_has_no_table(self) -> None:
        check_definition(Chinese(variant=ChineseVariant.SIMPLE, case=ChineseCase.UPPER))


class TestSymbolTables:
    """Positional/bijective/symbolic/fixed tables"""

    def test_duplicate_digits(self) -> None:
        with pytest.raises(MalformedSystemError, match="duplicate symbols"):
            check_definition(Positional(symbols=("0", "1", "1")))

    @pytest.mark.parametrize("model", [Bijective, Symbolic])
    def test_duplicate_symbols(self, model) -> None:
        with pytest.raises(MalformedSystemError, match=r"\['a'\]"):
            check_definition(model(symbols=("a", "b", "a")))

    def test_fixed_allows_repeats(self) -> None:
        """Lookup tables may map several values to the same text"""
        check_definition(ZeroableFixed(symbols=("-", "-")))

    def test_radix_below_two(self) -> None:
        """Bypassing model validation still gets caught"""
        system = Positional.model_construct(symbols=("0",))
        with pytest.raises(MalformedSystemError, match="radix must be >= 2"):
            check_definition(system)

    def test_empty_table(self) -> None:
        system = Bijective.model_construct(symbols=())
        with pytest.raises(MalformedSystemError, match="empty"):
            check_definition(system)


class TestAdditive:
    """Additive numeral lists"""

    def test_not_decreasing(self) -> None:
        with pytest.raises(MalformedSystemError, match="strictly decreasing"):
            check_definition(Additive(numerals=(("v", 5), ("x", 10), ("i", 1))))

    def test_equal_weights(self) -> None:
        with pytest.raises(MalformedSystemError, match="strictly decreasing"):
            check_definition(Additive(numerals=(("v", 5), ("V", 5), ("i", 1))))

    def test_zero_not_last(self) -> None:
        with pytest.raises(MalformedSystemError):
            check_definition(Additive(numerals=(("n", 0), ("i", 1))))

    def test_incomplete(self) -> None:
        with pytest.raises(MalformedSystemError, match="smallest positive weight is 2"):
            check_definition(Additive(numerals=(("v", 5), ("ii", 2))))

    def test_only_zero(self) -> None:
        with pytest.raises(MalformedSystemError, match="incomplete"):
            check_definition(Additive(numerals=(("n", 0),)))

    def test_complete_with_zero(self) -> None:
        check_definition(Additive(numerals=(("v", 5), ("i", 1), ("n", 0))))

    def test_failure_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="numerals.engine.definition_checks"):
            with pytest.raises(MalformedSystemError):
                check_definition(Additive(numerals=(("v", 5),)))
        assert "Malformed additive numeral system" in caplog.text


def test_unknown_kind() -> None:
    with pytest.raises(TypeError):
        check_definition(object())
