"""
Unit tests for the numeral engine (dispatch and public contract)

Coverage:
- render() for every kind
- Validator/renderer agreement across kinds and values
- Determinism
- render_represented / render_many / render_lenient
- EngineConfig: definition checks, zero placeholder, Chinese converter
"""

import logging

import pytest

from numerals import (
    DEFAULT_ENGINE_CONFIG,
    Additive,
    Bijective,
    Chinese,
    ChineseCase,
    ChineseVariant,
    EngineConfig,
    MalformedSystemError,
    NonZeroableFixed,
    NumeralEngine,
    Positional,
    RepresentationError,
    RepresentationErrorKind,
    Symbolic,
    TooLargeToRepresent,
    ZeroableFixed,
    ZeroNotRepresentable,
    is_representable,
    render,
    render_lenient,
    render_many,
    render_represented,
    validate,
)
from numerals.catalog import NumeralSystem
from numerals.engine import STRICT_ENGINE_CONFIG

SYSTEMS = [
    Positional(symbols=tuple("0123456789")),
    Positional(symbols=("0", "1")),
    Bijective(symbols=tuple("abc")),
    Bijective(symbols=("|",)),
    Additive(numerals=(("x", 10), ("ix", 9), ("v", 5), ("iv", 4), ("i", 1))),
    Additive(numerals=(("x", 10), ("ix", 9), ("v", 5), ("iv", 4), ("i", 1), ("n", 0))),
    Symbolic(symbols=("*", "†", "‡")),
    ZeroableFixed(symbols=("a", "b", "c")),
    NonZeroableFixed(symbols=("a", "b", "c")),
    Chinese(variant=ChineseVariant.SIMPLE, case=ChineseCase.LOWER),
]


# =============================================================================
# render()
# =============================================================================


class TestRender:
    """Strict rendering"""

    def test_each_kind(self) -> None:
        assert render(SYSTEMS[0], 1994) == "1994"
        assert render(SYSTEMS[1], 6) == "110"
        assert render(SYSTEMS[2], 4) == "aa"
        assert render(SYSTEMS[3], 3) == "|||"
        assert render(SYSTEMS[4], 14) == "xiv"
        assert render(SYSTEMS[5], 0) == "n"
        assert render(SYSTEMS[6], 4) == "**"
        assert render(SYSTEMS[7], 0) == "a"
        assert render(SYSTEMS[8], 3) == "c"
        assert render(SYSTEMS[9], 12) == "十二"

    def test_zero_error(self) -> None:
        with pytest.raises(ZeroNotRepresentable):
            render(SYSTEMS[4], 0)

    def test_too_large_error(self) -> None:
        with pytest.raises(TooLargeToRepresent):
            render(SYSTEMS[7], 3)

    def test_errors_share_base(self) -> None:
        """Callers can catch both reasons at once"""
        for system, n in ((SYSTEMS[2], 0), (SYSTEMS[8], 4)):
            with pytest.raises(RepresentationError):
                render(system, n)

    def test_non_u64_input(self) -> None:
        with pytest.raises(ValueError):
            render(SYSTEMS[0], -1)

    def test_unknown_kind(self) -> None:
        with pytest.raises(TypeError):
            render("roman", 1)


# =============================================================================
# INVARIANTS
# =============================================================================


class TestInvariants:
    """Validator/renderer agreement and determinism"""

    @pytest.mark.parametrize("system", SYSTEMS, ids=lambda s: s.kind)
    def test_validate_iff_render(self, system) -> None:
        """render succeeds exactly when validate does, with the same reason"""
        values = list(range(0, 40))
        # Symbolic, additive and unary output grows linearly with n
        linear = isinstance(system, (Symbolic, Additive)) or (
            isinstance(system, Bijective) and system.radix == 1
        )
        if not linear:
            values += [2**32, 2**64 - 1]
        for n in values:
            try:
                validate(system, n)
            except RepresentationError as expected:
                with pytest.raises(type(expected)):
                    render(system, n)
                assert not is_representable(system, n)
            else:
                assert isinstance(render(system, n), str)
                assert is_representable(system, n)

    @pytest.mark.parametrize("system", SYSTEMS, ids=lambda s: s.kind)
    def test_deterministic(self, system) -> None:
        n = 7 if not isinstance(system, (ZeroableFixed, NonZeroableFixed)) else 2
        outputs = {render(system, n) for _ in range(5)}
        assert len(outputs) == 1

    def test_symbolic_size_grows_linearly(self) -> None:
        """Output length is ceil(n / k) for symbolic systems"""
        assert len(render(SYSTEMS[6], 300)) == 100


# =============================================================================
# RepresentedNumber / batch
# =============================================================================


class TestRepresentedAndBatch:
    """render_represented and render_many"""

    def test_render_represented(self) -> None:
        number = validate(SYSTEMS[2], 28)
        # offset 1 + 3 + 9 = 13, remainder 15 = 120 in base 3
        assert render_represented(number) == "bca"

    def test_render_many(self) -> None:
        assert render_many(SYSTEMS[2], range(1, 7)) == ["a", "b", "c", "aa", "ab", "ac"]

    def test_render_many_raises_on_first_failure(self) -> None:
        with pytest.raises(TooLargeToRepresent) as exc_info:
            render_many(SYSTEMS[8], [1, 2, 5, 0])
        assert exc_info.value.value == 5

    def test_render_many_empty(self) -> None:
        assert render_many(SYSTEMS[0], []) == []


# =============================================================================
# LENIENT
# =============================================================================


class TestLenient:
    """render_lenient fallbacks"""

    def test_representable_unchanged(self) -> None:
        assert render_lenient(SYSTEMS[4], 9) == "ix"

    def test_zero_placeholder(self) -> None:
        assert render_lenient(SYSTEMS[2], 0) == "-"
        assert render_lenient(SYSTEMS[6], 0) == "-"

    def test_numeric_zero(self) -> None:
        """Additive and non-zeroable fixed systems fall back to a plain 0"""
        assert render_lenient(SYSTEMS[4], 0) == "0"
        assert render_lenient(SYSTEMS[8], 0) == "0"
        assert render_lenient(NumeralSystem.DOUBLE_CIRCLED_NUMBER.kind, 0) == "0"

    def test_custom_numeric_zero(self) -> None:
        config = EngineConfig(numeric_zero="nulla", zero_placeholder="?")
        assert render_lenient(SYSTEMS[4], 0, config) == "nulla"
        assert render_lenient(SYSTEMS[2], 0, config) == "?"

    def test_custom_zero_placeholder(self) -> None:
        config = EngineConfig(zero_placeholder="0")
        assert render_lenient(SYSTEMS[6], 0, config) == "0"

    def test_too_large_decimal(self) -> None:
        assert render_lenient(SYSTEMS[7], 3) == "3"
        assert render_lenient(SYSTEMS[8], 51) == "51"

    def test_malformed_still_raises(self) -> None:
        """Lenient rendering only covers representation errors"""
        broken = Additive(numerals=(("i", 1), ("v", 5)))
        with pytest.raises(MalformedSystemError):
            render_lenient(broken, 3, STRICT_ENGINE_CONFIG)

    def test_logs_fallback(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="numerals.engine.engine"):
            render_lenient(SYSTEMS[2], 0)
        assert "placeholder" in caplog.text


# =============================================================================
# CONFIG
# =============================================================================


class TestEngineConfig:
    """EngineConfig behaviour"""

    def test_default_does_not_check_definitions(self) -> None:
        """Unsorted additive lists render (incorrectly) without checks"""
        unsorted = Additive(numerals=(("i", 1), ("v", 5)))
        assert DEFAULT_ENGINE_CONFIG.check_definitions is False
        assert render(unsorted, 5) == "iiiii"

    def test_strict_rejects_unsorted(self) -> None:
        unsorted = Additive(numerals=(("i", 1), ("v", 5)))
        with pytest.raises(MalformedSystemError, match="strictly decreasing"):
            render(unsorted, 5, STRICT_ENGINE_CONFIG)

    def test_strict_rejects_incomplete_in_batch(self) -> None:
        incomplete = Additive(numerals=(("v", 5), ("ii", 2)))
        with pytest.raises(MalformedSystemError, match="incomplete"):
            render_many(incomplete, [5, 6], STRICT_ENGINE_CONFIG)

    def test_custom_chinese_converter(self) -> None:
        config = EngineConfig(chinese_converter=lambda variant, case, n: f"{variant.value}:{n}")
        assert render(SYSTEMS[9], 42, config) == "simple:42"

    def test_engine_instance_shares_config(self) -> None:
        engine = NumeralEngine(EngineConfig(zero_placeholder="?"))
        assert engine.render_lenient(SYSTEMS[2], 0) == "?"
        assert engine.render(SYSTEMS[2], 3) == "c"

    def test_config_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_ENGINE_CONFIG.check_definitions = True

    def test_representation_error_kind_on_exception(self) -> None:
        with pytest.raises(RepresentationError) as exc_info:
            render(SYSTEMS[8], 0)
        assert exc_info.value.kind is RepresentationErrorKind.ZERO
