"""
Тесты для NumberParser

Проверяет:
1. Удаление разделителей и пробелов
2. Пустой ввод → 0
3. Фиксированный формат (точка, ведущий минус, без экспоненты)
4. Некорректный ввод → previous_value (без исключений)
5. Политики переполнения CLAMP / KEEP_PREVIOUS для целых и float
"""

import numpy as np
import pytest

from bignumber.core.domain import (
    FormatOptions,
    NumericKind,
    OverflowPolicy,
    ParseResult,
    ParseStatus,
)
from bignumber.core.parsing import NumberParser, parse_value

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)
FLOAT32_MAX = np.float32(np.finfo(np.float32).max)


@pytest.fixture
def parser():
    """Parser с конфигурацией по умолчанию (CLAMP)."""
    return NumberParser()


@pytest.fixture
def strict_parser():
    """Parser, оставляющий прежнее значение при переполнении."""
    return NumberParser(
        FormatOptions(
            integer_overflow=OverflowPolicy.KEEP_PREVIOUS,
            float_overflow=OverflowPolicy.KEEP_PREVIOUS,
        )
    )


# =============================================================================
# ОЧИСТКА И ПУСТОЙ ВВОД
# =============================================================================


class TestClean:
    """Удаление разделителей"""

    def test_spaces_removed(self, parser) -> None:
        assert parser.clean(" 1 234 567.890 1 ") == "1234567.8901"

    def test_custom_separator_and_spaces_removed(self) -> None:
        parser = NumberParser(FormatOptions(group_separator=","))
        assert parser.clean("1,234 567") == "1234567"

    def test_grouped_text(self, parser) -> None:
        result = parser.parse("1 234 567", NumericKind.INT64, 0)
        assert result == ParseResult(value=np.int64(1234567), status=ParseStatus.PARSED)
        assert isinstance(result.value, np.int64)

    def test_grouped_fraction(self, parser) -> None:
        result = parser.parse("1 234.567 89", NumericKind.FLOAT64, 0.0)
        assert result.value == 1234.56789


class TestEmptyInput:
    """Пустой ввод трактуется как 0"""

    @pytest.mark.parametrize("text", ["", "   ", "\t", " \n "])
    def test_empty_is_zero(self, parser, text: str) -> None:
        result = parser.parse(text, NumericKind.INT32, 42)
        assert result.value == 0
        assert result.status == ParseStatus.EMPTY
        assert result.accepted

    def test_separators_only_is_zero(self) -> None:
        parser = NumberParser(FormatOptions(group_separator=","))
        assert parser.parse(",,", NumericKind.FLOAT64, 5.0).status == ParseStatus.EMPTY


# =============================================================================
# ФОРМАТ
# =============================================================================


class TestFixedFormat:
    """Фиксированный формат ввода"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0.0),
            ("-12", -12.0),
            ("1.", 1.0),
            (".5", 0.5),
            ("-.5", -0.5),
            ("0.000 000 1", 1e-7),
        ],
    )
    def test_accepted_forms(self, parser, text: str, expected: float) -> None:
        result = parser.parse(text, NumericKind.FLOAT64, 99.0)
        assert result.status == ParseStatus.PARSED
        assert result.value == expected

    @pytest.mark.parametrize(
        "text",
        ["-", ".", "-.", "abc", "1e5", "1E5", "+1", "1.2.3", "1,5", "--1", "0x10", "nan", "inf", "١٢٣"],
    )
    def test_malformed_keeps_previous(self, parser, text: str) -> None:
        result = parser.parse(text, NumericKind.FLOAT64, 99.0)
        assert result.value == 99.0
        assert result.status == ParseStatus.MALFORMED
        assert not result.accepted

    def test_malformed_integer_keeps_previous(self, parser) -> None:
        result = parser.parse("12a", NumericKind.INT32, 7)
        assert result.value == 7
        assert isinstance(result.value, np.int32)

    def test_integer_fraction_truncated(self, parser) -> None:
        """Дробная часть целого типа отбрасывается к нулю"""
        assert parser.parse("12.9", NumericKind.INT32, 0).value == 12
        assert parser.parse("-12.9", NumericKind.INT32, 0).value == -12

    def test_int64_parsed_exactly(self, parser) -> None:
        """Большие int64 разбираются без потери точности через double"""
        result = parser.parse("9 223 372 036 854 775 807", NumericKind.INT64, 0)
        assert result.value == 2**63 - 1
        assert result.status == ParseStatus.PARSED

        result = parser.parse("9007199254740993", NumericKind.INT64, 0)
        assert result.value == 9007199254740993

    def test_float32_narrowed(self, parser) -> None:
        result = parser.parse("0.1", NumericKind.FLOAT32, 0)
        assert isinstance(result.value, np.float32)
        assert result.value == np.float32(0.1)


# =============================================================================
# ПЕРЕПОЛНЕНИЕ
# =============================================================================


class TestIntegerOverflow:
    """Переполнение целых типов"""

    def test_clamp_to_max(self, parser) -> None:
        result = parser.parse("99999999999", NumericKind.INT32, 5)
        assert result.value == INT32_MAX
        assert result.status == ParseStatus.CLAMPED
        assert result.accepted

    def test_clamp_to_min(self, parser) -> None:
        result = parser.parse("-99 999 999 999", NumericKind.INT32, 5)
        assert result.value == INT32_MIN
        assert result.status == ParseStatus.CLAMPED

    def test_int64_clamp(self, parser) -> None:
        result = parser.parse("9223372036854775808", NumericKind.INT64, 0)
        assert result.value == 2**63 - 1
        assert result.status == ParseStatus.CLAMPED

    def test_exact_bounds_not_clamped(self, parser) -> None:
        assert parser.parse("2147483647", NumericKind.INT32, 0).status == ParseStatus.PARSED
        assert parser.parse("-2147483648", NumericKind.INT32, 0).status == ParseStatus.PARSED

    def test_keep_previous_policy(self, strict_parser) -> None:
        result = strict_parser.parse("99999999999", NumericKind.INT32, 5)
        assert result.value == 5
        assert result.status == ParseStatus.OVERFLOW_REJECTED
        assert not result.accepted


class TestFloatOverflow:
    """Переполнение float типов"""

    def test_float32_clamp_to_max(self, parser) -> None:
        result = parser.parse("1" + "0" * 39, NumericKind.FLOAT32, 1.0)
        assert result.value == FLOAT32_MAX
        assert result.status == ParseStatus.CLAMPED

    def test_float32_clamp_to_min(self, parser) -> None:
        result = parser.parse("-1" + "0" * 39, NumericKind.FLOAT32, 1.0)
        assert result.value == -FLOAT32_MAX

    def test_float64_clamp(self, parser) -> None:
        result = parser.parse("1" + "0" * 400, NumericKind.FLOAT64, 1.0)
        assert result.value == np.finfo(np.float64).max
        assert result.status == ParseStatus.CLAMPED

    def test_keep_previous_policy(self, strict_parser) -> None:
        result = strict_parser.parse("1" + "0" * 39, NumericKind.FLOAT32, 1.5)
        assert result.value == np.float32(1.5)
        assert result.status == ParseStatus.OVERFLOW_REJECTED

    def test_policies_independent(self) -> None:
        parser = NumberParser(
            FormatOptions(
                integer_overflow=OverflowPolicy.CLAMP,
                float_overflow=OverflowPolicy.KEEP_PREVIOUS,
            )
        )
        assert parser.parse("99999999999", NumericKind.INT32, 0).value == INT32_MAX
        assert parser.parse("1" + "0" * 400, NumericKind.FLOAT64, 2.0).value == 2.0


class TestParseValue:
    """parse_value: только значение"""

    def test_value_returned(self) -> None:
        assert parse_value("1 000", NumericKind.INT32, 0) == 1000

    def test_previous_on_malformed(self) -> None:
        assert parse_value("-", NumericKind.INT32, 17) == 17

    def test_custom_options(self) -> None:
        options = FormatOptions(group_separator="_")
        assert parse_value("1_000_000", NumericKind.INT64, 0, options) == 1_000_000
