"""
Formatter — Число → читаемый текст

Порядок:
1. Значение приводится к ширине типа, берётся каноническая десятичная запись
2. Целая часть группируется справа налево, знак перед всеми цифрами
3. Ненулевая дробная часть добавляется после точки, группируется слева направо
4. Precision-loss guard: для float с модулем выше порога дробная часть не выводится
5. Сокращённая форма добавляется, если модуль >= порога сокращения, а для float
   также если строка дробной части ("0.xxx") длиннее fraction_length_trigger

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль выводится как "0": без дробной части и без сокращения
2. Модуль минимального значения int32/int64 вычисляется без переполнения
3. format никогда не бросает исключений для любого значения типа
"""

from numbers import Real

from bignumber.core.domain.numeric_kind import NumericKind
from bignumber.core.domain.options import DEFAULT_FORMAT_OPTIONS, FormatOptions
from bignumber.core.domain.results import FormattedResult
from bignumber.core.formatting.abbreviation import abbreviate
from bignumber.core.formatting.grouping import (
    canonical_decimal,
    group_fraction_digits,
    group_integer_digits,
    split_decimal,
)
from bignumber.core.math.numerical_safeguards import (
    format_non_finite,
    is_valid_float,
    safe_magnitude,
)


class NumberFormatter:
    """Форматирование числового поля с группировкой разрядов.

    Stateless: конфигурация задаётся при создании, результат вычисляется
    заново на каждом вызове.
    """

    def __init__(self, options: FormatOptions = DEFAULT_FORMAT_OPTIONS):
        self.options = options

    def format(self, value: Real, kind: NumericKind) -> FormattedResult:
        """
        Форматирование значения.

        Args:
            value: Значение поля (python или numpy скаляр)
            kind: Тип поля

        Returns:
            FormattedResult с display_text и необязательной сокращённой формой

        Examples:
            >>> NumberFormatter().format(1234567, NumericKind.INT64).display_text
            '1 234 567'
            >>> NumberFormatter().format(-1234, NumericKind.INT32).display_text
            '-1 234'
        """
        native = kind.coerce(value)

        if not is_valid_float(native):
            return FormattedResult(display_text=format_non_finite(native))

        parts = split_decimal(canonical_decimal(native, kind))
        magnitude = safe_magnitude(native)

        fraction_digits = parts.fraction_digits
        precision_limit = self.options.precision_limit_for(kind)
        if precision_limit is not None and magnitude > precision_limit:
            fraction_digits = ""

        separator = self.options.group_separator
        display_text = group_integer_digits(parts.integer_digits, separator)
        if fraction_digits:
            display_text = f"{display_text}.{group_fraction_digits(fraction_digits, separator)}"
        if parts.negative and display_text != "0":
            display_text = "-" + display_text

        abbreviated = None
        if self._should_abbreviate(magnitude, fraction_digits, kind):
            abbreviated = abbreviate(
                native,
                decimal_places=self.options.abbreviation_decimal_places,
                threshold=self.options.abbreviation_threshold,
                suffixes=self.options.suffixes,
            )

        return FormattedResult(display_text=display_text, abbreviated_suffix=abbreviated)

    def _should_abbreviate(self, magnitude: float, fraction_digits: str, kind: NumericKind) -> bool:
        if magnitude == 0:
            return False
        if magnitude >= self.options.abbreviation_threshold:
            return True
        if kind.is_integer or not fraction_digits:
            return False
        # Длина строки дробной компоненты вида "0.xxxx"
        return len("0." + fraction_digits) > self.options.fraction_length_trigger


def format_number(
    value: Real,
    kind: NumericKind,
    options: FormatOptions = DEFAULT_FORMAT_OPTIONS,
) -> FormattedResult:
    """Форматирование без явного создания NumberFormatter."""
    return NumberFormatter(options).format(value, kind)
