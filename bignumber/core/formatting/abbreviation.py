"""
Abbreviation — Сокращённая форма больших чисел

Сжатие модуля числа в форму "<округлённое значение> <суффикс>":
    123 456 789 123 → "123.46 B"

Алгоритм:
1. Берётся модуль, знак запоминается
2. Ниже порога: значение округляется half-to-even и выводится без суффикса
3. Иначе: выбирается наибольшая ступень таблицы с 1000^exponent <= модуль,
   модуль делится на ступень и округляется half-to-even (точно, в Decimal)
4. Знак возвращается ведущим "-"
"""

from numbers import Real

from bignumber.core.domain.options import (
    ABBREVIATION_DECIMAL_PLACES_DEFAULT,
    ABBREVIATION_THRESHOLD_DEFAULT,
    DEFAULT_SUFFIX_TABLE,
    SuffixTable,
)
from bignumber.core.math.numerical_safeguards import (
    exact_magnitude,
    format_non_finite,
    format_plain,
    is_negative_number,
    is_valid_float,
    round_half_even,
    safe_magnitude,
)


def abbreviate(
    value: Real,
    decimal_places: int = ABBREVIATION_DECIMAL_PLACES_DEFAULT,
    threshold: float = ABBREVIATION_THRESHOLD_DEFAULT,
    suffixes: SuffixTable = DEFAULT_SUFFIX_TABLE,
) -> str:
    """
    Сокращённая форма числа.

    Args:
        value: Число (python или numpy скаляр, в т.ч. минимальное значение int32/int64)
        decimal_places: Знаков после точки
        threshold: Модуль, начиная с которого применяется суффикс
        suffixes: Таблица суффиксов

    Returns:
        Строка вида "123.46 B", "-10 K" или "9999"

    Raises:
        ValueError: Если decimal_places вне допустимого диапазона

    Examples:
        >>> abbreviate(9999, 2)
        '9999'
        >>> abbreviate(10000, 2)
        '10 K'
        >>> abbreviate(123456789123, 2)
        '123.46 B'
    """
    if not is_valid_float(value):
        return format_non_finite(value)

    negative = is_negative_number(value)
    magnitude = float(safe_magnitude(value))
    exact = exact_magnitude(value)

    tier = suffixes.select(magnitude) if magnitude >= threshold else None

    if tier is None:
        text = format_plain(round_half_even(exact, decimal_places))
    else:
        # scaleb сдвигает порядок без округления: 12365 → 12.365
        scaled = round_half_even(exact.scaleb(-3 * tier.exponent), decimal_places)
        text = f"{format_plain(scaled)} {tier.label}"

    if negative and text != "0":
        text = "-" + text

    return text
