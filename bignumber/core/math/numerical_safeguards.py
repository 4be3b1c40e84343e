"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость операций форматирования и парсинга:
- Width-safe модуль числа (без переполнения на минимальном значении типа)
- NaN/Inf проверки для float
- Ограничение значения диапазоном (clamp)
- Округление half-to-even (banker's rounding)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вычисление модуля никогда не переполняется (int32/int64 min → корректный модуль)
2. NaN/Inf никогда не пропагируют в расчёт порогов (проверяются заранее)
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from numbers import Integral, Real
from typing import Final

import numpy as np

# =============================================================================
# ПАРАМЕТРЫ ОКРУГЛЕНИЯ
# =============================================================================

# Максимальное число знаков после точки при округлении.
# Больше 15 значащих знаков double не гарантирует.
MAX_ROUND_DECIMAL_PLACES: Final[int] = 15


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение (python или numpy скаляр)

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    if isinstance(value, (Integral, np.integer)):
        return True
    return math.isfinite(float(value))


# =============================================================================
# WIDTH-SAFE МОДУЛЬ
# =============================================================================


def to_python_number(value: Real) -> int | float:
    """
    Перевод numpy/python скаляра в python int или float.

    Python int не ограничен по ширине, поэтому дальнейшая арифметика
    не может переполниться (в отличие от np.int32/np.int64).
    """
    if isinstance(value, (Integral, np.integer)):
        return int(value)
    return float(value)


def safe_magnitude(value: Real) -> int | float:
    """
    Модуль числа без переполнения на минимальном значении типа.

    np.abs(np.int32(-2**31)) возвращает -2**31 (wraparound). Здесь значение
    сначала переводится в неограниченный python int, и только затем берётся модуль.

    Args:
        value: Исходное значение (python или numpy скаляр)

    Returns:
        abs(value) как python int или float

    Examples:
        >>> safe_magnitude(np.int32(-2**31))
        2147483648
        >>> safe_magnitude(-1.5)
        1.5
    """
    return abs(to_python_number(value))


def exact_magnitude(value: Real) -> Decimal:
    """
    Точный десятичный модуль числа.

    Целые переводятся без потерь, float берётся по кратчайшей записи своей
    ширины (str(np.float32(0.1)) == "0.1"), поэтому деление на 1000^n и
    округление работают с тем десятичным значением, которое видит пользователь.

    Examples:
        >>> exact_magnitude(np.int32(-2**31))
        Decimal('2147483648')
        >>> exact_magnitude(-12.365)
        Decimal('12.365')
    """
    if isinstance(value, (Integral, np.integer)):
        return Decimal(abs(int(value)))
    return Decimal(str(value)).copy_abs()


def is_negative_number(value: Real) -> bool:
    """Знак числа; -0.0 считается неотрицательным."""
    return to_python_number(value) < 0


# =============================================================================
# ОГРАНИЧЕНИЕ И ОКРУГЛЕНИЕ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def round_half_even(value: Decimal | Real, decimal_places: int) -> Decimal:
    """
    Округление до decimal_places знаков по правилу half-to-even.

    Округляется десятичное значение, а не его двоичное приближение:
    12.365 → 12.36 (round(12.365, 2) даёт 12.37, т.к. double 12.365 чуть больше).
    float переводится через кратчайшую запись str(value).

    Args:
        value: Значение для округления (Decimal, int или float)
        decimal_places: Количество знаков после точки (0..MAX_ROUND_DECIMAL_PLACES)

    Returns:
        Округлённое значение (Decimal с ровно decimal_places знаками)

    Raises:
        ValueError: Если decimal_places вне допустимого диапазона

    Examples:
        >>> round_half_even(Decimal("12.365"), 2)
        Decimal('12.36')
        >>> round_half_even(2.5, 0)
        Decimal('2')
    """
    if decimal_places < 0 or decimal_places > MAX_ROUND_DECIMAL_PLACES:
        raise ValueError(
            f"decimal_places must be in [0, {MAX_ROUND_DECIMAL_PLACES}], got {decimal_places}"
        )

    number = value if isinstance(value, Decimal) else Decimal(str(value))

    with localcontext() as ctx:
        # quantize требует, чтобы все цифры результата помещались в точность контекста
        ctx.prec = max(ctx.prec, number.adjusted() + decimal_places + 2)
        return number.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_EVEN)


def format_non_finite(value: float) -> str:
    """Текстовая форма NaN/Inf: "NaN", "inf", "-inf"."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    return "inf" if number > 0 else "-inf"


def format_plain(value: Decimal | float) -> str:
    """
    Позиционная запись числа без экспоненты и без лишних нулей.

    Examples:
        >>> format_plain(10.0)
        '10'
        >>> format_plain(Decimal("123.460"))
        '123.46'
        >>> format_plain(1e21)
        '1000000000000000000000'
    """
    if isinstance(value, Decimal):
        text = format(value, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    else:
        text = np.format_float_positional(np.float64(value), trim="-")

    if text == "-0":
        return "0"
    return text
