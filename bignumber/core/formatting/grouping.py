"""
Digit Grouping — Группировка разрядов

Каноническая десятичная запись числа в ширине его типа и вставка
разделителя каждые 3 цифры:
- целая часть: справа налево ("1234567" → "1 234 567")
- дробная часть: слева направо сразу после точки ("56789" → "567 89")

Знак стоит перед всеми цифрами и разделителем не отделяется.
"""

from typing import Final, NamedTuple

import numpy as np

from bignumber.core.domain.numeric_kind import NumericKind

GROUP_SIZE: Final[int] = 3


class DecimalParts(NamedTuple):
    """Каноническая запись числа, разбитая на знак, целые и дробные цифры"""

    negative: bool
    integer_digits: str
    fraction_digits: str


def canonical_decimal(value: np.generic, kind: NumericKind) -> str:
    """
    Каноническая десятичная запись значения в ширине типа.

    Для float: кратчайшая запись, однозначно восстанавливающая значение
    именно этой ширины (float32 1234.56789 → "1234.5679"), всегда позиционная,
    без экспоненты.

    Args:
        value: Конечное значение, уже приведённое к типу (kind.coerce)
        kind: Тип поля

    Returns:
        Строка вида "-123.456" без завершающих нулей и без точки для целых
    """
    if kind.is_integer:
        return str(int(value))
    return np.format_float_positional(kind.dtype(value), trim="-")


def split_decimal(text: str) -> DecimalParts:
    """
    Разбиение канонической записи на знак, целую и дробную части.

    Examples:
        >>> split_decimal("-1234.5")
        DecimalParts(negative=True, integer_digits='1234', fraction_digits='5')
    """
    negative = text.startswith("-")
    unsigned = text[1:] if negative else text
    integer_digits, _, fraction_digits = unsigned.partition(".")
    return DecimalParts(negative, integer_digits or "0", fraction_digits.rstrip("0"))


def group_integer_digits(digits: str, separator: str) -> str:
    """
    Группировка цифр целой части справа налево.

    Examples:
        >>> group_integer_digits("1234567", " ")
        '1 234 567'
        >>> group_integer_digits("123", " ")
        '123'
    """
    head = len(digits) % GROUP_SIZE or GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(digits[i : i + GROUP_SIZE] for i in range(head, len(digits), GROUP_SIZE))
    return separator.join(groups)


def group_fraction_digits(digits: str, separator: str) -> str:
    """
    Группировка цифр дробной части слева направо.

    Examples:
        >>> group_fraction_digits("56789", " ")
        '567 89'
    """
    return separator.join(digits[i : i + GROUP_SIZE] for i in range(0, len(digits), GROUP_SIZE))
