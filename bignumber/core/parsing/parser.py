"""
Parser — Текст поля → число

Порядок:
1. Из текста удаляются все разделители групп и пробелы
2. Пустая строка (или только пробельные символы) трактуется как "0"
3. Текст разбирается в фиксированном формате: точка как десятичный разделитель,
   необязательный ведущий минус, без группировки и без экспоненты
4. Переполнение обрабатывается политикой типа (CLAMP или KEEP_PREVIOUS)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. parse никогда не бросает исключений: некорректный ввод → previous_value
2. Целые типы разбираются точно (Decimal), дробная часть отбрасывается к нулю
3. Переполнение никогда не даёт wraparound
"""

import math
import re
from decimal import Decimal
from numbers import Real
from typing import Final

import numpy as np

from bignumber.core.domain.numeric_kind import NumericKind
from bignumber.core.domain.options import (
    DEFAULT_FORMAT_OPTIONS,
    FormatOptions,
    OverflowPolicy,
)
from bignumber.core.domain.results import ParseResult, ParseStatus
from bignumber.logging_utils import get_logger

logger = get_logger("parser")

# Фиксированный формат: "-123", "123.", "123.45", ".5"
NUMBER_PATTERN: Final[re.Pattern] = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)$", re.ASCII)


class NumberParser:
    """Разбор отредактированного текста поля обратно в число.

    Stateless: вся "память" в previous_value, который передаёт вызывающий.
    """

    def __init__(self, options: FormatOptions = DEFAULT_FORMAT_OPTIONS):
        self.options = options

    def clean(self, text: str) -> str:
        """
        Удаление разделителей групп и пробельных символов по краям.

        Examples:
            >>> NumberParser().clean(" 1 234 567.890 1 ")
            '1234567.8901'
        """
        return text.replace(self.options.group_separator, "").replace(" ", "").strip()

    def parse(self, text: str, kind: NumericKind, previous_value: Real) -> ParseResult:
        """
        Разбор текста поля.

        Args:
            text: Текст, введённый пользователем (может быть пустым или неполным)
            kind: Тип поля
            previous_value: Последнее корректное значение поля

        Returns:
            ParseResult: новое значение и статус, либо previous_value при ошибке
        """
        previous = kind.coerce(previous_value)
        cleaned = self.clean(text)

        if not cleaned:
            return ParseResult(value=kind.dtype(0), status=ParseStatus.EMPTY)

        if not NUMBER_PATTERN.match(cleaned):
            logger.debug("Malformed input %r for %s, keeping %s", text, kind.value, previous)
            return ParseResult(value=previous, status=ParseStatus.MALFORMED)

        if kind.is_integer:
            return self._parse_integer(cleaned, kind, previous)
        return self._parse_float(cleaned, kind, previous)

    def _parse_integer(self, cleaned: str, kind: NumericKind, previous: np.generic) -> ParseResult:
        # Decimal точен для любой длины; int() отбрасывает дробь к нулю
        number = int(Decimal(cleaned))

        if kind.min_value <= number <= kind.max_value:
            return ParseResult(value=kind.dtype(number), status=ParseStatus.PARSED)

        return self._overflow(number, kind, previous)

    def _parse_float(self, cleaned: str, kind: NumericKind, previous: np.generic) -> ParseResult:
        number = float(cleaned)

        if math.isfinite(number):
            with np.errstate(over="ignore"):
                native = kind.dtype(number)
            if np.isfinite(native):
                return ParseResult(value=native, status=ParseStatus.PARSED)

        return self._overflow(-1 if cleaned.startswith("-") else 1, kind, previous)

    def _overflow(self, number: int | float, kind: NumericKind, previous: np.generic) -> ParseResult:
        policy = self.options.overflow_policy_for(kind)

        if policy == OverflowPolicy.KEEP_PREVIOUS:
            logger.debug("Overflow for %s, keeping %s", kind.value, previous)
            return ParseResult(value=previous, status=ParseStatus.OVERFLOW_REJECTED)

        bound = kind.max_value if number > 0 else kind.min_value
        logger.debug("Overflow for %s, clamped to %s", kind.value, bound)
        return ParseResult(value=kind.dtype(bound), status=ParseStatus.CLAMPED)


def parse_value(
    text: str,
    kind: NumericKind,
    previous_value: Real,
    options: FormatOptions = DEFAULT_FORMAT_OPTIONS,
) -> np.generic:
    """Разбор текста, только значение (previous_value при ошибке)."""
    return NumberParser(options).parse(text, kind, previous_value).value
