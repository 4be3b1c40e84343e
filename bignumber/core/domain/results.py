"""
Results — Результаты форматирования и парсинга

FormattedResult: проекция числа в текст, вычисляется заново на каждом рендере.
ParseResult: явный результат парсинга (значение + статус) вместо
перехваченного и отброшенного исключения.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np


class ParseStatus(str, Enum):
    """Исход парсинга текста поля"""

    PARSED = "parsed"
    EMPTY = "empty"  # пустой ввод трактуется как "0"
    CLAMPED = "clamped"  # переполнение, значение ограничено границей типа
    OVERFLOW_REJECTED = "overflow_rejected"  # переполнение, оставлено предыдущее значение
    MALFORMED = "malformed"  # текст не число, оставлено предыдущее значение


@dataclass(frozen=True)
class FormattedResult:
    """Отображаемый текст числа и необязательная сокращённая форма."""

    display_text: str
    abbreviated_suffix: Optional[str] = None

    @property
    def has_abbreviation(self) -> bool:
        return self.abbreviated_suffix is not None


@dataclass(frozen=True)
class ParseResult:
    """Результат парсинга.

    value всегда валидное значение нужного типа: либо разобранное,
    либо previous_value без изменений.
    """

    value: np.generic
    status: ParseStatus

    @property
    def accepted(self) -> bool:
        """True если значение получено из текста (а не оставлено прежним)"""
        return self.status in (ParseStatus.PARSED, ParseStatus.EMPTY, ParseStatus.CLAMPED)
