"""BigNumberField — граница с хостом (inspector)

Хост (редактор свойств):
- отдаёт текущее значение поля, его тип и подпись (label)
- показывает display_text вместо сырого числа и подпись с сокращённой формой
- после редактирования возвращает текст, введённый пользователем

Поле:
- render: значение → FieldView (текст поля + подпись "Gold (123.46 M)")
- commit: текст → новое значение; парсинг выполняется только если текст
  отличается от отрисованного display_text (change detection)

Ошибки ввода наружу не выходят: некорректный текст оставляет прежнее значение,
и на следующем render поле снова показывает последнее корректное значение.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Optional

import numpy as np

from bignumber.core.domain.numeric_kind import NumericKind
from bignumber.core.domain.options import DEFAULT_FORMAT_OPTIONS, FormatOptions
from bignumber.core.domain.results import ParseResult
from bignumber.core.formatting.formatter import NumberFormatter
from bignumber.core.parsing.parser import NumberParser
from bignumber.logging_utils import get_logger

logger = get_logger("inspector")


@dataclass(frozen=True)
class FieldView:
    """Что хост рисует на текущем проходе."""

    kind: NumericKind
    display_text: str
    label_text: str
    abbreviation: Optional[str] = None


@dataclass(frozen=True)
class CommitResult:
    """Результат фиксации отредактированного текста."""

    value: np.generic
    changed: bool

    # None если текст не менялся и парсинг не выполнялся
    parse_result: Optional[ParseResult] = None


class BigNumberField:
    """Числовое поле с группировкой разрядов и сокращённой формой в подписи.

    Порядок commit:
    1. Текст совпадает с display_text → значение без изменений, парсинг пропускается
    2. Иначе → NumberParser.parse с текущим значением в роли previous_value
    3. changed = True только если значение действительно изменилось
    """

    def __init__(self, options: FormatOptions = DEFAULT_FORMAT_OPTIONS):
        self.options = options
        self.formatter = NumberFormatter(options)
        self.parser = NumberParser(options)

    def render(self, value: Real, kind: NumericKind, label: str) -> FieldView:
        """Отрисовка поля.

        Args:
            value: текущее значение свойства
            kind: тип свойства
            label: подпись поля

        Returns:
            FieldView с текстом поля и подписью
        """
        formatted = self.formatter.format(value, kind)

        label_text = label
        if formatted.has_abbreviation:
            label_text = f"{label} ({formatted.abbreviated_suffix})"

        return FieldView(
            kind=kind,
            display_text=formatted.display_text,
            label_text=label_text,
            abbreviation=formatted.abbreviated_suffix,
        )

    def commit(self, edited_text: str, view: FieldView, current_value: Real) -> CommitResult:
        """Фиксация текста, введённого пользователем.

        Args:
            edited_text: текст поля после редактирования
            view: FieldView, отрисованный на этом проходе
            current_value: текущее значение свойства

        Returns:
            CommitResult с новым (или прежним) значением
        """
        current = view.kind.coerce(current_value)

        if edited_text == view.display_text:
            return CommitResult(value=current, changed=False)

        result = self.parser.parse(edited_text, view.kind, current)
        changed = bool(result.accepted and result.value != current)
        if changed:
            logger.debug("Field value %s -> %s (%s)", current, result.value, result.status.value)

        return CommitResult(value=result.value, changed=changed, parse_result=result)

    def render_property(self, type_name: str, value: Real, label: str) -> FieldView:
        """Отрисовка по имени типа свойства хоста ("int", "long", "float", "double").

        Raises:
            UnsupportedNumericKind: если тип не поддерживается
        """
        return self.render(value, NumericKind.from_type_name(type_name), label)
