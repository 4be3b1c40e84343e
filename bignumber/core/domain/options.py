"""
FormatOptions — Конфигурация форматирования и парсинга

Immutable Pydantic модели:
- SuffixTable: упорядоченная таблица суффиксов (степень 1000 → метка)
- FormatOptions: разделитель групп, порог и точность сокращения,
  precision-loss пороги, политика переполнения

Конфигурация передаётся в Formatter/Parser при создании. Глобального
изменяемого состояния нет, DEFAULT_FORMAT_OPTIONS неизменяем.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Final, Mapping

from pydantic import BaseModel, Field, field_validator

from bignumber.core.contracts import validate_format_options
from bignumber.core.domain.numeric_kind import (
    FLOAT32_PRECISION_LIMIT,
    FLOAT64_PRECISION_LIMIT,
    NumericKind,
)
from bignumber.core.math.numerical_safeguards import MAX_ROUND_DECIMAL_PLACES
from bignumber.logging_utils import get_logger

logger = get_logger("options")

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Символ разделения групп разрядов. '.' занята десятичной точкой.
GROUP_SEPARATOR_DEFAULT: Final[str] = " "

# Начиная с этого модуля к значению добавляется сокращённая форма
ABBREVIATION_THRESHOLD_DEFAULT: Final[float] = 10_000

# Знаков после точки в сокращённой форме
ABBREVIATION_DECIMAL_PLACES_DEFAULT: Final[int] = 2

# Дробная часть float длиннее этого (в строковой форме "0.xxx") тоже включает сокращение
FRACTION_LENGTH_TRIGGER_DEFAULT: Final[int] = 4

# Символы, которые не могут быть разделителем: точка, знак, цифры
FORBIDDEN_SEPARATORS: Final[str] = ".-+0123456789"


# =============================================================================
# ENUMS
# =============================================================================


class OverflowPolicy(str, Enum):
    """Поведение парсера при выходе значения за диапазон типа"""

    CLAMP = "clamp"
    KEEP_PREVIOUS = "keep_previous"


# =============================================================================
# SUFFIX TABLE
# =============================================================================


class SuffixTier(BaseModel):
    """Ступень сокращения: 1000^exponent → label"""

    exponent: int = Field(..., ge=1, description="Степень 1000")
    label: str = Field(..., min_length=1, description="Метка суффикса (например, 'K')")

    model_config = {"frozen": True}

    @property
    def scale(self) -> float:
        """Значение ступени: 1000^exponent"""
        return float(1000**self.exponent)


class SuffixTable(BaseModel):
    """
    Упорядоченная таблица суффиксов.

    Инварианты:
    - Не пустая, первая ступень: exponent 1 (тысяча)
    - Степени идут подряд без пропусков: 1, 2, 3, ...
    - Метки уникальны
    """

    tiers: tuple[SuffixTier, ...] = Field(..., min_length=1, description="Ступени по возрастанию")

    model_config = {"frozen": True}

    @field_validator("tiers")
    @classmethod
    def validate_contiguous(cls, v: tuple[SuffixTier, ...]) -> tuple[SuffixTier, ...]:
        """Проверка, что степени идут подряд начиная с 1"""
        for expected, tier in enumerate(v, start=1):
            if tier.exponent != expected:
                raise ValueError(
                    f"suffix exponents must be contiguous from 1, "
                    f"got {tier.exponent} at position {expected}"
                )

        labels = [tier.label for tier in v]
        if len(set(labels)) != len(labels):
            raise ValueError(f"suffix labels must be unique, got {labels}")

        return v

    @classmethod
    def from_labels(cls, labels: list[str]) -> "SuffixTable":
        """Таблица из меток по порядку: labels[0] — тысячи, labels[1] — миллионы, ..."""
        return cls(
            tiers=tuple(
                SuffixTier(exponent=exponent, label=label)
                for exponent, label in enumerate(labels, start=1)
            )
        )

    @property
    def largest(self) -> SuffixTier:
        return self.tiers[-1]

    def select(self, magnitude: float) -> SuffixTier | None:
        """
        Выбор ступени для модуля числа.

        Сканирование по возрастанию; выбирается последняя ступень,
        для которой magnitude >= 1000^exponent. Значения больше последней
        ступени остаются на последней ступени.

        Args:
            magnitude: Модуль числа (>= 0)

        Returns:
            SuffixTier или None, если magnitude < 1000
        """
        chosen = None
        for tier in self.tiers:
            if magnitude >= tier.scale:
                chosen = tier
            else:
                break
        return chosen


# Покрывает значения до 10^33 и выше (Dc = 1000^11)
DEFAULT_SUFFIX_TABLE: Final[SuffixTable] = SuffixTable.from_labels(
    ["K", "M", "B", "T", "Qa", "Qi", "Sx", "Sp", "Oc", "No", "Dc"]
)


# =============================================================================
# FORMAT OPTIONS
# =============================================================================


class FormatOptions(BaseModel):
    """
    Конфигурация форматирования и парсинга числовых полей.

    Immutable модель (frozen=True). Передаётся в NumberFormatter,
    NumberParser и BigNumberField при создании.
    """

    group_separator: str = Field(
        GROUP_SEPARATOR_DEFAULT,
        min_length=1,
        max_length=1,
        description="Разделитель групп разрядов (один символ)",
    )
    abbreviation_threshold: float = Field(
        ABBREVIATION_THRESHOLD_DEFAULT,
        gt=0,
        description="Минимальный модуль значения для сокращённой формы",
    )
    abbreviation_decimal_places: int = Field(
        ABBREVIATION_DECIMAL_PLACES_DEFAULT,
        ge=0,
        le=MAX_ROUND_DECIMAL_PLACES,
        description="Знаков после точки в сокращённой форме",
    )
    fraction_length_trigger: int = Field(
        FRACTION_LENGTH_TRIGGER_DEFAULT,
        ge=0,
        description="Длина строки дробной части float, после которой включается сокращение",
    )
    float32_precision_limit: float = Field(
        FLOAT32_PRECISION_LIMIT, gt=0, description="Precision-loss порог float32"
    )
    float64_precision_limit: float = Field(
        FLOAT64_PRECISION_LIMIT, gt=0, description="Precision-loss порог float64"
    )
    integer_overflow: OverflowPolicy = Field(
        OverflowPolicy.CLAMP, description="Политика переполнения int32/int64"
    )
    float_overflow: OverflowPolicy = Field(
        OverflowPolicy.CLAMP, description="Политика переполнения float32/float64"
    )
    suffixes: SuffixTable = Field(DEFAULT_SUFFIX_TABLE, description="Таблица суффиксов")

    model_config = {"frozen": True}

    @field_validator("group_separator")
    @classmethod
    def validate_group_separator(cls, v: str) -> str:
        """Разделитель не может совпадать с точкой, знаком или цифрой"""
        if v in FORBIDDEN_SEPARATORS:
            raise ValueError(f"group_separator cannot be {v!r}")
        return v

    @field_validator("suffixes", mode="before")
    @classmethod
    def coerce_suffix_list(cls, v: Any) -> Any:
        """Список ступеней из конфигурации → SuffixTable"""
        if isinstance(v, (list, tuple)):
            return {"tiers": v}
        return v

    def precision_limit_for(self, kind: NumericKind) -> float | None:
        """Precision-loss порог для типа (None для целых)"""
        if kind == NumericKind.FLOAT32:
            return self.float32_precision_limit
        if kind == NumericKind.FLOAT64:
            return self.float64_precision_limit
        return None

    def overflow_policy_for(self, kind: NumericKind) -> OverflowPolicy:
        if kind.is_integer:
            return self.integer_overflow
        return self.float_overflow

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> "FormatOptions":
        """
        Создание конфигурации из словаря (например, из JSON файла).

        Сначала данные проверяются JSON Schema контрактом format_options,
        затем Pydantic валидаторами модели.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют контракту
            pydantic.ValidationError: Если нарушены ограничения модели
        """
        validate_format_options(dict(data))
        return cls.model_validate(dict(data))


DEFAULT_FORMAT_OPTIONS: Final[FormatOptions] = FormatOptions()


def load_format_options(path: str | Path) -> FormatOptions:
    """
    Загрузка конфигурации из JSON файла.

    Args:
        path: Путь к JSON файлу

    Returns:
        FormatOptions

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
    """
    config_path = Path(path)
    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    options = FormatOptions.from_config(data)
    logger.info("Loaded format options from %s", config_path)
    return options
