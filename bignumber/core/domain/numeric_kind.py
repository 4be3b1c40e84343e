"""
NumericKind — Тип хранения числового поля

Закрытый набор поддерживаемых типов: int32, int64, float32, float64.
Тип определяет ширину хранения, диапазон и порог потери точности (precision-loss guard).

Тип поля задаётся хостом (объявленный тип свойства) и не меняется.
"""

import math
from enum import Enum
from numbers import Real
from typing import Final

import numpy as np

from bignumber.core.math.numerical_safeguards import clamp, to_python_number

# =============================================================================
# PRECISION-LOSS ПОРОГИ
# =============================================================================

# Выше 2^23 float32 не гарантирует точные дробные разряды
FLOAT32_PRECISION_LIMIT: Final[float] = float(2**23)

# Выше 2^52 float64 не гарантирует точные дробные разряды
FLOAT64_PRECISION_LIMIT: Final[float] = float(2**52)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedNumericKind(ValueError):
    """Хост передал тип свойства, который виджет не поддерживает."""


# =============================================================================
# ENUMS
# =============================================================================


class NumericKind(str, Enum):
    """Тип хранения числового поля"""

    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def dtype(self) -> type:
        """numpy тип хранения"""
        return _DTYPES[self]

    @property
    def is_integer(self) -> bool:
        return self in (NumericKind.INT32, NumericKind.INT64)

    @property
    def min_value(self) -> int | float:
        """Минимальное представимое значение (для float — наибольшее по модулю отрицательное)"""
        if self.is_integer:
            return int(np.iinfo(self.dtype).min)
        return float(np.finfo(self.dtype).min)

    @property
    def max_value(self) -> int | float:
        """Максимальное представимое значение"""
        if self.is_integer:
            return int(np.iinfo(self.dtype).max)
        return float(np.finfo(self.dtype).max)

    @property
    def precision_limit(self) -> float | None:
        """
        Порог потери точности по умолчанию.

        Returns:
            2^23 для float32, 2^52 для float64, None для целых типов
        """
        if self == NumericKind.FLOAT32:
            return FLOAT32_PRECISION_LIMIT
        if self == NumericKind.FLOAT64:
            return FLOAT64_PRECISION_LIMIT
        return None

    def coerce(self, value: Real) -> np.generic:
        """
        Приведение значения к ширине типа.

        Целые значения вне диапазона ограничиваются границами типа (clamp),
        без wraparound. Дробная часть целых значений отбрасывается (к нулю).
        Float значения вне диапазона становятся ±inf (IEEE семантика).

        Args:
            value: python или numpy скаляр

        Returns:
            numpy скаляр соответствующего типа
        """
        number = to_python_number(value)

        if self.is_integer:
            if isinstance(number, float):
                if math.isnan(number):
                    number = 0
                elif math.isinf(number):
                    number = self.max_value if number > 0 else self.min_value
                else:
                    number = int(number)
            return self.dtype(clamp(number, self.min_value, self.max_value))

        # python int может быть больше любого double
        if isinstance(number, int) and abs(number) > self.max_value:
            number = math.inf if number > 0 else -math.inf

        with np.errstate(over="ignore"):
            return self.dtype(number)

    @classmethod
    def from_type_name(cls, type_name: str) -> "NumericKind":
        """
        Тип поля по имени типа свойства хоста.

        Args:
            type_name: "int", "long", "float" или "double"

        Returns:
            Соответствующий NumericKind

        Raises:
            UnsupportedNumericKind: Если тип не поддерживается
        """
        try:
            return _HOST_TYPE_NAMES[type_name]
        except KeyError:
            raise UnsupportedNumericKind(
                f"Unsupported property type '{type_name}', "
                f"expected one of {sorted(_HOST_TYPE_NAMES)}"
            ) from None


_DTYPES: Final[dict[NumericKind, type]] = {
    NumericKind.INT32: np.int32,
    NumericKind.INT64: np.int64,
    NumericKind.FLOAT32: np.float32,
    NumericKind.FLOAT64: np.float64,
}

_HOST_TYPE_NAMES: Final[dict[str, NumericKind]] = {
    "int": NumericKind.INT32,
    "long": NumericKind.INT64,
    "float": NumericKind.FLOAT32,
    "double": NumericKind.FLOAT64,
}
