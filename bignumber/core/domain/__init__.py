"""
Domain models and value objects.

Тип поля, конфигурация форматирования, таблица суффиксов, результаты.
"""

from bignumber.core.domain.numeric_kind import (
    FLOAT32_PRECISION_LIMIT,
    FLOAT64_PRECISION_LIMIT,
    NumericKind,
    UnsupportedNumericKind,
)
from bignumber.core.domain.options import (
    ABBREVIATION_DECIMAL_PLACES_DEFAULT,
    ABBREVIATION_THRESHOLD_DEFAULT,
    DEFAULT_FORMAT_OPTIONS,
    DEFAULT_SUFFIX_TABLE,
    FRACTION_LENGTH_TRIGGER_DEFAULT,
    GROUP_SEPARATOR_DEFAULT,
    FormatOptions,
    OverflowPolicy,
    SuffixTable,
    SuffixTier,
    load_format_options,
)
from bignumber.core.domain.results import FormattedResult, ParseResult, ParseStatus

__all__ = [
    # Numeric kind
    "FLOAT32_PRECISION_LIMIT",
    "FLOAT64_PRECISION_LIMIT",
    "NumericKind",
    "UnsupportedNumericKind",
    # Options
    "ABBREVIATION_DECIMAL_PLACES_DEFAULT",
    "ABBREVIATION_THRESHOLD_DEFAULT",
    "DEFAULT_FORMAT_OPTIONS",
    "DEFAULT_SUFFIX_TABLE",
    "FRACTION_LENGTH_TRIGGER_DEFAULT",
    "GROUP_SEPARATOR_DEFAULT",
    "FormatOptions",
    "OverflowPolicy",
    "SuffixTable",
    "SuffixTier",
    "load_format_options",
    # Results
    "FormattedResult",
    "ParseResult",
    "ParseStatus",
]
