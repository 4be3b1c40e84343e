"""Formatting: группировка разрядов, сокращённая форма, Formatter."""

from bignumber.core.formatting.abbreviation import abbreviate
from bignumber.core.formatting.formatter import NumberFormatter, format_number
from bignumber.core.formatting.grouping import (
    canonical_decimal,
    group_fraction_digits,
    group_integer_digits,
    split_decimal,
)

__all__ = [
    "abbreviate",
    "NumberFormatter",
    "format_number",
    "canonical_decimal",
    "group_fraction_digits",
    "group_integer_digits",
    "split_decimal",
]
