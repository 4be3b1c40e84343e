"""
bignumber — группировка разрядов и сокращение больших чисел для полей инспектора.

    >>> from bignumber import NumberFormatter, NumericKind
    >>> NumberFormatter().format(123456789, NumericKind.INT32)
    FormattedResult(display_text='123 456 789', abbreviated_suffix='123.46 M')
"""

from bignumber.core.domain import (
    DEFAULT_FORMAT_OPTIONS,
    FormatOptions,
    FormattedResult,
    NumericKind,
    OverflowPolicy,
    ParseResult,
    ParseStatus,
    SuffixTable,
    load_format_options,
)
from bignumber.core.formatting import NumberFormatter, abbreviate, format_number
from bignumber.core.parsing import NumberParser, parse_value
from bignumber.inspector import BigNumberField, CommitResult, FieldView

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_FORMAT_OPTIONS",
    "FormatOptions",
    "FormattedResult",
    "NumericKind",
    "OverflowPolicy",
    "ParseResult",
    "ParseStatus",
    "SuffixTable",
    "load_format_options",
    "NumberFormatter",
    "abbreviate",
    "format_number",
    "NumberParser",
    "parse_value",
    "BigNumberField",
    "CommitResult",
    "FieldView",
]
