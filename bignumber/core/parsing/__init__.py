"""Parsing: текст поля → число."""

from bignumber.core.parsing.parser import NUMBER_PATTERN, NumberParser, parse_value

__all__ = [
    "NUMBER_PATTERN",
    "NumberParser",
    "parse_value",
]
