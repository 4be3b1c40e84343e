"""
Contract Validation Module

Валидация JSON конфигурации через JSON Schema контракты.
"""

from .validators import (
    ContractValidator,
    FormatOptionsValidator,
    SchemaLoader,
    validate_format_options,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FormatOptionsValidator",
    # Functions
    "validate_format_options",
]
