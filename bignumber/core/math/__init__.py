"""
Core math modules для bignumber

Численные примитивы: width-safe модуль, clamp, округление half-to-even.
"""

from bignumber.core.math.numerical_safeguards import (
    # Rounding constants
    MAX_ROUND_DECIMAL_PLACES,
    # NaN/Inf checks
    is_valid_float,
    # Width-safe magnitude
    exact_magnitude,
    is_negative_number,
    safe_magnitude,
    to_python_number,
    # Utilities
    clamp,
    format_non_finite,
    format_plain,
    round_half_even,
)

__all__ = [
    # Rounding constants
    "MAX_ROUND_DECIMAL_PLACES",
    # NaN/Inf checks
    "is_valid_float",
    # Width-safe magnitude
    "exact_magnitude",
    "is_negative_number",
    "safe_magnitude",
    "to_python_number",
    # Utilities
    "clamp",
    "format_non_finite",
    "format_plain",
    "round_half_even",
]
