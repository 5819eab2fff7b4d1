"""
Validation modules for the GS1-128 formatter.
"""

from .validators import (
    ValidationResult,
    is_digits,
    calculate_check_digit_mod10,
    validate_check_digit,
    validate_numeric,
    validate_date,
    validate_datetime,
    split_decimal_point,
    decode_decimal_value,
)

__all__ = [
    "ValidationResult",
    "is_digits",
    "calculate_check_digit_mod10",
    "validate_check_digit",
    "validate_numeric",
    "validate_date",
    "validate_datetime",
    "split_decimal_point",
    "decode_decimal_value",
]
