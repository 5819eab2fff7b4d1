"""
GS1 Validation Functions

Low-level checks used by the GS1-128 content layer:
- Mod10 check digit calculation and validation (GTIN, SSCC, GLN, ...)
- Numeric content with an optional embedded decimal point
- YYMMDD dates and YYMMDDHH[MM[SS]] date/times
- Decimal point position for the variable-decimal AI families

Validators never raise on bad content; they return a ValidationResult and
leave the decision to the caller.

Based on GS1 General Specifications.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


NUMERIC = frozenset('0123456789')

# Precompiled regex patterns for content grammars
PATTERNS = {
    'numeric_with_point': re.compile(r'[0-9.]+'),
    'date_yymmdd': re.compile(r'[0-9]{6}'),
    'datetime_yymmddhh': re.compile(r'[0-9]{8,12}'),
}


def is_digits(value: str) -> bool:
    """True for a non-empty string of ASCII digits only."""
    return bool(value) and all(c in NUMERIC for c in value)


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)
    """
    if not is_digits(digits):
        raise ValueError("Input must be a non-empty numeric string")

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def validate_check_digit(value: str) -> ValidationResult:
    """
    Validate the trailing GS1 check digit of a numeric value.

    Args:
        value: The complete value including check digit

    Returns:
        ValidationResult with check digit status in meta
    """
    result = ValidationResult(valid=True)

    if not is_digits(value):
        result.valid = False
        result.errors.append("Value must be numeric for check digit validation")
        return result

    if len(value) < 2:
        result.valid = False
        result.errors.append("Value too short for check digit validation")
        return result

    data_digits = value[:-1]
    provided_check = int(value[-1])
    calculated_check = calculate_check_digit_mod10(data_digits)

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result


def validate_numeric(value: str) -> ValidationResult:
    """
    Validate numeric content.

    Decimal commas are accepted and normalized to points; the normalized
    string is returned in ``meta['normalized']``.
    """
    normalized = value.replace(',', '.')
    result = ValidationResult(valid=True, meta={'normalized': normalized})

    if not PATTERNS['numeric_with_point'].fullmatch(normalized):
        result.valid = False
        result.errors.append("Value contains non-numeric characters")

    return result


def _check_month_day(mm: int, dd: int, result: ValidationResult) -> bool:
    # Day 00 means "unspecified day"; the day is not checked against the
    # length of the month
    if mm < 1 or mm > 12:
        result.valid = False
        result.errors.append(f"Invalid month: {mm}")
        return False

    if dd > 31:
        result.valid = False
        result.errors.append(f"Invalid day: {dd}")
        return False

    return True


def _date_meta(yy: int, mm: int, dd: int, century_pivot: int) -> Dict[str, Any]:
    year = 1900 + yy if yy >= century_pivot else 2000 + yy
    meta: Dict[str, Any] = {'year': year, 'month': mm, 'day': dd}
    if dd == 0:
        meta['day_unspecified'] = True
    else:
        meta['iso_date'] = f"{year:04d}-{mm:02d}-{dd:02d}"
    return meta


def validate_date(value: str, century_pivot: int = 51) -> ValidationResult:
    """
    Validate a YYMMDD date.

    Day 00 is accepted (month and year only).

    Century pivot (default 51):
    - YY >= 51: 19YY (1951-1999)
    - YY < 51: 20YY (2000-2050)

    Returns:
        ValidationResult with parsed date parts in meta
    """
    result = ValidationResult(valid=True)

    if not PATTERNS['date_yymmdd'].fullmatch(value):
        result.valid = False
        result.errors.append(f"YYMMDD date must be 6 digits, got {value!r}")
        return result

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])

    if not _check_month_day(mm, dd, result):
        return result

    result.meta.update(_date_meta(yy, mm, dd, century_pivot))
    return result


def validate_datetime(value: str, century_pivot: int = 51) -> ValidationResult:
    """
    Validate a YYMMDDHH[MM[SS]] date/time.

    Minutes are read when at least 10 digits are present, seconds when 12 are.
    """
    result = ValidationResult(valid=True)

    if not PATTERNS['datetime_yymmddhh'].fullmatch(value):
        result.valid = False
        result.errors.append(f"YYMMDDHH date/time must be 8 to 12 digits, got {value!r}")
        return result

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])
    hh = int(value[6:8])
    minute: Optional[int] = int(value[8:10]) if len(value) >= 10 else None
    second: Optional[int] = int(value[10:12]) if len(value) >= 12 else None

    if not _check_month_day(mm, dd, result):
        return result

    if hh > 23:
        result.valid = False
        result.errors.append(f"Invalid hour: {hh}")
        return result

    if minute is not None and minute > 59:
        result.valid = False
        result.errors.append(f"Invalid minute: {minute}")
        return result

    if second is not None and second > 59:
        result.valid = False
        result.errors.append(f"Invalid second: {second}")
        return result

    result.meta.update(_date_meta(yy, mm, dd, century_pivot))
    result.meta['hour'] = hh
    if minute is not None:
        result.meta['minute'] = minute
    if second is not None:
        result.meta['second'] = second
    return result


def split_decimal_point(value: str) -> Tuple[int, str]:
    """
    Locate the decimal point of a numeric value and remove it.

    Without a point, the value is taken as a whole number.

    Example: "12.34" -> (2, "1234"), "1234" -> (0, "1234")

    Returns:
        (digits_after_point, value_without_point)
    """
    pos = value.find('.')
    if pos == -1:
        pos = len(value) - 1

    return len(value) - (pos + 1), value.replace('.', '')


def decode_decimal_value(value: str, decimal_positions: int) -> str:
    """
    Decode a numeric value with implied decimal positions.

    Reverse of split_decimal_point, used for display.

    Example: AI 3102, value "001234" -> "0012.34"
    """
    if not is_digits(value):
        raise ValueError("Value must be numeric")

    if decimal_positions == 0:
        return value

    if len(value) <= decimal_positions:
        value = value.zfill(decimal_positions + 1)

    return f"{value[:-decimal_positions]}.{value[-decimal_positions:]}"
