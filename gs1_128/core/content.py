"""
Content checks applied to every resolved GS1-128 element.

In parse order:
1. check_conformity: kind-of-data grammar and minimum length
2. check_checksum: add or verify the trailing mod-10 check digit
3. encode_decimal_point: move a literal decimal point into the AI
"""

from __future__ import annotations

from typing import Tuple

from .ai_registry import AIData, KindOfData
from .errors import (
    ChecksumMismatchError,
    ContentTooShortError,
    InvalidDateError,
    InvalidDateTimeError,
    NonNumericContentError,
    UnexpectedDecimalPointError,
)
from .resolver import Resolution, ResolutionStatus
from ..validators.validators import (
    calculate_check_digit_mod10,
    is_digits,
    split_decimal_point,
    validate_check_digit,
    validate_date,
    validate_datetime,
    validate_numeric,
)


def get_ai_content_checksum(content: str) -> int:
    """Mod-10 check digit for AI content (without the AI code)."""
    return calculate_check_digit_mod10(content)


def check_conformity(content: str, identifier: str, ai_data: AIData) -> str:
    """
    Validate content against the AI's kind of data and minimum length.

    Returns:
        The content, with decimal commas normalized for numeric AIs.

    Raises:
        NonNumericContentError, InvalidDateError, InvalidDateTimeError,
        ContentTooShortError
    """
    kind = ai_data.kind_of_data

    if kind is KindOfData.NUMERIC:
        result = validate_numeric(content)
        content = result.meta['normalized']
        if not result.valid:
            raise NonNumericContentError(
                f'The value of "{identifier}" must be numerical.', ai=identifier
            )
    elif kind is KindOfData.DATETIME:
        result = validate_datetime(content)
        if not result.valid:
            raise InvalidDateTimeError(
                f'The value of "{identifier}" must be in YYMMDDHHMMSS format. '
                f'Some AI might not allow seconds. ({result.errors[0]})',
                ai=identifier,
            )
    elif kind is KindOfData.DATE:
        result = validate_date(content)
        if not result.valid:
            raise InvalidDateError(
                f'The value of "{identifier}" must be in YYMMDD format. ({result.errors[0]})',
                ai=identifier,
            )

    # A missing check digit is computed later, so one character less is enough
    required = ai_data.min_length - (1 if ai_data.checksum else 0)
    if len(content) < required:
        if ai_data.min_length == ai_data.max_length:
            message = f'The value of "{identifier}" must contain {ai_data.min_length} character(s).'
        else:
            message = (
                f'The value of "{identifier}" must contain between '
                f'{ai_data.min_length} and {ai_data.max_length} character(s).'
            )
        raise ContentTooShortError(message, ai=identifier)

    return content


def check_checksum(content: str, identifier: str, ai_data: AIData) -> Tuple[str, int]:
    """
    Add or verify the check digit of a checksum AI.

    Content one character short of the minimum gets its check digit
    appended; content at the minimum has its last digit verified.

    Returns:
        (content, checksum_characters_added)

    Raises:
        NonNumericContentError: Check digit cannot be computed over the content
        ChecksumMismatchError: Trailing digit is not the expected check digit
    """
    if not ai_data.checksum:
        return content, 0

    length = len(content)
    if length not in (ai_data.min_length - 1, ai_data.min_length):
        return content, 0

    if not is_digits(content):
        raise NonNumericContentError(
            f'The value of "{identifier}" must be numerical to carry a check digit.',
            ai=identifier,
        )

    if length == ai_data.min_length - 1:
        return content + str(get_ai_content_checksum(content)), 1

    result = validate_check_digit(content)
    if not result.valid:
        expected = result.meta['calculated_check_digit']
        raise ChecksumMismatchError(
            f'The checksum of "({identifier}) {content}" must be: {expected}',
            ai=identifier,
            expected=expected,
        )

    return content, 0


def encode_decimal_point(content: str, resolution: Resolution) -> Tuple[str, str, int]:
    """
    Apply the decimal position of a decimal-variable AI.

    With an explicit decimal digit in the AI ("3102") the content must be a
    whole number. With the placeholder ("310y") the number of digits after
    the point replaces the placeholder and the point is removed.

    Returns:
        (identifier, content, decimal_points_removed)

    Raises:
        UnexpectedDecimalPointError: Point in content of an explicit AI
    """
    identifier = resolution.identifier

    if resolution.status is ResolutionStatus.DECIMAL_FIXED:
        if '.' in content:
            raise UnexpectedDecimalPointError(
                f'The value of "{identifier}" must be a whole number; the decimal '
                f'position is already given by the identifier.',
                ai=identifier,
            )
        return identifier, content, 0

    if resolution.status is ResolutionStatus.DECIMAL_PENDING:
        if content.count('.') > 1:
            raise UnexpectedDecimalPointError(
                f'The value of "{identifier}" can contain only one decimal point.',
                ai=identifier,
            )
        decimals, stripped = split_decimal_point(content)
        if decimals > 9:
            raise UnexpectedDecimalPointError(
                f'The value of "{identifier}" can have at most 9 digits after the decimal point.',
                ai=identifier,
            )
        removed = len(content) - len(stripped)
        return identifier[:-1] + str(decimals), stripped, removed

    return identifier, content, 0
