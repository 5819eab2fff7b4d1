"""
Typed parse failures for the GS1-128 formatter.

Every failure is terminal for the current parse call. The ``code`` attribute
mirrors the exception class so callers serializing errors (CLI, JSON) do not
need to switch on types.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error codes."""
    UNKNOWN_IDENTIFIER = "UNKNOWN_IDENTIFIER"
    MALFORMED_IDENTIFIER = "MALFORMED_IDENTIFIER"
    DOUBLE_ARRAY_NOT_ALLOWED = "DOUBLE_ARRAY_NOT_ALLOWED"
    DOUBLE_ARRAY_WRONG_ARITY = "DOUBLE_ARRAY_WRONG_ARITY"
    NON_NUMERIC_CONTENT = "NON_NUMERIC_CONTENT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_DATETIME = "INVALID_DATETIME"
    CONTENT_TOO_SHORT = "CONTENT_TOO_SHORT"
    CHECKSUM_MISMATCH = "CHECKSUM_MISMATCH"
    UNEXPECTED_DECIMAL_POINT = "UNEXPECTED_DECIMAL_POINT"
    SYMBOL_TOO_LONG = "SYMBOL_TOO_LONG"
    TOO_MANY_ELEMENTS = "TOO_MANY_ELEMENTS"


class GS1128ParseError(ValueError):
    """Base class for every GS1-128 parse failure."""

    code: ErrorCode

    def __init__(self, message: str, ai: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.ai = ai

    def to_dict(self) -> dict:
        return {
            'code': self.code.value,
            'message': self.message,
            'ai': self.ai,
        }


class UnknownIdentifierError(GS1128ParseError):
    code = ErrorCode.UNKNOWN_IDENTIFIER


class MalformedIdentifierError(GS1128ParseError):
    code = ErrorCode.MALFORMED_IDENTIFIER


class DoubleArrayNotAllowedError(GS1128ParseError):
    code = ErrorCode.DOUBLE_ARRAY_NOT_ALLOWED


class DoubleArrayWrongArityError(GS1128ParseError):
    code = ErrorCode.DOUBLE_ARRAY_WRONG_ARITY


class NonNumericContentError(GS1128ParseError):
    code = ErrorCode.NON_NUMERIC_CONTENT


class InvalidDateError(GS1128ParseError):
    code = ErrorCode.INVALID_DATE


class InvalidDateTimeError(GS1128ParseError):
    code = ErrorCode.INVALID_DATETIME


class ContentTooShortError(GS1128ParseError):
    code = ErrorCode.CONTENT_TOO_SHORT


class ChecksumMismatchError(GS1128ParseError):
    code = ErrorCode.CHECKSUM_MISMATCH

    def __init__(self, message: str, ai: Optional[str] = None, expected: Optional[int] = None):
        super().__init__(message, ai)
        self.expected = expected


class UnexpectedDecimalPointError(GS1128ParseError):
    code = ErrorCode.UNEXPECTED_DECIMAL_POINT


class SymbolTooLongError(GS1128ParseError):
    code = ErrorCode.SYMBOL_TOO_LONG


class TooManyElementsError(GS1128ParseError):
    code = ErrorCode.TOO_MANY_ELEMENTS
