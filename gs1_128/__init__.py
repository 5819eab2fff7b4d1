"""
GS1-128 Application Identifier Formatter

Parses and validates GS1 Application Identifier input and builds the data
string and label for a GS1-128 (Code 128 with FNC1) barcode.

Based on GS1 General Specifications.
"""

from .core.parser import (
    parse_gs1_128,
    GS1128Parser,
    GS1128Result,
    ParseOptions,
)
from .core.ai_registry import (
    AIData,
    AIRegistry,
    KindOfData,
    load_default_registry,
    load_registry,
    save_registry,
)
from .core.content import get_ai_content_checksum
from .core.errors import (
    ErrorCode,
    GS1128ParseError,
    UnknownIdentifierError,
    MalformedIdentifierError,
    DoubleArrayNotAllowedError,
    DoubleArrayWrongArityError,
    NonNumericContentError,
    InvalidDateError,
    InvalidDateTimeError,
    ContentTooShortError,
    ChecksumMismatchError,
    UnexpectedDecimalPointError,
    SymbolTooLongError,
    TooManyElementsError,
)
from .formatters.json_formatter import (
    format_result_json,
    result_to_dict,
)

__version__ = "1.0.0"
__all__ = [
    "parse_gs1_128",
    "GS1128Parser",
    "GS1128Result",
    "ParseOptions",
    "AIData",
    "AIRegistry",
    "KindOfData",
    "load_default_registry",
    "load_registry",
    "save_registry",
    "get_ai_content_checksum",
    "ErrorCode",
    "GS1128ParseError",
    "UnknownIdentifierError",
    "MalformedIdentifierError",
    "DoubleArrayNotAllowedError",
    "DoubleArrayWrongArityError",
    "NonNumericContentError",
    "InvalidDateError",
    "InvalidDateTimeError",
    "ContentTooShortError",
    "ChecksumMismatchError",
    "UnexpectedDecimalPointError",
    "SymbolTooLongError",
    "TooManyElementsError",
    "format_result_json",
    "result_to_dict",
]
