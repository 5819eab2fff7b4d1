"""
Core parsing modules for the GS1-128 formatter.
"""

from .parser import (
    parse_gs1_128,
    normalize_input,
    GS1128Parser,
    GS1128Result,
    ParseOptions,
    ParsedElement,
    ParserState,
)
from .ai_registry import (
    AIData,
    AIRegistry,
    KindOfData,
    load_default_registry,
    load_registry,
    save_registry,
)
from .content import get_ai_content_checksum
from .formatter import FNC1, GROUP_SEPARATOR, MAX_GS1128_CHARS
from .resolver import Resolution, ResolutionStatus

__all__ = [
    "parse_gs1_128",
    "normalize_input",
    "GS1128Parser",
    "GS1128Result",
    "ParseOptions",
    "ParsedElement",
    "ParserState",
    "AIData",
    "AIRegistry",
    "KindOfData",
    "load_default_registry",
    "load_registry",
    "save_registry",
    "get_ai_content_checksum",
    "FNC1",
    "GROUP_SEPARATOR",
    "MAX_GS1128_CHARS",
    "Resolution",
    "ResolutionStatus",
]
