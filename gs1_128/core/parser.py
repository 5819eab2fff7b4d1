"""
GS1-128 Element String Parser

Turns loosely structured input into the data string expected by a Code 128
encoder in GS1 mode, plus the human-readable label printed under the bars.

Accepted input:
- a single string: "(01)00012345678905(17)251231" or "010001234567890517251231"
- a list of strings, each parsed on its own: ["(01)00012345678905", "(10)ABC"]
- a list mixing strings and (AI, content) pairs: [("01", "0001234567890"), "(10)ABC"]

Key GS1 Rules:
- The data string starts with FNC1
- Variable-length AIs SHALL be delimited by FNC1/GS unless they are the last element
- A 13-digit GTIN gets its check digit computed; a 14-digit one is verified
- The symbol holds at most 48 data characters
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .ai_registry import AIData, AIRegistry, load_default_registry
from .content import check_checksum, check_conformity, encode_decimal_point
from .errors import (
    DoubleArrayNotAllowedError,
    DoubleArrayWrongArityError,
    MalformedIdentifierError,
    TooManyElementsError,
)
from .formatter import (
    FNC1,
    GROUP_SEPARATOR,
    MAX_GS1128_CHARS,
    check_symbol_length,
    format_gs1_128,
)
from .resolver import resolve_formatted, resolve_positional

logger = logging.getLogger(__name__)

# Positions inside an (AI, content) pair
ID = 0
CONTENT = 1

ParseInput = Union[str, Sequence[Any]]


@dataclass
class ParseOptions:
    """
    Configuration options for parsing.

    Attributes:
        strict_mode: Only delimit fields shorter than their maximum length;
            when False, a separator is put between every pair of elements
        allows_unknown_identifier: Keep unregistered data as unlabeled
            content instead of failing
        no_length_limit: Disable the symbol capacity check
        max_length: Symbol capacity in data characters
        max_elements: Upper bound on elements in one parse call
        custom_registry: Optional AI registry replacing the default one
    """
    strict_mode: bool = True
    allows_unknown_identifier: bool = False
    no_length_limit: bool = False
    max_length: int = MAX_GS1128_CHARS
    max_elements: int = 100
    custom_registry: Optional[AIRegistry] = None


@dataclass(frozen=True)
class ParsedElement:
    """
    One AI element split from the input.

    Attributes:
        identifier: Final AI (decimal position applied), None if unknown
        content: Final content (check digit added, decimal point removed)
        identifier_width: Raw characters taken by the AI, parentheses included
        checksum_added: Check digits appended to the content
        decimal_points_removed: Decimal points removed from the content
        separators_found: Separators consumed after the content
    """
    identifier: Optional[str]
    content: str
    identifier_width: int = 0
    checksum_added: int = 0
    decimal_points_removed: int = 0
    separators_found: int = 0

    @property
    def consumed(self) -> int:
        """Number of raw input characters this element was read from."""
        return (
            len(self.content)
            + self.identifier_width
            - self.checksum_added
            + self.decimal_points_removed
            + self.separators_found
        )


@dataclass
class ParserState:
    """Index-aligned AIs and contents accumulated during one parse call."""
    identifiers: List[Optional[str]] = field(default_factory=list)
    contents: List[str] = field(default_factory=list)

    def append(self, element: ParsedElement) -> None:
        self.identifiers.append(element.identifier)
        self.contents.append(element.content)

    def __len__(self) -> int:
        return len(self.identifiers)


@dataclass
class GS1128Result:
    """
    Complete result of formatting a GS1-128 input.

    Attributes:
        raw: Original input
        text: Data string for the Code 128 encoder (FNC1 escaped as ~F1)
        label: Human-readable text, "(01)00012345678905 (17)251231"
        identifiers: AIs in encounter order, None for unlabeled content
        contents: Contents, index-aligned with identifiers
    """
    raw: Any
    text: str
    label: str
    identifiers: List[Optional[str]] = field(default_factory=list)
    contents: List[str] = field(default_factory=list)

    @property
    def elements(self) -> List[tuple]:
        return list(zip(self.identifiers, self.contents))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'raw': self.raw,
            'text': self.text,
            'label': self.label,
            'elements': [
                {'ai': ai, 'content': content}
                for ai, content in self.elements
            ],
        }


def normalize_input(data: ParseInput) -> List[str]:
    """
    Convert the accepted input shapes into a list of raw element strings.

    (AI, content) pairs are rewritten as "(AI)content".

    Raises:
        DoubleArrayWrongArityError: A pair does not hold exactly 2 values
        DoubleArrayNotAllowedError: A pair holds a nested list
    """
    if isinstance(data, str):
        return [data]

    raw: List[str] = []
    for entry in data:
        if isinstance(entry, (list, tuple)):
            if len(entry) != 2:
                raise DoubleArrayWrongArityError("Double arrays must contain 2 values.")
            if isinstance(entry[ID], (list, tuple)) or isinstance(entry[CONTENT], (list, tuple)):
                raise DoubleArrayNotAllowedError("Double arrays can't contain arrays.")
            raw.append(f"({entry[ID]}){entry[CONTENT]}")
        else:
            raw.append(str(entry))

    return raw


class GS1128Parser:
    """
    GS1-128 parser and formatter.

    The registry is set once and only read while parsing; parse state lives
    in each call, so an instance can be reused.
    """

    def __init__(
        self,
        options: Optional[ParseOptions] = None,
        registry: Optional[AIRegistry] = None
    ):
        self.options = options or ParseOptions()
        if registry is None:
            registry = self.options.custom_registry
        self.registry = registry if registry is not None else load_default_registry()

    def set_application_identifiers(self, records: Union[AIRegistry, Iterable[AIData]]) -> None:
        """Replace the AI registry."""
        if not isinstance(records, AIRegistry):
            records = AIRegistry(records)
        self.registry = records
        logger.debug("Registry replaced with %d identifiers", len(records))

    def get_application_identifiers(self) -> List[AIData]:
        """Return the configured AI records."""
        return self.registry.records()

    application_identifiers = property(get_application_identifiers)

    def _parse_element(self, text: str) -> ParsedElement:
        """
        Split the first AI element off a raw string.

        Content is read up to the AI's maximum length or the first separator.
        """
        is_formatted = text.startswith('(')
        if is_formatted:
            resolution = resolve_formatted(
                text, self.registry, self.options.allows_unknown_identifier
            )
        else:
            resolution = resolve_positional(
                text, self.registry, self.options.allows_unknown_identifier
            )

        if not resolution.found:
            # Unknown AI: everything up to the next separator is kept as is
            content = text
            sep = content.find(GROUP_SEPARATOR)
            if sep != -1:
                return ParsedElement(None, content[:sep], separators_found=1)
            return ParsedElement(None, content)

        ai_data = self.registry.get(resolution.canonical)
        width = len(resolution.identifier) + (2 if is_formatted else 0)
        n = ai_data.max_length

        content = text[width:width + n]
        # A decimal point does not count towards the length
        if resolution.decimal_variable and ('.' in content or ',' in content):
            content = text[width:width + n + 1]

        separators = 0
        sep = content.find(GROUP_SEPARATOR)
        if sep != -1:
            content = content[:sep]
            separators = 1

        identifier = resolution.identifier
        content = check_conformity(content, identifier, ai_data)
        content, checksum_added = check_checksum(content, identifier, ai_data)
        identifier, content, removed = encode_decimal_point(content, resolution)

        logger.debug("Parsed AI (%s) -> %r", identifier, content)

        return ParsedElement(
            identifier=identifier,
            content=content,
            identifier_width=width,
            checksum_added=checksum_added,
            decimal_points_removed=removed,
            separators_found=separators,
        )

    def _parse_raw(self, raw: str, state: ParserState) -> None:
        """Parse every AI element concatenated in one raw string."""
        text = raw.replace(FNC1, GROUP_SEPARATOR).lstrip(GROUP_SEPARATOR)
        if not text:
            raise MalformedIdentifierError(f"Empty element: {raw!r}")

        while text:
            if len(state) >= self.options.max_elements:
                raise TooManyElementsError(
                    f"The input can't contain more than {self.options.max_elements} elements."
                )

            element = self._parse_element(text)
            state.append(element)

            text = text[element.consumed:]
            if text.startswith(GROUP_SEPARATOR):
                text = text[1:]

    def parse(self, data: ParseInput, label: Optional[str] = None) -> GS1128Result:
        """
        Parse and format GS1-128 input.

        Args:
            data: String, list of strings or list of (AI, content) pairs
            label: Explicit label; the formatted one is used when None

        Returns:
            GS1128Result with data string, label and elements

        Raises:
            GS1128ParseError: Any validation failure, nothing is returned
        """
        state = ParserState()
        raw_elements = normalize_input(data)
        if not raw_elements:
            raise MalformedIdentifierError("No data to encode.")

        for raw in raw_elements:
            self._parse_raw(raw, state)

        text, formatted_label = format_gs1_128(
            state.identifiers,
            state.contents,
            self.registry,
            strict_mode=self.options.strict_mode,
        )

        if not self.options.no_length_limit:
            check_symbol_length(text, self.options.max_length)

        return GS1128Result(
            raw=data,
            text=text,
            label=formatted_label if label is None else label,
            identifiers=state.identifiers,
            contents=state.contents,
        )


def parse_gs1_128(
    data: ParseInput,
    *,
    options: Optional[ParseOptions] = None,
    label: Optional[str] = None
) -> GS1128Result:
    """
    Parse GS1-128 input and build the Code 128 data string.

    Main entry point for the parser.

    Args:
        data: String, list of strings or list of (AI, content) pairs
        options: Optional parsing configuration
        label: Explicit label overriding the formatted one

    Returns:
        GS1128Result

    Examples:
        >>> result = parse_gs1_128("(01)00012345678905(17)251231")
        >>> result.text
        '~F1010001234567890517251231'
        >>> result.label
        '(01)00012345678905 (17)251231'
    """
    return GS1128Parser(options).parse(data, label=label)
