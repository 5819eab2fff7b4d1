"""
Identifier resolution for GS1-128 element strings.

Two input styles are supported:
- formatted: "(3102)001234", the AI is wrapped in parentheses
- positional: "3102001234", the AI is the longest registered prefix

A decimal-variable AI family is registered once with a placeholder as last
character ("310y"). Writing the placeholder ("(310y)12.34") leaves the decimal
position to be read from the content; writing a digit ("3102") fixes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .ai_registry import AIRegistry, DECIMAL_PLACEHOLDER
from .errors import MalformedIdentifierError, UnknownIdentifierError

# Number of characters read to find an AI, parentheses included
MAX_ID_FORMATTED = 6
MAX_ID_NOT_FORMATTED = 4
MIN_ID_LENGTH = 2


class ResolutionStatus(str, Enum):
    """Outcome of an identifier lookup."""
    NOT_FOUND = "not_found"
    FOUND = "found"
    # AI written with the placeholder, decimal position comes from the content
    DECIMAL_PENDING = "decimal_pending"
    # AI written with an explicit decimal digit, content must be a whole number
    DECIMAL_FIXED = "decimal_fixed"


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving an identifier against the registry.

    Attributes:
        status: Lookup outcome
        identifier: The AI as written in the input (lowercased)
        canonical: The registry key holding its metadata
    """
    status: ResolutionStatus
    identifier: Optional[str] = None
    canonical: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is not ResolutionStatus.NOT_FOUND

    @property
    def decimal_variable(self) -> bool:
        return self.status in (ResolutionStatus.DECIMAL_PENDING, ResolutionStatus.DECIMAL_FIXED)


NOT_FOUND = Resolution(ResolutionStatus.NOT_FOUND)


def placeholder_form(identifier: str) -> str:
    """Replace the last character of an AI with the decimal placeholder."""
    return identifier[:-1] + DECIMAL_PLACEHOLDER


def lookup_identifier(identifier: str, registry: AIRegistry) -> Resolution:
    """
    Look up a single candidate AI.

    A miss is retried with the last character replaced by the placeholder so
    that "3102" resolves to the "310y" family.
    """
    identifier = identifier.lower()
    if len(identifier) < MIN_ID_LENGTH:
        return NOT_FOUND

    has_placeholder = identifier.endswith(DECIMAL_PLACEHOLDER)

    if identifier in registry:
        status = ResolutionStatus.DECIMAL_PENDING if has_placeholder else ResolutionStatus.FOUND
        return Resolution(status, identifier, identifier)

    if not has_placeholder:
        family = placeholder_form(identifier)
        if family in registry:
            return Resolution(ResolutionStatus.DECIMAL_FIXED, identifier, family)

    return NOT_FOUND


def resolve_formatted(
    text: str,
    registry: AIRegistry,
    allows_unknown_identifier: bool = False
) -> Resolution:
    """
    Resolve the AI of a formatted element ("(AI)content").

    Raises:
        MalformedIdentifierError: Missing closing parenthesis or AI too short
        UnknownIdentifierError: AI not registered and unknown AIs disallowed
    """
    head = text[:MAX_ID_FORMATTED]
    pos = head.find(')')
    if pos == -1:
        raise MalformedIdentifierError("Identifiers must have no more than 4 characters.")
    if pos < MIN_ID_LENGTH + 1:
        raise MalformedIdentifierError("Identifiers must have at least 2 characters.")

    identifier = head[1:pos].lower()
    resolution = lookup_identifier(identifier, registry)
    if resolution.found:
        return resolution

    if not allows_unknown_identifier:
        raise UnknownIdentifierError(
            f"The identifier {identifier} doesn't exist. Install it with "
            f"set_application_identifiers() or allow unknown identifiers.",
            ai=identifier,
        )

    return NOT_FOUND


def resolve_positional(
    text: str,
    registry: AIRegistry,
    allows_unknown_identifier: bool = False
) -> Resolution:
    """
    Resolve the AI of a positional element ("AIcontent").

    Tries the 4, 3 and 2 character prefixes, longest first.

    Raises:
        UnknownIdentifierError: No prefix registered and unknown AIs disallowed
    """
    candidate = text[:MAX_ID_NOT_FORMATTED].lower()

    while len(candidate) >= MIN_ID_LENGTH:
        resolution = lookup_identifier(candidate, registry)
        if resolution.found:
            return resolution
        candidate = candidate[:-1]

    if not allows_unknown_identifier:
        raise UnknownIdentifierError(
            f"Can't find an identifier at the start of {text!r}. Install it with "
            f"set_application_identifiers() or allow unknown identifiers.",
        )

    return NOT_FOUND
