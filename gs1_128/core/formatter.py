"""
Assembly of the final GS1-128 data string and its human-readable label.

The data string starts with the FNC1 escape and contains each AI followed by
its content. A separator (the same escape, transmitted as <GS>) follows every
variable-length field that is not the last one.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .ai_registry import AIData, AIRegistry
from .errors import SymbolTooLongError
from .resolver import placeholder_form

logger = logging.getLogger(__name__)

# Escape understood by the Code 128 encoder for FNC1, also used as separator
FNC1 = '~F1'
GROUP_SEPARATOR = '\x1d'
MAX_GS1128_CHARS = 48


def ai_data_for(identifier: Optional[str], registry: AIRegistry) -> Optional[AIData]:
    """Find the metadata of an emitted AI, following decimal-variable families."""
    if identifier is None:
        return None

    ai_data = registry.get(identifier)
    if ai_data is None and len(identifier) >= 2:
        ai_data = registry.get(placeholder_form(identifier))
    return ai_data


def format_gs1_128(
    identifiers: Sequence[Optional[str]],
    contents: Sequence[str],
    registry: AIRegistry,
    strict_mode: bool = True,
) -> Tuple[str, str]:
    """
    Build the data string and label from parsed elements.

    Args:
        identifiers: AIs in encounter order, None for unlabeled content
        contents: Final contents, index-aligned with identifiers
        registry: Registry used to read each AI's maximum length
        strict_mode: If False, a separator is put between every pair of elements

    Returns:
        (formatted_text, formatted_label)
    """
    text_parts = [FNC1]
    label_parts = []
    count = len(identifiers)

    for i, (identifier, content) in enumerate(zip(identifiers, contents)):
        is_last = (i + 1) == count

        if identifier is not None:
            label_parts.append(f"({identifier}){content}")
            text_parts.append(identifier)
        else:
            label_parts.append(content)
        text_parts.append(content)

        if is_last:
            continue

        ai_data = ai_data_for(identifier, registry)
        if ai_data is not None:
            if len(content) < ai_data.max_length or not strict_mode:
                text_parts.append(FNC1)
        elif identifier is None:
            # Unlabeled content has no known length, always delimit it
            text_parts.append(FNC1)

    text = ''.join(text_parts)
    label = ' '.join(label_parts)
    logger.debug("Formatted %d element(s): %r", count, text)
    return text, label


def count_meaningful_characters(text: str) -> int:
    """
    Count the characters that occupy the symbol.

    Each escape counts as one character and parentheses are not encoded.
    """
    calculable = text.replace(FNC1, GROUP_SEPARATOR)
    calculable = calculable.replace('(', '').replace(')', '')
    return len(calculable)


def check_symbol_length(text: str, max_length: int = MAX_GS1128_CHARS) -> None:
    """
    Enforce the GS1-128 capacity limit.

    The leading FNC1 is not counted.

    Raises:
        SymbolTooLongError: More than max_length characters
    """
    if count_meaningful_characters(text) - 1 > max_length:
        raise SymbolTooLongError(
            f"The barcode can't contain more than {max_length} characters."
        )
