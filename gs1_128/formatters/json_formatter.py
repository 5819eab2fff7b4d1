"""
JSON Formatter for GS1-128 results

Provides clean JSON output with:
- The Code 128 data string and the label
- Registry titles for each AI
- Dates formatted as dd/mm/yyyy
- Decimal values for the variable-decimal AI families
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..core.ai_registry import AIRegistry, KindOfData, load_default_registry
from ..core.formatter import ai_data_for
from ..core.parser import GS1128Result
from ..validators.validators import decode_decimal_value, is_digits, validate_date


def format_date_ddmmyyyy(date_value: str) -> str:
    """
    Format a YYMMDD date as dd/mm/yyyy.

    Handles:
    - Normal dates: YYMMDD -> dd/mm/yyyy
    - Unknown day (DD=00): -> XX/mm/yyyy
    """
    result = validate_date(date_value)
    if not result.valid:
        return date_value

    meta = result.meta
    if meta.get('day_unspecified', False):
        return f"XX/{meta['month']:02d}/{meta['year']:04d}"
    return f"{meta['day']:02d}/{meta['month']:02d}/{meta['year']:04d}"


def element_to_dict(
    ai: Optional[str],
    content: str,
    registry: AIRegistry
) -> Dict[str, Any]:
    """Describe one element with its registry title and display value."""
    ai_data = ai_data_for(ai, registry)
    entry: Dict[str, Any] = {
        'ai': ai,
        'title': ai_data.title if ai_data else None,
        'content': content,
    }

    if ai_data is None:
        return entry

    if ai_data.kind_of_data is KindOfData.DATE:
        entry['date'] = format_date_ddmmyyyy(content)
    elif ai_data.has_decimal_placeholder and is_digits(ai[-1]) and is_digits(content):
        entry['value'] = decode_decimal_value(content, int(ai[-1]))

    return entry


def result_to_dict(
    result: GS1128Result,
    registry: Optional[AIRegistry] = None,
    include_elements: bool = True
) -> Dict[str, Any]:
    """
    Convert a GS1-128 result to a JSON-ready dict.

    Args:
        result: Result from parse_gs1_128() or GS1128Parser.parse()
        registry: Registry used for titles (default registry when None)
        include_elements: Include the per-element breakdown

    Returns:
        Dict with text, label and optionally elements
    """
    if registry is None:
        registry = load_default_registry()

    output: Dict[str, Any] = {
        'text': result.text,
        'label': result.label,
    }

    if include_elements:
        output['elements'] = [
            element_to_dict(ai, content, registry)
            for ai, content in result.elements
        ]

    return output


def format_result_json(
    result: GS1128Result,
    registry: Optional[AIRegistry] = None,
    include_elements: bool = True
) -> str:
    """Format a GS1-128 result as a JSON string."""
    return json.dumps(
        result_to_dict(result, registry, include_elements),
        indent=2,
        ensure_ascii=False,
    )
