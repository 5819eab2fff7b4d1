"""
Output formatters for the GS1-128 formatter.
"""

from .json_formatter import (
    format_result_json,
    result_to_dict,
    element_to_dict,
    format_date_ddmmyyyy,
)

__all__ = [
    "format_result_json",
    "result_to_dict",
    "element_to_dict",
    "format_date_ddmmyyyy",
]
