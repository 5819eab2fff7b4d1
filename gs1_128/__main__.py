"""
CLI interface for the GS1-128 formatter.

Usage:
    python -m gs1_128 "<data>" [<data> ...] [options]

Options:
    --pair AI CONTENT     Add an (AI, content) pair, may be repeated
    --lenient             Put a separator between every pair of elements
    --allow-unknown       Keep unregistered data as unlabeled content
    --no-length-limit     Disable the 48 character capacity check
    --registry PATH       Load AI definitions from a JSON file
    --json                Output as JSON
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.ai_registry import load_registry
from .core.errors import GS1128ParseError
from .core.formatter import MAX_GS1128_CHARS
from .core.parser import GS1128Parser, GS1128Result, ParseOptions
from .formatters.json_formatter import element_to_dict, result_to_dict


def format_result(result: GS1128Result, parser: GS1128Parser) -> str:
    """Format a GS1-128 result for display."""
    lines = [
        "=" * 60,
        "GS1-128 Result",
        "=" * 60,
        f"Data: {result.text!r}",
        f"Label: {result.label}",
        "",
        "Elements:",
        "-" * 40,
    ]

    for ai, content in result.elements:
        element = element_to_dict(ai, content, parser.registry)
        if ai is None:
            lines.append(f"  (unknown): {content!r}")
        else:
            lines.append(f"  AI({ai}): {element['title'] or ''}")
            lines.append(f"    Content: {content!r}")
        if 'date' in element:
            lines.append(f"    Date: {element['date']}")
        if 'value' in element:
            lines.append(f"    Value: {element['value']}")

    return '\n'.join(lines)


def build_input(data: List[str], pairs: Optional[List[List[str]]]):
    """A single string stays a string; anything else becomes a list."""
    if len(data) == 1 and not pairs:
        return data[0]
    return list(data) + [tuple(pair) for pair in pairs or []]


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_128',
        description='Build GS1-128 barcode data from Application Identifier input'
    )

    parser.add_argument(
        'data',
        nargs='*',
        help='AI element strings, e.g. "(01)00012345678905(17)251231"'
    )

    parser.add_argument(
        '--pair',
        nargs=2,
        action='append',
        metavar=('AI', 'CONTENT'),
        help='Add an (AI, content) pair'
    )

    parser.add_argument(
        '--lenient',
        action='store_true',
        help='Disable strict mode (separator after every element)'
    )

    parser.add_argument(
        '--allow-unknown',
        action='store_true',
        help='Allow identifiers missing from the registry'
    )

    parser.add_argument(
        '--no-length-limit',
        action='store_true',
        help='Disable the symbol capacity check'
    )

    parser.add_argument(
        '--max-length',
        type=int,
        default=MAX_GS1128_CHARS,
        help='Symbol capacity in data characters'
    )

    parser.add_argument(
        '--registry',
        default=None,
        help='Path to an AI registry JSON file (defaults to the built-in GS1 table)'
    )

    parser.add_argument(
        '--label',
        default=None,
        help='Explicit label instead of the formatted one'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log parsing steps to stderr'
    )

    args = parser.parse_args(argv)

    if not args.data and not args.pair:
        parser.error("nothing to encode")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = ParseOptions(
        strict_mode=not args.lenient,
        allows_unknown_identifier=args.allow_unknown,
        no_length_limit=args.no_length_limit,
        max_length=args.max_length,
    )
    registry = load_registry(Path(args.registry)) if args.registry else None
    gs1_parser = GS1128Parser(options, registry=registry)

    try:
        result = gs1_parser.parse(build_input(args.data, args.pair), label=args.label)
    except GS1128ParseError as e:
        if args.json:
            print(json.dumps({'error': e.to_dict()}, indent=2, ensure_ascii=False))
        else:
            print(f"Error [{e.code.value}]: {e.message}", file=sys.stderr)
        return 1

    if args.json:
        output = result_to_dict(result, gs1_parser.registry)
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_result(result, gs1_parser))

    return 0


if __name__ == '__main__':
    sys.exit(main())
