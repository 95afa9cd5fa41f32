"""Textual formatting and parsing.

Functions:
    format_iso8601: Render a value in ISO 8601 extended notation.
    parse_iso8601: Parse ISO 8601 extended notation into a DateTime.

Examples:
    >>> from gregor.format import format_iso8601, parse_iso8601
    >>> format_iso8601(parse_iso8601("2000-W52-6T23:00"))
    '2000-W52-6T23:00'
"""

from __future__ import annotations

from gregor.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "format_iso8601",
    "parse_iso8601",
]
