"""String quoting helpers."""

from __future__ import annotations

import re

_QUOTES = "\"'"
_ESCAPE_OR_QUOTE = re.compile(r'\\([\s\S])|"')


def unquote(text: str) -> str:
    """Strip one pair of surrounding quotes, if present."""
    if text and text[0] in _QUOTES:
        quote = text[0]
        text = text[1:]
        if text.endswith(quote):
            text = text[:-1]
    return text


def quote_string(text: str) -> str:
    """Re-quote a string literal (or a bare word) with double quotes.

    Content that came from a single quoted string has its double quotes
    escaped and its escaped single quotes unescaped.
    """
    if text[:1] == '"':
        return '"' + unquote(text) + '"'
    return '"' + _ESCAPE_OR_QUOTE.sub(_requote, unquote(text)) + '"'


def _requote(match: re.Match[str]) -> str:
    escaped = match.group(1)
    if escaped is None:
        return '\\"'
    if escaped == "'":
        return "'"
    return match.group(0)
