"""Declaration value parsing from component values."""

from __future__ import annotations

import re

from cssfmt.model.nodes import (
    Dimension,
    FunctionCall,
    Identifier,
    Operator,
    Parenthesized,
    RawText,
    Span,
    StringLiteral,
    SyntaxNode,
    UrlLiteral,
    Value,
)
from cssfmt.parser.lexer import ComponentValue, Group, end_of, start_of, strip_whitespace

_NUMBER = re.compile(r"([+-]?(?:\d*\.\d+|\d+)(?:[eE][+-]?\d+)?)(.*)", re.DOTALL)
_URL_WHITESPACE = " \t\r\n\f"

OPERATORS = frozenset({"+", "-", "*", "/"})


class _Unparseable(Exception):
    """A component that has no structured value node."""


def parse_value(items: list[ComponentValue]) -> SyntaxNode:
    """Build the value of a declaration.

    Values holding anything outside the known component types (``progid:``
    filters, ``alpha(opacity=50)``, stray braces) come back as a single
    RawText node. An empty value has no span.
    """
    items = strip_whitespace(items)
    if not items:
        return Value(span=None)
    span = Span(start_of(items[0]), end_of(items[-1]))
    try:
        children = _components(items)
    except _Unparseable:
        return RawText(span=span)
    return Value(span=span, children=children)


def _components(items: list[ComponentValue]) -> list[SyntaxNode]:
    return [
        _component(item)
        for item in items
        if isinstance(item, Group) or item.type != "WS"
    ]


def _component(item: ComponentValue) -> SyntaxNode:
    if isinstance(item, Group):
        span = Span(item.start, item.end)
        if not item.closed:
            raise _Unparseable(item.type)
        if item.type == "FUNCTION":
            return FunctionCall(span=span, name=item.name, arguments=_components(item.items))
        if item.type == "LPAR":
            return Parenthesized(span=span, children=_components(item.items))
        if item.type == "LSQB":
            # grid line names
            return RawText(span=span)
        raise _Unparseable(item.type)

    span = Span(item.start_pos, item.end_pos)
    text = str(item)
    kind = item.type
    if kind == "IDENT":
        return Identifier(span=span, name=text)
    if kind in ("NUMBER", "PERCENTAGE", "DIMENSION"):
        number, unit = _NUMBER.fullmatch(text).groups()
        return Dimension(span=span, value=number, unit=unit)
    if kind == "STRING":
        return StringLiteral(span=span, text=text)
    if kind == "URL":
        return UrlLiteral(span=span, value=text[4:-1].strip(_URL_WHITESPACE))
    if kind == "COMMA":
        return Operator(span=span, symbol=",")
    if kind == "DELIM" and text in OPERATORS:
        return Operator(span=span, symbol=text)
    if kind in ("HASH", "UNICODE_RANGE"):
        return RawText(span=span)
    raise _Unparseable(kind)
