"""Declaration and value printing."""

from __future__ import annotations

import re

from cssfmt.model.nodes import (
    Declaration,
    Dimension,
    FunctionCall,
    Identifier,
    Operator,
    Parenthesized,
    StringLiteral,
    SyntaxNode,
    UrlLiteral,
    Value,
)
from cssfmt.printer.context import RenderContext
from cssfmt.printer.strings import quote_string, unquote

_DATA_URI = re.compile(r"""['"]?data:""", re.IGNORECASE)
_FONT_SLASH = re.compile(r"\s*/\s*")

URL_FUNCTIONS = ("url", "src")


def print_declaration(node: Declaration, ctx: RenderContext) -> str:
    """``property: value`` without the terminating semicolon."""
    if node.property.startswith("--"):
        prop = node.property
    else:
        prop = node.property.lower()

    value = print_value(node.value, ctx)
    if prop == "font":
        # font: 12px / 1.5 -> font: 12px/1.5
        value = _FONT_SLASH.sub("/", value, count=1)
    if not value and ctx.minify:
        # an empty custom property still needs its space: --off: ;
        value = " "

    important = ""
    if node.important:
        important = ctx.optional_space + "!" + node.important.lower()
    return prop + ":" + ctx.optional_space + value + important


def print_value(node: SyntaxNode, ctx: RenderContext) -> str:
    if isinstance(node, Value):
        return print_list(node.children, ctx)
    return ctx.source.text(node).strip()


def print_list(nodes: list[SyntaxNode], ctx: RenderContext) -> str:
    parts: list[str] = []
    for index, node in enumerate(nodes):
        if isinstance(node, Operator):
            parts.append(_print_operator(node, ctx))
            continue
        parts.append(print_value_node(node, ctx))
        following = nodes[index + 1] if index + 1 < len(nodes) else None
        if following is not None and not isinstance(following, Operator):
            parts.append(" ")
    return "".join(parts)


def print_value_node(node: SyntaxNode, ctx: RenderContext) -> str:
    if isinstance(node, Identifier):
        return node.name

    if isinstance(node, FunctionCall):
        name = node.name.lower()
        arguments = node.arguments
        if name in URL_FUNCTIONS and len(arguments) == 1 and isinstance(arguments[0], StringLiteral):
            return _print_url(name, arguments[0].text)
        return name + "(" + print_list(arguments, ctx) + ")"

    if isinstance(node, UrlLiteral):
        return _print_url("url", node.value)

    if isinstance(node, Dimension):
        return node.value + node.unit.lower()

    if isinstance(node, StringLiteral):
        return quote_string(node.text)

    if isinstance(node, Parenthesized):
        return "(" + print_list(node.children, ctx) + ")"

    if isinstance(node, Operator):
        return _print_operator(node, ctx)

    return ctx.source.text(node).strip()


def _print_operator(node: Operator, ctx: RenderContext) -> str:
    symbol = node.symbol
    if symbol in ("+", "-"):
        return " " + symbol + " "
    if symbol == ",":
        return "," + ctx.optional_space
    return ctx.optional_space + symbol + ctx.optional_space


def _print_url(name: str, value: str) -> str:
    if _DATA_URI.match(value):
        return name + "(" + unquote(value) + ")"
    return name + "(" + quote_string(value) + ")"
