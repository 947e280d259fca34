"""Selector printing."""

from __future__ import annotations

from cssfmt.model.nodes import (
    AttributeSelector,
    Combinator,
    NestingSelector,
    NthSelector,
    PseudoClassSelector,
    PseudoElementSelector,
    Selector,
    SelectorList,
    SyntaxNode,
    TypeSelector,
)
from cssfmt.printer.context import RenderContext
from cssfmt.printer.strings import quote_string

# Pseudo-elements that CSS2 allowed with a single colon.
LEGACY_PSEUDO_ELEMENTS = frozenset({"before", "after", "first-line", "first-letter"})


def print_selector_list(node: SelectorList, ctx: RenderContext) -> None:
    """Write a rule's selector list, one selector per line.

    The caller has already written the indentation of the first line.
    """
    previous: Selector | None = None
    for selector in node.selectors:
        if previous is not None:
            ctx.write("," + ctx.newline)
            comment = ctx.comment(previous.end, selector.start)
            if comment:
                ctx.write(ctx.indent() + comment + ctx.newline)
            ctx.write(ctx.indent())
        ctx.write(print_selector(selector, ctx))
        previous = selector


def print_inline_selector_list(node: SelectorList, ctx: RenderContext) -> str:
    separator = "," + ctx.optional_space
    return separator.join(print_selector(selector, ctx) for selector in node.selectors)


def print_selector(node: Selector, ctx: RenderContext) -> str:
    return "".join(
        print_simple_selector(component, ctx, first=index == 0)
        for index, component in enumerate(node.components)
    )


def print_simple_selector(node: SyntaxNode, ctx: RenderContext, first: bool = False) -> str:
    if isinstance(node, TypeSelector):
        return node.name.lower()

    if isinstance(node, Combinator):
        if node.symbol == " ":
            return "" if first else " "
        leading = "" if first else ctx.optional_space
        return leading + node.symbol + ctx.optional_space

    if isinstance(node, (PseudoClassSelector, PseudoElementSelector)):
        name = node.name.lower()
        element = isinstance(node, PseudoElementSelector) or name in LEGACY_PSEUDO_ELEMENTS
        text = ("::" if element else ":") + name
        if node.arguments is not None:
            text += "(" + "".join(_print_argument(arg, ctx) for arg in node.arguments) + ")"
        return text

    if isinstance(node, AttributeSelector):
        return _print_attribute(node, ctx)

    if isinstance(node, NthSelector):
        return print_nth(node, ctx)

    if isinstance(node, NestingSelector):
        return "&"

    # class and id selectors, raw components
    return ctx.source.text(node).strip()


def _print_argument(node: SyntaxNode, ctx: RenderContext) -> str:
    if isinstance(node, SelectorList):
        return print_inline_selector_list(node, ctx)
    if isinstance(node, NthSelector):
        return print_nth(node, ctx)
    return ctx.source.text(node).strip()


def _print_attribute(node: AttributeSelector, ctx: RenderContext) -> str:
    text = "[" + node.name.lower()
    if node.matcher is not None and node.value is not None:
        text += node.matcher.value + quote_string(node.value)
        if node.flag:
            text += " " + node.flag.lower()
    return text + "]"


def print_nth(node: NthSelector, ctx: RenderContext) -> str:
    """Canonical ``An+B``: ``-n+3`` prints as ``-1n + 3``.

    The ``odd`` and ``even`` keywords print as written.
    """
    if node.a is None and node.b is None:
        text = ctx.source.text(node).strip()
    else:
        parts: list[str] = []
        if node.a is not None:
            parts.append(node.a + "n")
        if node.b is not None:
            if node.a is not None:
                parts.append(ctx.optional_space)
                if not node.b.startswith("-"):
                    parts.append("+" + ctx.optional_space)
            parts.append(node.b)
        text = "".join(parts)

    if node.of is not None:
        text += " of " + print_inline_selector_list(node.of, ctx)
    return text
