"""Stylesheet, rule, at-rule and block printing.

Layout policy: children of a block go one per line. Two neighbouring
declarations are separated by a newline; any other pair also gets a blank
line. Comments found in the gap between two children are written on their
own line right above the following child. Minified output drops every
newline, indent and comment.
"""

from __future__ import annotations

from cssfmt.model.nodes import (
    AtRule,
    Block,
    Declaration,
    StyleRule,
    Stylesheet,
    SyntaxNode,
)
from cssfmt.printer.context import RenderContext
from cssfmt.printer.prelude import format_prelude
from cssfmt.printer.selectors import print_selector_list
from cssfmt.printer.values import print_declaration


def print_stylesheet(node: Stylesheet, ctx: RenderContext) -> None:
    end = node.span.end if node.span else None
    children = node.children
    if not children:
        ctx.write(ctx.comment(0, end, level=0))
        return

    leading = ctx.comment(0, children[0].start, level=0)
    if leading:
        ctx.write(leading + ctx.newline)

    previous: SyntaxNode | None = None
    for child in children:
        if previous is not None:
            ctx.write(_separator(previous, child, ctx))
            comment = ctx.comment(previous.end, child.start, level=0)
            if comment:
                ctx.write(comment + ctx.newline)
        _print_child(child, ctx, last=False)
        previous = child

    trailing = ctx.comment(previous.end, end, level=0)
    if trailing:
        ctx.write(_separator(previous, None, ctx) + trailing)


def print_block(node: Block, ctx: RenderContext) -> None:
    """Write a block's contents and closing brace; ``{`` is already out."""
    ctx.depth += 1
    children = node.children
    if not children:
        ctx.write(ctx.newline + ctx.indent() + ctx.comment(node.start, node.end))
    else:
        leading = ctx.comment(node.start, children[0].start)
        if leading:
            ctx.write(ctx.newline + ctx.indent() + leading)

        previous: SyntaxNode | None = None
        for index, child in enumerate(children):
            if previous is None:
                ctx.write(ctx.newline)
            else:
                ctx.write(_separator(previous, child, ctx))
                comment = ctx.comment(previous.end, child.start)
                if comment:
                    ctx.write(ctx.indent() + comment + ctx.newline)
            ctx.write(ctx.indent())
            _print_child(child, ctx, last=index == len(children) - 1)
            previous = child

        trailing = ctx.comment(previous.end, node.end)
        if trailing:
            ctx.write(_separator(previous, None, ctx) + ctx.indent() + trailing)
    ctx.depth -= 1
    ctx.write(ctx.newline + ctx.indent() + "}")


def print_rule(node: StyleRule, ctx: RenderContext) -> None:
    start = ctx.length
    print_selector_list(node.selectors, ctx)
    comment = ctx.comment(node.selectors.end, node.block.start)
    if comment:
        ctx.write(ctx.newline + ctx.indent() + comment)
    _print_braces(node.block, ctx)
    if ctx.wants_range(node.span):
        ctx.record_range(start, ctx.length)


def print_atrule(node: AtRule, ctx: RenderContext) -> None:
    ctx.write("@" + node.name.lower())
    if node.prelude is not None:
        ctx.write(" " + format_prelude(ctx.source.text(node.prelude), ctx.minify))
    if node.block is None:
        ctx.write(";")
    else:
        _print_braces(node.block, ctx)


def _print_braces(block: Block, ctx: RenderContext) -> None:
    ctx.write(ctx.optional_space + "{")
    if block.children or ctx.comment(block.start, block.end):
        print_block(block, ctx)
    else:
        ctx.write("}")


def _print_child(node: SyntaxNode, ctx: RenderContext, last: bool) -> None:
    if isinstance(node, StyleRule):
        print_rule(node, ctx)
    elif isinstance(node, AtRule):
        print_atrule(node, ctx)
    elif isinstance(node, Declaration):
        terminator = ctx.last_semicolon if last else ";"
        ctx.write(print_declaration(node, ctx) + terminator)
    else:
        ctx.write(ctx.source.text(node).strip())


def _separator(
    previous: SyntaxNode, following: SyntaxNode | None, ctx: RenderContext
) -> str:
    """Newline between two children, plus a blank line unless both are
    declarations. A trailing comment (``following`` is None) counts as a
    declaration."""
    if isinstance(previous, Declaration) and (
        following is None or isinstance(following, Declaration)
    ):
        return ctx.newline
    return ctx.newline + ctx.newline
