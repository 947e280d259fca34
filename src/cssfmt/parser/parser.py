"""Error tolerant tree builder for CSS.

Follows the shape of the CSS Syntax "consume a list of rules" and "consume a
block's contents" algorithms, including nested style rules: inside a block, a
run of tokens that reaches ``{`` before ``;`` is a rule, one that starts with
``ident :`` is a declaration, and anything else is kept as raw text. The
parser never fails; whatever it cannot classify is printed back verbatim.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cssfmt.model.nodes import (
    AtRule,
    Block,
    Declaration,
    RawText,
    Span,
    StyleRule,
    Stylesheet,
    SyntaxNode,
)
from cssfmt.parser.lexer import (
    ComponentValue,
    Group,
    Tokenized,
    end_of,
    group,
    is_delim,
    is_token,
    is_whitespace,
    start_of,
    strip_whitespace,
    tokenize,
)
from cssfmt.parser.selectors import parse_selector_list
from cssfmt.parser.values import parse_value

logger = logging.getLogger("cssfmt")

_WHITESPACE = " \t\r\n\f"


@dataclass
class ParseResult:
    """A stylesheet tree plus its comments, which live outside the tree."""

    stylesheet: Stylesheet
    comments: list[Span]


def parse(css: str) -> ParseResult:
    """Parse *css* into a :class:`Stylesheet` and a sorted comment list."""
    tokenized = tokenize(css)
    builder = _TreeBuilder(tokenized)
    children = builder.statements(group(tokenized.tokens, len(css)), top_level=True)
    logger.debug(
        "Parsed %d top-level nodes, %d comments", len(children), len(tokenized.comments)
    )
    return ParseResult(
        stylesheet=Stylesheet(span=Span(0, len(css)), children=children),
        comments=tokenized.comments,
    )


def _is_block(item: ComponentValue) -> bool:
    return isinstance(item, Group) and item.type == "LBRACE"


class _TreeBuilder:
    def __init__(self, source: Tokenized) -> None:
        self._source = source

    def statements(
        self, items: list[ComponentValue], top_level: bool
    ) -> list[SyntaxNode]:
        nodes: list[SyntaxNode] = []
        index = 0
        count = len(items)
        while index < count:
            item = items[index]

            if is_whitespace(item):
                index += 1
                continue

            if is_token(item, "SEMICOLON"):
                if top_level:
                    end = index
                    last = item
                    while end < count and (
                        is_whitespace(items[end]) or is_token(items[end], "SEMICOLON")
                    ):
                        if not is_whitespace(items[end]):
                            last = items[end]
                        end += 1
                    nodes.append(RawText(span=Span(start_of(item), end_of(last))))
                    index = end
                else:
                    index += 1
                continue

            if is_token(item, "AT_KEYWORD"):
                node, index = self._at_rule(items, index)
                nodes.append(node)
                continue

            if not top_level and self._starts_declaration(items, index):
                custom = str(item).startswith("--")
                stop = self._find_stop(items, index, braces=not custom)
                if custom or stop == count or not _is_block(items[stop]):
                    nodes.append(self._declaration(items, index, stop))
                    index = stop + 1
                    continue

            stop = self._find_stop(items, index, braces=True)
            if stop < count and _is_block(items[stop]):
                nodes.append(self._style_rule(items[index:stop], items[stop]))
                index = stop + 1
                continue

            # Unrecognised: keep it, including the terminating semicolon
            end = min(stop + 1, count)
            chunk = strip_whitespace(items[index:end])
            nodes.append(RawText(span=Span(start_of(chunk[0]), end_of(chunk[-1]))))
            index = end

        return nodes

    @staticmethod
    def _find_stop(items: list[ComponentValue], start: int, braces: bool) -> int:
        for index in range(start, len(items)):
            item = items[index]
            if is_token(item, "SEMICOLON") or (braces and _is_block(item)):
                return index
        return len(items)

    @staticmethod
    def _starts_declaration(items: list[ComponentValue], index: int) -> bool:
        if not is_token(items[index], "IDENT"):
            return False
        index += 1
        while index < len(items) and is_whitespace(items[index]):
            index += 1
        return index < len(items) and is_token(items[index], "COLON")

    def _block(self, block: Group) -> Block:
        children = self.statements(block.items, top_level=False)
        return Block(span=Span(block.start, block.end), children=children)

    def _style_rule(self, prelude: list[ComponentValue], block: Group) -> SyntaxNode:
        prelude = strip_whitespace(prelude)
        selectors = parse_selector_list(prelude, self._source)
        if selectors is None:
            start = start_of(prelude[0]) if prelude else block.start
            return RawText(span=Span(start, block.end))
        return StyleRule(
            span=Span(start_of(prelude[0]), block.end),
            selectors=selectors,
            block=self._block(block),
        )

    def _at_rule(self, items: list[ComponentValue], index: int) -> tuple[AtRule, int]:
        keyword = items[index]
        name = str(keyword)[1:]
        stop = self._find_stop(items, index + 1, braces=True)
        count = len(items)

        if stop < count:
            region_end = start_of(items[stop])
        else:
            region_end = max(keyword.end_pos, end_of(items[-1]))
        prelude = self._prelude(keyword.end_pos, region_end)

        if stop == count:
            span = Span(keyword.start_pos, region_end)
            return AtRule(span=span, name=name, prelude=prelude), count

        terminator = items[stop]
        if _is_block(terminator):
            block = self._block(terminator)
            span = Span(keyword.start_pos, block.span.end)
            return AtRule(span=span, name=name, prelude=prelude, block=block), stop + 1

        span = Span(keyword.start_pos, end_of(terminator))
        return AtRule(span=span, name=name, prelude=prelude), stop + 1

    def _prelude(self, start: int, end: int) -> RawText | None:
        """The trimmed source between the at-keyword and its terminator.

        Comments inside the prelude are part of it.
        """
        text = self._source.css[start:end]
        start += len(text) - len(text.lstrip(_WHITESPACE))
        end -= len(text) - len(text.rstrip(_WHITESPACE))
        if start >= end:
            return None
        return RawText(span=Span(start, end))

    def _declaration(
        self, items: list[ComponentValue], start: int, stop: int
    ) -> Declaration:
        name = items[start]
        colon = start + 1
        while not is_token(items[colon], "COLON"):
            colon += 1

        value_items = strip_whitespace(items[colon + 1 : stop])
        important = None
        if len(value_items) >= 2 and is_token(value_items[-1], "IDENT"):
            bang = len(value_items) - 2
            while bang >= 0 and is_whitespace(value_items[bang]):
                bang -= 1
            if bang >= 0 and is_delim(value_items[bang], "!"):
                important = str(value_items[-1])
                value_items = strip_whitespace(value_items[:bang])

        body = strip_whitespace(items[start:stop])
        return Declaration(
            span=Span(start_of(name), end_of(body[-1])),
            property=str(name),
            value=parse_value(value_items),
            important=important,
        )
