"""Tokenizer and component-value grouping built on lark's basic lexer."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token

from cssfmt.model.nodes import Span

GRAMMAR_PATH = Path(__file__).parent / "css.lark"

_CLOSERS: dict[str, str] = {
    "LBRACE": "RBRACE",
    "LPAR": "RPAR",
    "LSQB": "RSQB",
    "FUNCTION": "RPAR",
}


@lru_cache(maxsize=1)
def _lexer() -> Lark:
    grammar = GRAMMAR_PATH.read_text(encoding="utf-8")
    return Lark(grammar, parser="lalr", lexer="basic")


@dataclass
class Tokenized:
    """Source text split into tokens, with comments kept on the side."""

    css: str
    tokens: list[Token]
    comments: list[Span]

    def has_comment(self, start: int, end: int) -> bool:
        """True when a comment starts inside ``[start, end)``."""
        index = bisect_left(self.comments, start, key=lambda span: span.start)
        return index < len(self.comments) and self.comments[index].start < end


def tokenize(css: str) -> Tokenized:
    """Split *css* into significant tokens and comment spans.

    Whitespace tokens are kept since they separate selector compounds and
    value components; comments are returned on the side, in document order.
    """
    tokens: list[Token] = []
    comments: list[Span] = []
    for token in _lexer().lex(css):
        if token.type == "COMMENT":
            comments.append(Span(token.start_pos, token.end_pos))
        else:
            tokens.append(token)
    return Tokenized(css=css, tokens=tokens, comments=comments)


@dataclass
class Group:
    """A ``{}``, ``()`` or ``[]`` block, or a function with its arguments.

    An unclosed group runs to the end of the input.
    """

    opener: Token
    items: list[ComponentValue] = field(default_factory=list)
    end: int = 0
    closed: bool = False

    @property
    def start(self) -> int:
        return self.opener.start_pos

    @property
    def type(self) -> str:
        return self.opener.type

    @property
    def name(self) -> str:
        """Function name without the opening parenthesis."""
        return str(self.opener)[:-1]

    @property
    def inner_start(self) -> int:
        return self.opener.end_pos

    @property
    def inner_end(self) -> int:
        return self.end - 1 if self.closed else self.end


ComponentValue = Token | Group


def group(tokens: list[Token], length: int) -> list[ComponentValue]:
    """Nest *tokens* into component values.

    Closing tokens that match no open group stay in the stream as plain
    tokens, so a stray ``}`` or ``)`` never aborts the parse.
    """
    root: list[ComponentValue] = []
    current = root
    stack: list[tuple[Group, list[ComponentValue]]] = []

    for token in tokens:
        if token.type in _CLOSERS:
            opened = Group(opener=token)
            current.append(opened)
            stack.append((opened, current))
            current = opened.items
        elif stack and token.type == _CLOSERS[stack[-1][0].type]:
            closed, parent = stack.pop()
            closed.end = token.end_pos
            closed.closed = True
            current = parent
        else:
            current.append(token)

    while stack:
        unclosed, _ = stack.pop()
        unclosed.end = length
    return root


def start_of(value: ComponentValue) -> int:
    if isinstance(value, Group):
        return value.start
    return value.start_pos


def end_of(value: ComponentValue) -> int:
    if isinstance(value, Group):
        return value.end
    return value.end_pos


def is_token(value: ComponentValue, *types: str) -> bool:
    return isinstance(value, Token) and value.type in types


def is_delim(value: ComponentValue, *chars: str) -> bool:
    return isinstance(value, Token) and value.type == "DELIM" and str(value) in chars


def is_whitespace(value: ComponentValue) -> bool:
    return isinstance(value, Token) and value.type == "WS"


def strip_whitespace(items: list[ComponentValue]) -> list[ComponentValue]:
    start, end = 0, len(items)
    while start < end and is_whitespace(items[start]):
        start += 1
    while end > start and is_whitespace(items[end - 1]):
        end -= 1
    return items[start:end]


def significant(items: list[ComponentValue]) -> list[ComponentValue]:
    return [item for item in items if not is_whitespace(item)]
