"""Syntax tree node types produced by the parser and consumed by the printer.

Every node carries an optional ``span`` into the original source. Printers
that emit text verbatim read it through that span; a node without one (an
empty declaration value, for instance) prints as the empty string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` offsets into the source string."""

    start: int
    end: int


class NodeKind(StrEnum):
    STYLESHEET = "stylesheet"
    AT_RULE = "at_rule"
    STYLE_RULE = "style_rule"
    BLOCK = "block"
    DECLARATION = "declaration"
    VALUE = "value"
    SELECTOR_LIST = "selector_list"
    SELECTOR = "selector"
    TYPE_SELECTOR = "type_selector"
    CLASS_SELECTOR = "class_selector"
    ID_SELECTOR = "id_selector"
    COMBINATOR = "combinator"
    PSEUDO_CLASS_SELECTOR = "pseudo_class_selector"
    PSEUDO_ELEMENT_SELECTOR = "pseudo_element_selector"
    ATTRIBUTE_SELECTOR = "attribute_selector"
    NTH_SELECTOR = "nth_selector"
    NESTING_SELECTOR = "nesting_selector"
    IDENTIFIER = "identifier"
    FUNCTION_CALL = "function_call"
    DIMENSION = "dimension"
    STRING_LITERAL = "string_literal"
    OPERATOR = "operator"
    PARENTHESIZED = "parenthesized"
    URL_LITERAL = "url_literal"
    RAW_TEXT = "raw_text"


class AttributeMatcher(StrEnum):
    EQUAL = "="
    INCLUDES = "~="
    DASH_MATCH = "|="
    PREFIX = "^="
    SUFFIX = "$="
    SUBSTRING = "*="


@dataclass(frozen=True)
class SyntaxNode:
    kind: ClassVar[NodeKind]

    span: Span | None

    @property
    def start(self) -> int | None:
        return self.span.start if self.span else None

    @property
    def end(self) -> int | None:
        return self.span.end if self.span else None


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Stylesheet(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.STYLESHEET

    children: list[SyntaxNode] = field(default_factory=list)


@dataclass(frozen=True)
class Block(SyntaxNode):
    """Brace-delimited contents; the span covers both braces."""

    kind: ClassVar[NodeKind] = NodeKind.BLOCK

    children: list[SyntaxNode] = field(default_factory=list)


@dataclass(frozen=True)
class StyleRule(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.STYLE_RULE

    selectors: SelectorList
    block: Block


@dataclass(frozen=True)
class AtRule(SyntaxNode):
    """``@name prelude;`` or ``@name prelude { ... }``.

    The prelude is kept as opaque source text.
    """

    kind: ClassVar[NodeKind] = NodeKind.AT_RULE

    name: str
    prelude: RawText | None = None
    block: Block | None = None


@dataclass(frozen=True)
class Declaration(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.DECLARATION

    property: str
    value: SyntaxNode
    # "important", or the text of a legacy ``!ie`` style hack
    important: str | None = None


@dataclass(frozen=True)
class Value(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.VALUE

    children: list[SyntaxNode] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SelectorList(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.SELECTOR_LIST

    selectors: list[Selector] = field(default_factory=list)


@dataclass(frozen=True)
class Selector(SyntaxNode):
    """One complex selector: compounds joined by combinators."""

    kind: ClassVar[NodeKind] = NodeKind.SELECTOR

    components: list[SyntaxNode] = field(default_factory=list)


@dataclass(frozen=True)
class TypeSelector(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.TYPE_SELECTOR

    name: str = ""


@dataclass(frozen=True)
class ClassSelector(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.CLASS_SELECTOR

    name: str = ""


@dataclass(frozen=True)
class IdSelector(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.ID_SELECTOR

    name: str = ""


@dataclass(frozen=True)
class Combinator(SyntaxNode):
    """``>``, ``+``, ``~``, ``||``, or ``" "`` for the descendant combinator."""

    kind: ClassVar[NodeKind] = NodeKind.COMBINATOR

    symbol: str = " "


@dataclass(frozen=True)
class PseudoClassSelector(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.PSEUDO_CLASS_SELECTOR

    name: str = ""
    # None when written without parentheses
    arguments: list[SyntaxNode] | None = None


@dataclass(frozen=True)
class PseudoElementSelector(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.PSEUDO_ELEMENT_SELECTOR

    name: str = ""
    arguments: list[SyntaxNode] | None = None


@dataclass(frozen=True)
class AttributeSelector(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.ATTRIBUTE_SELECTOR

    name: str = ""
    matcher: AttributeMatcher | None = None
    # As authored, quotes included
    value: str | None = None
    flag: str | None = None


@dataclass(frozen=True)
class NthSelector(SyntaxNode):
    """The argument of ``:nth-child()`` and friends.

    ``a`` and ``b`` are both None for the ``odd``/``even`` keywords, which
    print from the span verbatim.
    """

    kind: ClassVar[NodeKind] = NodeKind.NTH_SELECTOR

    a: str | None = None
    b: str | None = None
    of: SelectorList | None = None


@dataclass(frozen=True)
class NestingSelector(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.NESTING_SELECTOR


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Identifier(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER

    name: str = ""


@dataclass(frozen=True)
class FunctionCall(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.FUNCTION_CALL

    name: str = ""
    arguments: list[SyntaxNode] = field(default_factory=list)


@dataclass(frozen=True)
class Dimension(SyntaxNode):
    """A number, percentage or dimension; ``unit`` is empty for numbers."""

    kind: ClassVar[NodeKind] = NodeKind.DIMENSION

    value: str = ""
    unit: str = ""


@dataclass(frozen=True)
class StringLiteral(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.STRING_LITERAL

    # As authored, quotes included
    text: str = ""


@dataclass(frozen=True)
class Operator(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.OPERATOR

    symbol: str = ""


@dataclass(frozen=True)
class Parenthesized(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.PARENTHESIZED

    children: list[SyntaxNode] = field(default_factory=list)


@dataclass(frozen=True)
class UrlLiteral(SyntaxNode):
    kind: ClassVar[NodeKind] = NodeKind.URL_LITERAL

    # Contents between the parentheses, quotes included when present
    value: str = ""


@dataclass(frozen=True)
class RawText(SyntaxNode):
    """Anything printed verbatim from its span."""

    kind: ClassVar[NodeKind] = NodeKind.RAW_TEXT
