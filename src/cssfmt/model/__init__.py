"""cssfmt model layer -- public type re-exports."""

from cssfmt.model.nodes import (
    AtRule,
    AttributeMatcher,
    AttributeSelector,
    Block,
    ClassSelector,
    Combinator,
    Declaration,
    Dimension,
    FunctionCall,
    IdSelector,
    Identifier,
    NestingSelector,
    NodeKind,
    NthSelector,
    Operator,
    Parenthesized,
    PseudoClassSelector,
    PseudoElementSelector,
    RawText,
    Selector,
    SelectorList,
    Span,
    StringLiteral,
    StyleRule,
    Stylesheet,
    SyntaxNode,
    TypeSelector,
    UrlLiteral,
    Value,
)
from cssfmt.model.ranges import FormatResult, Range

__all__ = [
    # base
    "Span",
    "NodeKind",
    "SyntaxNode",
    # structure
    "Stylesheet",
    "Block",
    "StyleRule",
    "AtRule",
    "Declaration",
    "Value",
    # selectors
    "SelectorList",
    "Selector",
    "TypeSelector",
    "ClassSelector",
    "IdSelector",
    "Combinator",
    "PseudoClassSelector",
    "PseudoElementSelector",
    "AttributeMatcher",
    "AttributeSelector",
    "NthSelector",
    "NestingSelector",
    # values
    "Identifier",
    "FunctionCall",
    "Dimension",
    "StringLiteral",
    "Operator",
    "Parenthesized",
    "UrlLiteral",
    "RawText",
    # ranges
    "Range",
    "FormatResult",
]
