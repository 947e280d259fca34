"""Tests for declaration value parsing."""

from cssfmt.model import (
    Dimension,
    FunctionCall,
    Identifier,
    Operator,
    Parenthesized,
    RawText,
    StringLiteral,
    UrlLiteral,
    Value,
)
from cssfmt.parser import parse


def _value(value_text):
    rule = parse("a { b: " + value_text + " }").stylesheet.children[0]
    return rule.block.children[0].value


def _kinds(value_text):
    return [type(node) for node in _value(value_text).children]


class TestValueNodes:
    def test_identifiers_and_dimensions(self):
        assert _kinds("solid 1PX 50%") == [Identifier, Dimension, Dimension]

    def test_dimension_split(self):
        (dimension,) = _value("1.5E3Px").children
        assert (dimension.value, dimension.unit) == ("1.5E3", "Px")

    def test_percentage_unit(self):
        (dimension,) = _value("50%").children
        assert dimension.unit == "%"

    def test_function(self):
        (function,) = _value("rgb(0, 0, 0)").children
        assert isinstance(function, FunctionCall)
        assert function.name == "rgb"
        assert [type(node) for node in function.arguments] == [
            Dimension,
            Operator,
            Dimension,
            Operator,
            Dimension,
        ]

    def test_operators(self):
        (function,) = _value("calc(1px + 2px * 3 / 4 - 5px)").children
        symbols = [node.symbol for node in function.arguments if isinstance(node, Operator)]
        assert symbols == ["+", "*", "/", "-"]

    def test_parenthesized(self):
        (function,) = _value("calc((1px + 2px) * 2)").children
        assert isinstance(function.arguments[0], Parenthesized)

    def test_string(self):
        (string,) = _value("'hello'").children
        assert string == StringLiteral(span=string.span, text="'hello'")

    def test_url(self):
        (url,) = _value("url( 'a.png' )").children
        assert isinstance(url, UrlLiteral)
        assert url.value == "'a.png'"

    def test_hash_is_raw(self):
        (color,) = _value("#FFF").children
        assert isinstance(color, RawText)

    def test_bracketed_line_names_are_raw(self):
        kinds = _kinds("[full-start] 1fr [full-end]")
        assert kinds == [RawText, Dimension, RawText]


class TestFallback:
    def test_unknown_delimiter_makes_the_value_raw(self):
        assert isinstance(_value("alpha(opacity=50)"), RawText)

    def test_plain_value(self):
        assert isinstance(_value("red"), Value)
