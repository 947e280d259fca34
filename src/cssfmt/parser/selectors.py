"""Selector list parsing from component values."""

from __future__ import annotations

import re

from cssfmt.model.nodes import (
    AttributeMatcher,
    AttributeSelector,
    ClassSelector,
    Combinator,
    IdSelector,
    NestingSelector,
    NthSelector,
    PseudoClassSelector,
    PseudoElementSelector,
    RawText,
    Selector,
    SelectorList,
    Span,
    SyntaxNode,
    TypeSelector,
)
from cssfmt.parser.lexer import (
    ComponentValue,
    Group,
    Tokenized,
    end_of,
    is_delim,
    is_token,
    is_whitespace,
    significant,
    start_of,
    strip_whitespace,
)

# Pseudo-classes whose argument is itself a selector list.
SELECTOR_LIST_PSEUDOS = frozenset(
    {
        "is",
        "where",
        "not",
        "has",
        "matches",
        "any",
        "-webkit-any",
        "-moz-any",
        "host",
        "host-context",
        "slotted",
        "cue",
        "current",
        "past",
        "future",
        "global",
        "local",
    }
)

NTH_PSEUDOS = frozenset(
    {
        "nth-child",
        "nth-last-child",
        "nth-of-type",
        "nth-last-of-type",
        "nth-col",
        "nth-last-col",
    }
)

_NTH_KEYWORD = re.compile(r"odd|even", re.IGNORECASE)
_NTH_AN_PLUS_B = re.compile(r"([+-]?\d*)[nN]\s*(?:([+-])\s*(\d+))?")
_NTH_INTEGER = re.compile(r"[+-]?\d+")

_FLAGS = ("i", "s")


def parse_selector_list(
    items: list[ComponentValue], source: Tokenized
) -> SelectorList | None:
    """Parse comma separated selectors.

    Members that can never be a selector (an at-keyword, a stray brace or
    semicolon) are dropped. Returns None when nothing usable is left.
    """
    selectors: list[Selector] = []
    for member in _split_commas(items):
        member = strip_whitespace(member)
        if not member:
            continue
        selector = _parse_selector(member, source)
        if selector is not None:
            selectors.append(selector)
    if not selectors:
        return None
    return SelectorList(
        span=Span(selectors[0].span.start, selectors[-1].span.end),
        selectors=selectors,
    )


def _split_commas(items: list[ComponentValue]) -> list[list[ComponentValue]]:
    members: list[list[ComponentValue]] = [[]]
    for item in items:
        if is_token(item, "COMMA"):
            members.append([])
        else:
            members[-1].append(item)
    return members


def _is_invalid(item: ComponentValue) -> bool:
    if isinstance(item, Group):
        return item.type == "LBRACE"
    return item.type in ("AT_KEYWORD", "SEMICOLON", "RBRACE")


def _parse_selector(member: list[ComponentValue], source: Tokenized) -> Selector | None:
    if any(_is_invalid(item) for item in member):
        return None

    components: list[SyntaxNode] = []
    index = 0
    count = len(member)
    while index < count:
        item = member[index]

        if is_whitespace(item):
            after = index + 1
            while after < count and is_whitespace(member[after]):
                after += 1
            if after < count and _combinator_width(member, after):
                index = after
                continue
            components.append(Combinator(span=_span(item), symbol=" "))
            index = after
            continue

        width = _combinator_width(member, index)
        if width:
            last = member[index + width - 1]
            symbol = "".join(str(token) for token in member[index : index + width])
            components.append(
                Combinator(span=Span(start_of(item), end_of(last)), symbol=symbol)
            )
            index += width
            while index < count and is_whitespace(member[index]):
                index += 1
            continue

        node, index = _parse_simple(member, index, source)
        components.append(node)

    return Selector(
        span=Span(start_of(member[0]), end_of(member[-1])), components=components
    )


def _combinator_width(member: list[ComponentValue], index: int) -> int:
    item = member[index]
    if is_delim(item, ">", "+", "~"):
        return 1
    if (
        is_delim(item, "|")
        and index + 1 < len(member)
        and is_delim(member[index + 1], "|")
    ):
        return 2
    return 0


def _parse_simple(
    member: list[ComponentValue], index: int, source: Tokenized
) -> tuple[SyntaxNode, int]:
    item = member[index]
    following = member[index + 1] if index + 1 < len(member) else None

    if isinstance(item, Group):
        if item.type == "LSQB":
            return _parse_attribute(item, source), index + 1
        return RawText(span=_span(item)), index + 1

    if item.type == "IDENT" or is_delim(item, "*"):
        end = index + 1
        name = str(item)
        # namespace prefix: ns|element, *|element
        if (
            following is not None
            and is_delim(following, "|")
            and index + 2 < len(member)
            and (is_token(member[index + 2], "IDENT") or is_delim(member[index + 2], "*"))
        ):
            name += "|" + str(member[index + 2])
            end = index + 3
        span = Span(start_of(item), end_of(member[end - 1]))
        return TypeSelector(span=span, name=name), end

    if is_delim(item, ".") and following is not None and is_token(following, "IDENT"):
        span = Span(start_of(item), end_of(following))
        return ClassSelector(span=span, name=str(following)), index + 2

    if item.type == "HASH":
        return IdSelector(span=_span(item), name=str(item)[1:]), index + 1

    if is_delim(item, "&"):
        return NestingSelector(span=_span(item)), index + 1

    if item.type == "COLON":
        return _parse_pseudo(member, index, source)

    return RawText(span=_span(item)), index + 1


def _parse_pseudo(
    member: list[ComponentValue], index: int, source: Tokenized
) -> tuple[SyntaxNode, int]:
    colon = member[index]
    cursor = index + 1
    element = False
    if cursor < len(member) and is_token(member[cursor], "COLON"):
        element = True
        cursor += 1
    if cursor >= len(member):
        return RawText(span=_span(colon)), index + 1

    target = member[cursor]
    node_type = PseudoElementSelector if element else PseudoClassSelector
    if is_token(target, "IDENT"):
        span = Span(start_of(colon), end_of(target))
        return node_type(span=span, name=str(target)), cursor + 1
    if isinstance(target, Group) and target.type == "FUNCTION":
        span = Span(start_of(colon), target.end)
        arguments = _pseudo_arguments(target, source)
        return node_type(span=span, name=target.name, arguments=arguments), cursor + 1
    return RawText(span=_span(colon)), index + 1


def _pseudo_arguments(function: Group, source: Tokenized) -> list[SyntaxNode]:
    items = strip_whitespace(function.items)
    if not items:
        return []
    name = function.name.lower()
    if name in NTH_PSEUDOS:
        nth = parse_nth(items, source)
        if nth is not None:
            return [nth]
    elif name in SELECTOR_LIST_PSEUDOS:
        selectors = parse_selector_list(items, source)
        if selectors is not None:
            return [selectors]
    return [RawText(span=Span(start_of(items[0]), end_of(items[-1])))]


def parse_nth(items: list[ComponentValue], source: Tokenized) -> NthSelector | None:
    """Parse ``An+B``, ``odd``/``even`` and an optional ``of <selectors>``."""
    of_index = None
    for position, item in enumerate(items):
        if is_token(item, "IDENT") and str(item).lower() == "of":
            of_index = position
            break

    nth_items = strip_whitespace(items if of_index is None else items[:of_index])
    if not nth_items:
        return None
    span = Span(start_of(nth_items[0]), end_of(nth_items[-1]))
    text = source.css[span.start : span.end]

    of = None
    if of_index is not None:
        of = parse_selector_list(items[of_index + 1 :], source)
        if of is None:
            return None

    if _NTH_KEYWORD.fullmatch(text):
        return NthSelector(span=span, of=of)

    match = _NTH_AN_PLUS_B.fullmatch(text)
    if match:
        coefficient, sign, offset = match.groups()
        if coefficient in ("", "+"):
            a = "1"
        elif coefficient == "-":
            a = "-1"
        else:
            a = coefficient.lstrip("+")
        b = None
        if sign is not None:
            b = "-" + offset if sign == "-" else offset
        return NthSelector(span=span, a=a, b=b, of=of)

    if _NTH_INTEGER.fullmatch(text):
        return NthSelector(span=span, b=text.lstrip("+"), of=of)
    return None


# ---------------------------------------------------------------------------
# Attribute selectors
# ---------------------------------------------------------------------------


def _parse_attribute(group: Group, source: Tokenized) -> SyntaxNode:
    span = Span(group.start, group.end)
    raw = RawText(span=span)
    if not group.closed or source.has_comment(group.start, group.end):
        return raw

    items = significant(group.items)
    name, rest = _attribute_name(items)
    if name is None:
        return raw
    if not rest:
        return AttributeSelector(span=span, name=name)

    matcher, rest = _attribute_matcher(rest)
    if matcher is None or not rest:
        return raw
    value = rest[0]
    if not is_token(value, "IDENT", "STRING", "NUMBER", "DIMENSION", "PERCENTAGE"):
        return raw

    flag = None
    if len(rest) == 2 and is_token(rest[1], "IDENT") and str(rest[1]).lower() in _FLAGS:
        flag = str(rest[1])
    elif len(rest) > 1:
        return raw
    return AttributeSelector(
        span=span, name=name, matcher=matcher, value=str(value), flag=flag
    )


def _attribute_name(
    items: list[ComponentValue],
) -> tuple[str | None, list[ComponentValue]]:
    index = 0
    name = ""
    if items and (is_token(items[0], "IDENT") or is_delim(items[0], "*")):
        name = str(items[0])
        index = 1
    if (
        index + 1 < len(items)
        and is_delim(items[index], "|")
        and is_token(items[index + 1], "IDENT")
    ):
        name += "|" + str(items[index + 1])
        index += 2
    if not name or name == "*":
        return None, items
    return name, items[index:]


def _attribute_matcher(
    items: list[ComponentValue],
) -> tuple[AttributeMatcher | None, list[ComponentValue]]:
    if is_delim(items[0], "="):
        return AttributeMatcher.EQUAL, items[1:]
    if len(items) > 1 and is_delim(items[0], "~", "|", "^", "$", "*") and is_delim(items[1], "="):
        return AttributeMatcher(str(items[0]) + "="), items[2:]
    return None, items


def _span(item: ComponentValue) -> Span:
    return Span(start_of(item), end_of(item))
