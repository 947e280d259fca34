"""Best-effort spacing fixes for at-rule preludes.

Preludes are not parsed. A fixed sequence of regex passes normalizes the
spacing that matters most in practice (media features, range syntax,
``calc()``); everything else passes through. Quoted strings and ``url()``
contents are masked out first so the passes never rewrite them.
"""

from __future__ import annotations

import re

_PROTECTED = re.compile(
    r"""
    "(?:[^"\\]|\\[\s\S])*"?             # double quoted string
    | '(?:[^'\\]|\\[\s\S])*'?           # single quoted string
    | (?<=[uU][rR][lL]\()[^)]*(?=\))    # url() contents
    """,
    re.VERBOSE,
)
_MASK_OPEN = "\ue000"
_MASK_CLOSE = "\ue001"
_PLACEHOLDER = re.compile(_MASK_OPEN + r"(\d+)" + _MASK_CLOSE)

_SELECTOR_FUNCTION = re.compile(r"selector\(", re.IGNORECASE)
_COLON_COMMA = re.compile(r"\s*([:,])")
_PAREN_WORD = re.compile(r"\)([a-zA-Z])")
_RANGE_PAIR = re.compile(r"\s*(=>|>=|<=)\s*")
_RANGE_SINGLE = re.compile(r"(?<=[^<>=\s])([<>])(?=[^<>=\s])")
_WHITESPACE = re.compile(r"\s+")
_SIMPLE_CALC = re.compile(
    r"calc\(\s*([^()+\-*/]+)\s*([*/+-])\s*([^()+\-*/]+)\s*\)", re.IGNORECASE
)
_KNOWN_FUNCTION = re.compile(r"\b(selector|url|supports|layer)\(", re.IGNORECASE)


def format_prelude(prelude: str, minify: bool = False) -> str:
    """Normalize spacing in an at-rule prelude.

    Whitespace in a prelude separates words (``screen and (...)``) and is
    kept in minified output too; only the spaces around ``*`` and ``/`` in
    ``calc()`` depend on *minify*.
    """
    protected: list[str] = []
    text = prelude
    if _MASK_OPEN not in prelude and _MASK_CLOSE not in prelude:

        def mask(match: re.Match[str]) -> str:
            protected.append(match.group(0))
            return f"{_MASK_OPEN}{len(protected) - 1}{_MASK_CLOSE}"

        text = _PROTECTED.sub(mask, prelude)

    if _SELECTOR_FUNCTION.search(text):
        text = _COLON_COMMA.sub(r"\1", text)
    else:
        text = _space_separators(text)
    text = _PAREN_WORD.sub(r") \1", text)
    text = _RANGE_PAIR.sub(r" \1 ", text)
    text = _RANGE_SINGLE.sub(r" \1 ", text)
    text = _WHITESPACE.sub(" ", text)

    def format_calc(match: re.Match[str]) -> str:
        left, operator, right = match.groups()
        space = "" if minify and operator in "*/" else " "
        return f"calc({left.strip()}{space}{operator}{space}{right.strip()})"

    text = _SIMPLE_CALC.sub(format_calc, text)
    text = _KNOWN_FUNCTION.sub(lambda match: match.group(1).lower() + "(", text)
    text = text.strip()

    if protected:
        text = _PLACEHOLDER.sub(lambda match: protected[int(match.group(1))], text)
    return text


def _space_separators(text: str) -> str:
    """One space after each comma, and after each colon inside parentheses.

    Colons outside parentheses start pseudo-classes (``@page cover:left``)
    and are left as written.
    """
    out: list[str] = []
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        if char == "," or (char == ":" and depth > 0):
            while out and out[-1].isspace():
                out.pop()
            out.append(char + " ")
        else:
            out.append(char)
    return "".join(out)
