"""Per-call render state shared by all printers."""

from __future__ import annotations

from cssfmt.config import FormatOptions
from cssfmt.model.nodes import Span, SyntaxNode
from cssfmt.model.ranges import Range
from cssfmt.printer.comments import CommentIndex


class Source:
    """Reads node text back out of the original input."""

    def __init__(self, css: str) -> None:
        self.css = css

    def text(self, node: SyntaxNode | None) -> str:
        if node is None or node.span is None:
            return ""
        return self.css[node.span.start : node.span.end]


class RenderContext:
    """Everything that changes while one stylesheet is printed.

    Holds the mode-dependent separators, the indentation depth, the comment
    cursor, the output buffer and the range accumulator. One instance per
    format call; nothing here outlives it.
    """

    def __init__(
        self, css: str, comments: list[Span], options: FormatOptions
    ) -> None:
        self.source = Source(css)
        self.minify = options.minify
        self.newline = "" if options.minify else "\n"
        self.optional_space = "" if options.minify else " "
        self.last_semicolon = "" if options.minify else ";"
        self.depth = 0

        self._indent_unit = options.indent_unit
        self._comments = CommentIndex(css, comments)
        self._chunks: list[str] = []
        self._length = 0
        self._requested = {(r.start, r.end) for r in options.ranges or ()}
        self.ranges: list[Range] = []

    # -- output -------------------------------------------------------------

    def write(self, text: str) -> None:
        if text:
            self._chunks.append(text)
            self._length += len(text)

    @property
    def length(self) -> int:
        return self._length

    def getvalue(self) -> str:
        return "".join(self._chunks)

    # -- layout -------------------------------------------------------------

    def indent(self, level: int | None = None) -> str:
        return self._indent_unit * (self.depth if level is None else level)

    def comment(
        self, after: int | None, before: int | None, level: int | None = None
    ) -> str:
        """Comments in the gap, one per line at the given indentation level."""
        if self.minify:
            return ""
        return self._comments.between(after, before, self.newline + self.indent(level))

    # -- ranges -------------------------------------------------------------

    def wants_range(self, span: Span) -> bool:
        return (span.start, span.end) in self._requested

    def record_range(self, start: int, end: int) -> None:
        self.ranges.append(Range(start, end))
