"""Re-interleaving of comments that the parser kept outside the tree."""

from __future__ import annotations

from cssfmt.model.nodes import Span


class CommentIndex:
    """Answers "which comments sit in this gap" over a sorted comment list.

    Gaps are queried in document order, so a cursor skips every comment that
    starts before the current gap and never moves back. Comments that fall
    inside a node's span are passed over this way and never printed.
    """

    def __init__(self, css: str, comments: list[Span]) -> None:
        self._css = css
        self._comments = comments
        self._cursor = 0

    def between(self, after: int | None, before: int | None, joiner: str) -> str:
        """Comments lying entirely within ``[after, before]``, joined.

        Looking does not consume: asking about the same gap twice gives the
        same answer.
        """
        if after is None or before is None:
            return ""
        comments = self._comments
        while self._cursor < len(comments) and comments[self._cursor].start < after:
            self._cursor += 1

        found: list[str] = []
        index = self._cursor
        while index < len(comments) and comments[index].end <= before:
            span = comments[index]
            found.append(self._css[span.start : span.end])
            index += 1
        return joiner.join(found)
