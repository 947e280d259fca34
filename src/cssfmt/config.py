"""Formatting options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cssfmt.errors import InvalidOptionError
from cssfmt.model.ranges import Range


@dataclass(frozen=True)
class FormatOptions:
    """Options for a single :func:`cssfmt.format` call.

    ``tab_size`` switches indentation from one tab per level to that many
    spaces. ``ranges`` asks for the output position of the style rules whose
    source spans match exactly; each may be a :class:`Range`, a
    ``{"start": s, "end": e}`` mapping or an ``(s, e)`` pair.
    """

    minify: bool = False
    tab_size: int | None = None
    ranges: tuple[Range, ...] | None = None

    def __post_init__(self) -> None:
        if self.tab_size is not None:
            if isinstance(self.tab_size, bool) or not isinstance(self.tab_size, int):
                raise InvalidOptionError(
                    f"tab_size must be an integer, got {self.tab_size!r}",
                    option="tab_size",
                )
            if self.tab_size < 1:
                raise InvalidOptionError(
                    f"tab_size must be at least 1, got {self.tab_size}",
                    option="tab_size",
                )
        if self.ranges is not None:
            ranges = tuple(_to_range(r) for r in self.ranges)
            object.__setattr__(self, "ranges", ranges)

    @property
    def indent_unit(self) -> str:
        if self.minify:
            return ""
        if self.tab_size is None:
            return "\t"
        return " " * self.tab_size


def _to_range(value: object) -> Range:
    """Accept a Range, a ``{"start": s, "end": e}`` mapping or an (s, e) pair."""
    if isinstance(value, Range):
        start, end = value.start, value.end
    elif isinstance(value, Mapping) and set(value) == {"start", "end"}:
        start, end = value["start"], value["end"]
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        start, end = value
    else:
        raise InvalidOptionError(f"invalid range {value!r}", option="ranges")
    if not all(isinstance(n, int) and not isinstance(n, bool) for n in (start, end)):
        raise InvalidOptionError(
            f"range offsets must be integers, got {value!r}", option="ranges"
        )
    return Range(start, end)
