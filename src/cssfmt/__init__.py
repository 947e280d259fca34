"""cssfmt: CSS formatter and minifier."""

from __future__ import annotations

__version__ = "0.1.0"

from cssfmt.config import FormatOptions  # noqa: E402
from cssfmt.errors import (  # noqa: E402
    CssFmtError,
    InvalidOptionError,
    NestingTooDeepError,
)
from cssfmt.formatter import format, minify  # noqa: E402
from cssfmt.model.ranges import FormatResult, Range  # noqa: E402
from cssfmt.parser import ParseResult, parse  # noqa: E402

__all__ = [
    "__version__",
    "format",
    "minify",
    "parse",
    "FormatOptions",
    "FormatResult",
    "Range",
    "ParseResult",
    "CssFmtError",
    "InvalidOptionError",
    "NestingTooDeepError",
]
