"""Public entry points: :func:`format` and :func:`minify`."""

from __future__ import annotations

import logging
import sys
from typing import Any

from cssfmt.config import FormatOptions
from cssfmt.errors import NestingTooDeepError
from cssfmt.model.ranges import FormatResult
from cssfmt.parser import parse
from cssfmt.printer import RenderContext, print_stylesheet

logger = logging.getLogger("cssfmt")


def format(
    css: str, options: FormatOptions | None = None, **fields: Any
) -> str | FormatResult:
    """Format *css*.

    Options come either as a :class:`FormatOptions` instance or as its
    fields given by keyword (``format(css, minify=True)``), not both.

    Returns the formatted text, or a :class:`FormatResult` with the output
    ranges when ``ranges`` was given.

    Raises:
        InvalidOptionError: if ``tab_size`` is not an integer >= 1. Checked
            before the input is looked at.
        NestingTooDeepError: if blocks nest deeper than the recursion
            limit allows (a few hundred levels by default).
    """
    if options is None:
        options = FormatOptions(**fields)
    elif fields:
        raise TypeError("pass either a FormatOptions instance or keyword options")

    try:
        result = parse(css)
        logger.debug(
            "Formatting %d chars (%d comments), minify=%s",
            len(css),
            len(result.comments),
            options.minify,
        )
        ctx = RenderContext(css, result.comments, options)
        print_stylesheet(result.stylesheet, ctx)
    except RecursionError as exc:
        raise NestingTooDeepError(
            "blocks nest too deeply to format (interpreter recursion limit is "
            f"{sys.getrecursionlimit()})"
        ) from exc
    output = ctx.getvalue()

    if options.ranges is None:
        return output
    if len(ctx.ranges) < len(options.ranges):
        logger.debug(
            "Dropped %d of %d ranges matching no rule",
            len(options.ranges) - len(ctx.ranges),
            len(options.ranges),
        )
    return FormatResult(css=output, ranges=ctx.ranges)


def minify(css: str) -> str:
    """Format *css* with every insignificant character removed."""
    return format(css, FormatOptions(minify=True))
