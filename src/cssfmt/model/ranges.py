"""Source/output range types used when formatting with ``ranges``."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Range:
    start: int
    end: int


@dataclass(frozen=True)
class FormatResult:
    """Formatted text plus the output position of each matched rule range."""

    css: str
    ranges: list[Range] = field(default_factory=list)
