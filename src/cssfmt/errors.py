"""Exception types raised by cssfmt."""


class CssFmtError(Exception):
    """Base class for all cssfmt errors."""


class InvalidOptionError(CssFmtError, ValueError):
    """Raised when formatting options are out of range.

    Raised before any parsing happens, so a bad option never produces
    partial output.
    """

    def __init__(self, message: str, option: str | None = None):
        self.option = option
        super().__init__(message)


class NestingTooDeepError(CssFmtError):
    """Raised when blocks nest deeper than the interpreter's recursion limit."""
