"""CSS parsing: a lark tokenizer plus an error tolerant tree builder."""

from cssfmt.parser.parser import ParseResult, parse

__all__ = ["ParseResult", "parse"]
