"""File helpers shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click

from cssfmt.errors import CssFmtError


def read_source(path: Path | None) -> str:
    """Read a stylesheet, or stdin when *path* is None."""
    if path is None:
        with click.open_file("-", encoding="utf-8") as stream:
            return stream.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"cannot read {path}: {exc}") from exc


def write_output(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise click.ClickException(f"cannot write {path}: {exc}") from exc


def as_file(output: str) -> str:
    """File contents for formatted output: a final newline unless empty."""
    return output + "\n" if output else ""


def run_formatter(formatter: Callable[[str], str], source: str, path: Path | None) -> str:
    """Apply *formatter*, reporting formatting errors against the input name."""
    try:
        return formatter(source)
    except CssFmtError as exc:
        name = str(path) if path is not None else "<stdin>"
        raise click.ClickException(f"{name}: {exc}") from exc
