"""CLI command: cssfmt format -- pretty-print stylesheets."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssfmt.cli.files import as_file, read_source, run_formatter, write_output
from cssfmt.config import FormatOptions
from cssfmt.errors import InvalidOptionError
from cssfmt.formatter import format as format_css


@click.command("format")
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--tab-size", type=int, default=None, help="Indent with N spaces instead of tabs.")
@click.option("--minify", is_flag=True, help="Remove all insignificant whitespace.")
@click.option("--write", "-w", is_flag=True, help="Rewrite files in place.")
@click.option("--check", is_flag=True, help="Exit with code 1 if any file would change.")
def format_command(
    files: tuple[Path, ...], tab_size: int | None, minify: bool, write: bool, check: bool
) -> None:
    """Format CSS FILES, or stdin when no files are given.

    Formatted output goes to stdout unless --write or --check is used.
    """
    try:
        options = FormatOptions(minify=minify, tab_size=tab_size)
    except InvalidOptionError as exc:
        raise click.BadParameter(str(exc), param_hint="--tab-size") from exc

    targets: list[Path | None] = list(files) or [None]
    changed: list[str] = []

    for path in targets:
        source = read_source(path)
        output = as_file(run_formatter(lambda css: format_css(css, options), source, path))
        name = str(path) if path is not None else "<stdin>"

        if check:
            if output != source:
                changed.append(name)
            continue
        if write and path is not None:
            if output != source:
                write_output(path, output)
                click.echo(f"Formatted {name}", err=True)
            continue
        click.echo(output, nl=False)

    if check:
        for name in changed:
            click.echo(f"Would reformat {name}", err=True)
        if changed:
            sys.exit(1)
        click.echo(f"OK: {len(targets)} file(s) already formatted", err=True)
