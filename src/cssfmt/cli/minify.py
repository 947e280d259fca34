"""CLI command: cssfmt minify -- strip insignificant whitespace."""

from __future__ import annotations

from pathlib import Path

import click

from cssfmt.cli.files import read_source, run_formatter, write_output
from cssfmt.formatter import minify


@click.command("minify")
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the result here instead of stdout.",
)
def minify_command(files: tuple[Path, ...], output: Path | None) -> None:
    """Minify CSS FILES (or stdin) into one stylesheet."""
    targets: list[Path | None] = list(files) or [None]
    result = "".join(run_formatter(minify, read_source(path), path) for path in targets)
    if output is None:
        click.echo(result)
    else:
        write_output(output, result)
