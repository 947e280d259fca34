"""cssfmt CLI entry point: Click group with subcommands."""

import logging

import click

from cssfmt import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssfmt")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """cssfmt - format and minify CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from cssfmt.cli.fmt import format_command  # noqa: E402
from cssfmt.cli.minify import minify_command  # noqa: E402

cli.add_command(format_command)
cli.add_command(minify_command)
