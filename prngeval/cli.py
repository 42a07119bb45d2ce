"""Command-line interface for prngeval using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click

from prngeval import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
def cli(verbose: bool) -> None:
    """prngeval: statistical distance testing of pseudorandom bit streams."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        )


# Register subcommands
from prngeval.commands.partition import partition  # noqa: E402
from prngeval.commands.reference import reference  # noqa: E402
from prngeval.commands.bits import bits  # noqa: E402
from prngeval.commands.compare import compare  # noqa: E402

cli.add_command(partition)
cli.add_command(reference)
cli.add_command(bits)
cli.add_command(compare)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
