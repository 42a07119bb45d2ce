"""Print the partition used for a reference law.

Examples
--------
  prngeval partition --law asin --bins 12
  prngeval partition --law lil --bins 22 --format csv
"""

from __future__ import annotations

import click

from prngeval.config import Config, SUPPORTED_LAWS
from prngeval.reference import get_reference_law


@click.command(name="partition")
@click.option(
    "law",
    "--law",
    type=click.Choice(SUPPORTED_LAWS, case_sensitive=False),
    required=True,
    help="Reference law whose partition family to use",
)
@click.option(
    "bins",
    "--bins",
    type=int,
    default=Config.DEFAULT_PARTITION_SIZE,
    show_default=True,
    help="Number of intervals, including the two unbounded ones",
)
@click.option(
    "output_format",
    "--format",
    type=click.Choice(["table", "csv"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
def partition(law: str, bins: int, output_format: str) -> None:
    """Print the intervals of the partition for LAW."""

    try:
        part = get_reference_law(law.lower()).make_partition(bins)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if output_format.lower() == "csv":
        click.echo("low,high")
        for low, high in part:
            click.echo(f"{low},{high}")
        return
    width = len(str(len(part) - 1))
    for i, (low, high) in enumerate(part):
        click.echo(f"{str(i).rjust(width)}  [{low:.6g}, {high:.6g})")
