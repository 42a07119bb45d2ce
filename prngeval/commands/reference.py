"""Print a theoretical reference measure.

Examples
--------
  prngeval reference --law asin --bins 12
  prngeval reference --law lil --bins 22 --length 524288 --format markdown
"""

from __future__ import annotations

import click

from prngeval.config import Config, SUPPORTED_LAWS
from prngeval.errors import InvalidDomainParameter
from prngeval.measure import format_measure
from prngeval.reference import get_reference_law


@click.command(name="reference")
@click.option(
    "law",
    "--law",
    type=click.Choice(SUPPORTED_LAWS, case_sensitive=False),
    required=True,
    help="Reference law (asin or lil)",
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
    "length",
    "--length",
    type=int,
    default=Config.DEFAULT_SEQUENCE_LENGTH,
    show_default=True,
    help="Bit sequence length n",
)
@click.option(
    "output_format",
    "--format",
    type=click.Choice(["table", "markdown", "csv"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
@click.option(
    "digits",
    "--digits",
    type=click.IntRange(min=1, max=17),
    default=5,
    show_default=True,
    help="Decimal digits for interval masses",
)
def reference(law: str, bins: int, length: int, output_format: str, digits: int) -> None:
    """Print the reference measure of LAW over its partition."""

    ref = get_reference_law(law.lower())
    try:
        part = ref.make_partition(bins)
        measure = ref.make_measure(length, part)
    except InvalidDomainParameter as e:
        raise click.ClickException(f"{e}. Use a larger --length.") from e
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    click.echo(format_measure(measure, output_format.lower(), digits))
