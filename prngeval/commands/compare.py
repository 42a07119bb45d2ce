"""Compare observed statistics against a reference measure.

The observations file holds one real value per line, e.g. the fraction of
time each tested sequence spent above zero. Blank lines and lines starting
with ``#`` are ignored.

Examples
--------
  prngeval compare asin_fractions.txt --law asin --bins 22
  prngeval compare lil_values.txt --law lil --length 524288 --distance all --format json
"""

from __future__ import annotations

from pathlib import Path
import json
import logging

import click

from prngeval.config import Config, SUPPORTED_DISTANCES, SUPPORTED_LAWS
from prngeval.distance import get_distance
from prngeval.errors import InvalidDomainParameter
from prngeval.measure import Measure
from prngeval.reference import get_reference_law


_LOGGER = logging.getLogger(__name__)


def load_observations(path: Path) -> list[float]:
    """Read one float per non-comment line of ``path``."""

    values: list[float] = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            try:
                values.append(float(text))
            except ValueError as e:
                raise ValueError(f"{path}:{lineno}: not a number: {text!r}") from e
    return values


@click.command(name="compare")
@click.argument("observations", type=click.Path(exists=True, dir_okay=False, path_type=Path))
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
    help="Bit sequence length n the observations were computed from",
)
@click.option(
    "distance",
    "--distance",
    type=click.Choice([*SUPPORTED_DISTANCES, "all"], case_sensitive=False),
    default=Config.DEFAULT_DISTANCE,
    show_default=True,
    help="Distance to report",
)
@click.option(
    "output_format",
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
def compare(
    observations: Path,
    law: str,
    bins: int,
    length: int,
    distance: str,
    output_format: str,
) -> None:
    """Bin OBSERVATIONS and report their distance to the reference measure."""

    try:
        values = load_observations(observations)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    if not values:
        raise click.ClickException(f"No observations found in {observations}")

    ref = get_reference_law(law.lower())
    try:
        part = ref.make_partition(bins)
        ideal = ref.make_measure(length, part)
    except InvalidDomainParameter as e:
        raise click.ClickException(f"{e}. Use a larger --length.") from e
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    try:
        empirical = Measure.from_observations(part, values)
    except ValueError as e:
        raise click.ClickException(f"{observations}: {e}") from e
    _LOGGER.debug("Binned %d observations into %d intervals", len(values), len(part))

    names = SUPPORTED_DISTANCES if distance.lower() == "all" else [distance.lower()]
    results = {name: get_distance(name)(empirical, ideal) for name in names}

    if output_format.lower() == "json":
        payload = {
            "law": ref.name,
            "bins": len(part),
            "length": length,
            "observations": len(values),
            "distances": results,
        }
        click.echo(json.dumps(payload, indent=2))
        return
    click.echo(f"Law: {ref.name} | Bins: {len(part)} | Observations: {len(values)}")
    for name, value in results.items():
        click.echo(f"{name:<5} {value:.6f}")
