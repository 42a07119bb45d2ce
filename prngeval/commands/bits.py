"""Dump bits from a raw file or from a command's output.

Examples
--------
  prngeval bits seq/R/aes128ctr/1 --count 128
  prngeval bits --command "openssl rand 4096" --count 64 --offset 64
"""

from __future__ import annotations

from pathlib import Path

import click

from prngeval.errors import SourceUnavailable, StreamExhausted
from prngeval.sources import BitSource, CommandSource, FileSource


@click.command(name="bits")
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option(
    "command",
    "--command",
    type=str,
    default=None,
    help="Command whose stdout provides the bits (instead of PATH)",
)
@click.option(
    "count",
    "--count",
    type=click.IntRange(min=0),
    default=64,
    show_default=True,
    help="Number of bits to print",
)
@click.option(
    "offset",
    "--offset",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Number of bits to skip first",
)
def bits(path: Path | None, command: str | None, count: int, offset: int) -> None:
    """Print COUNT bits of PATH as a 0/1 string, least-significant bit first."""

    if (path is None) == (command is None):
        raise click.ClickException("Give exactly one of PATH or --command.")
    source: BitSource = FileSource(path) if path is not None else CommandSource(command)

    out: list[str] = []
    try:
        source.start()
    except (SourceUnavailable, StreamExhausted) as e:
        raise click.ClickException(str(e)) from e
    consumed = 0
    try:
        while consumed < offset + count:
            bit = source.next()
            if consumed >= offset:
                out.append(str(bit))
            consumed += 1
    except StreamExhausted:
        click.secho(f"Stream exhausted after {consumed} bits.", fg="yellow", err=True)
    finally:
        source.stop()
    click.echo("".join(out))
