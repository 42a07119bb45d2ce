"""Measures defined on the intervals of a fixed partition.

A :class:`Measure` is not a density: it only knows the mass of each interval
of its partition. Values are taken as given; non-negativity and
normalization are the caller's responsibility.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from prngeval.partition import Partition


@dataclass(frozen=True)
class Measure:
    """Immutable ``(partition, values)`` pair with one value per interval."""

    partition: Partition
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        object.__setattr__(self, "values", values)
        if len(values) != len(self.partition):
            raise ValueError(
                f"Measure needs one value per interval: got {len(values)} values "
                f"for {len(self.partition)} intervals"
            )

    @classmethod
    def from_counts(cls, partition: Partition, counts: Sequence[float]) -> Measure:
        """Normalize histogram ``counts`` into a probability measure."""

        arr = np.asarray(counts, dtype=float)
        total = float(arr.sum())
        if total <= 0.0:
            raise ValueError("Histogram counts must have a positive total")
        return cls(partition, tuple(arr / total))

    @classmethod
    def from_observations(cls, partition: Partition, observations: Iterable[float]) -> Measure:
        """Bin ``observations`` over ``partition`` and normalize the counts."""

        return cls.from_counts(partition, partition.bin(observations))

    def __len__(self) -> int:
        return len(self.values)

    @property
    def total(self) -> float:
        return float(sum(self.values))

    def as_array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=float)


def _round(x: float, digits: int) -> float:
    if np.isinf(x):
        return x
    return round(x, digits)


def _rows(measure: Measure, digits: int) -> list[list[str]]:
    rows: list[list[str]] = []
    for (low, high), value in zip(measure.partition, measure.values):
        rows.append([f"[{_round(low, 3)}, {_round(high, 3)})", f"{value:.{digits}f}"])
    return rows


def format_measure_ascii(measure: Measure, digits: int = 5) -> str:
    headers = ["Interval", "Mass"]
    rows = _rows(measure, digits)
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]

    def fmt_row(cols: list[str]) -> str:
        return " | ".join(col.ljust(widths[i]) for i, col in enumerate(cols))

    sep = "-+-".join("-" * w for w in widths)
    lines = [fmt_row(headers), sep]
    lines.extend(fmt_row(r) for r in rows)
    return "\n".join(lines)


def format_measure_markdown(measure: Measure, digits: int = 5) -> str:
    lines = ["| Interval | Mass |", "| --- | --- |"]
    lines.extend("| " + " | ".join(r) + " |" for r in _rows(measure, digits))
    return "\n".join(lines)


def format_measure_csv(measure: Measure, digits: int = 5) -> str:
    out_lines = ["low,high,mass"]
    for (low, high), value in zip(measure.partition, measure.values):
        out_lines.append(f"{low},{high},{value:.{digits}f}")
    return "\n".join(out_lines)


def format_measure(measure: Measure, output_format: str = "table", digits: int = 5) -> str:
    """Render ``measure`` one interval per row.

    ``output_format`` may be one of {"table", "markdown", "csv"}.
    """

    if output_format == "csv":
        return format_measure_csv(measure, digits)
    if output_format == "markdown":
        return format_measure_markdown(measure, digits)
    if output_format == "table":
        return format_measure_ascii(measure, digits)
    raise ValueError(f"Unknown output format: {output_format!r}")


__all__ = [
    "Measure",
    "format_measure",
    "format_measure_ascii",
    "format_measure_markdown",
    "format_measure_csv",
]
