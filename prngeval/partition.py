"""Partitions of the real line into contiguous half-open intervals.

A partition has the form::

    (-inf, a_1), [a_1, a_2), ..., [a_{n-1}, a_n), [a_n, +inf)

Partitions are frozen value objects: two partitions are the same partition
only when every bound matches exactly, regardless of how they were built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence
import math
import operator

import numpy as np


Interval = tuple[float, float]


def _as_count(count: int) -> int:
    try:
        return operator.index(count)
    except TypeError as e:
        raise ValueError(f"count must be an integer, got {count!r}") from e


@dataclass(frozen=True)
class Partition:
    """Immutable, validated sequence of ``(low, high)`` intervals.

    Raises
    ------
    ValueError
        If there are fewer than two intervals, the outer intervals are not
        unbounded, or consecutive intervals do not share a boundary.
    """

    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        intervals = tuple((float(low), float(high)) for low, high in self.intervals)
        object.__setattr__(self, "intervals", intervals)
        if len(intervals) < 2:
            raise ValueError("A partition needs at least two intervals")
        if intervals[0][0] != -math.inf:
            raise ValueError(f"First interval must start at -inf, got {intervals[0][0]}")
        if intervals[-1][1] != math.inf:
            raise ValueError(f"Last interval must end at +inf, got {intervals[-1][1]}")
        for i in range(len(intervals) - 1):
            if intervals[i][1] != intervals[i + 1][0]:
                raise ValueError(
                    f"Intervals {i} and {i + 1} are not contiguous: "
                    f"{intervals[i][1]} != {intervals[i + 1][0]}"
                )

    @classmethod
    def from_bounds(cls, bounds: Sequence[float]) -> Partition:
        """Build a partition from its finite boundaries ``a_1, ..., a_n``."""

        if not bounds:
            raise ValueError("At least one finite boundary is required")
        edges = [-math.inf, *(float(b) for b in bounds), math.inf]
        return cls(tuple(zip(edges[:-1], edges[1:])))

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __getitem__(self, index: int) -> Interval:
        return self.intervals[index]

    @property
    def bounds(self) -> tuple[float, ...]:
        """Finite boundaries, i.e. the lower bound of every interval but the first."""

        return tuple(low for low, _ in self.intervals[1:])

    def index_of(self, x: float) -> int:
        """Return the index of the interval containing ``x``."""

        if math.isnan(x):
            raise ValueError("Cannot place NaN in a partition")
        return int(np.searchsorted(np.asarray(self.bounds), x, side="right"))

    def bin(self, observations: Iterable[float]) -> np.ndarray:
        """Count ``observations`` per interval.

        Assumes the boundaries are non-decreasing, which holds for every
        partition built by :func:`make_partition`.
        """

        obs = np.asarray(list(observations), dtype=float)
        if np.isnan(obs).any():
            raise ValueError("Observations must not contain NaN")
        idx = np.searchsorted(np.asarray(self.bounds), obs, side="right")
        return np.bincount(idx, minlength=len(self)).astype(np.int64)


def make_partition(count: int, start: float, finish: float) -> Partition:
    """Return ``count`` intervals with equal-width interior bins over ``[start, finish)``.

    The first interval is ``(-inf, start)`` and the last one starts where the
    ``count - 2`` interior bins of width ``(finish - start) / (count - 2)``
    end. Interior boundaries are accumulated by repeated addition of the step.
    """

    count = _as_count(count)
    if count < 2:
        raise ValueError(f"A partition needs count >= 2, got {count}")
    start = float(start)
    finish = float(finish)
    n_inner = count - 2

    intervals: list[Interval] = [(-math.inf, start)]
    curr = start
    if n_inner > 0:
        step = (finish - start) / n_inner
        for _ in range(n_inner):
            intervals.append((curr, curr + step))
            curr = curr + step
    intervals.append((curr, math.inf))
    return Partition(tuple(intervals))


def make_partition_for_lil(count: int) -> Partition:
    """Partition over ``[-1, 1)``, the support of the normalized LIL statistic."""

    return make_partition(count, -1.0, 1.0)


def make_partition_for_asin(count: int) -> Partition:
    """Partition whose interior bins are centered on ``0, step, ..., 1 - step``.

    Shifting by half a step keeps the endpoints 0 and 1 of the statistic off
    the bin boundaries.
    """

    count = _as_count(count)
    if count < 3:
        raise ValueError(f"The arcsine partition needs count >= 3, got {count}")
    step = 1.0 / (count - 2)
    return make_partition(count, -step / 2, 1 - step / 2)


__all__ = [
    "Interval",
    "Partition",
    "make_partition",
    "make_partition_for_lil",
    "make_partition_for_asin",
]
