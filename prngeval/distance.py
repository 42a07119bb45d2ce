"""Distances between measures defined over the same partition.

All functions refuse to compare measures whose partitions differ in any
bound and raise :class:`~prngeval.errors.PartitionMismatch` instead.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from prngeval.errors import PartitionMismatch
from prngeval.measure import Measure


def _paired_values(u: Measure, v: Measure) -> tuple[np.ndarray, np.ndarray]:
    if u.partition != v.partition:
        raise PartitionMismatch("Measures operate on different partitions")
    return u.as_array(), v.as_array()


def dist_tv(u: Measure, v: Measure) -> float:
    """Total variation distance as the sum of positive parts of ``u - v``.

    For probability measures this equals ``sum(|u - v|) / 2``. For other
    inputs it is not symmetric.
    """

    x, y = _paired_values(u, v)
    return float(np.sum(np.maximum(x - y, 0.0)))


def dist_hell(u: Measure, v: Measure) -> float:
    """Hellinger distance. Negative values are not checked and give ``nan``."""

    x, y = _paired_values(u, v)
    with np.errstate(invalid="ignore"):
        s = np.sum((np.sqrt(x) - np.sqrt(y)) ** 2)
    return float(np.sqrt(s / 2.0))


def dist_rms(u: Measure, v: Measure) -> float:
    """Root-mean-square difference over the intervals of the partition."""

    x, y = _paired_values(u, v)
    return float(np.sqrt(np.sum((x - y) ** 2) / len(x)))


DISTANCES: dict[str, Callable[[Measure, Measure], float]] = {
    "tv": dist_tv,
    "hell": dist_hell,
    "rms": dist_rms,
}


def get_distance(name: str) -> Callable[[Measure, Measure], float]:
    """Return the distance function registered as ``name`` or raise ``ValueError``."""

    try:
        return DISTANCES[name]
    except KeyError as exc:
        options = ", ".join(sorted(DISTANCES))
        raise ValueError(f"Unknown distance: {name!r}. Available: {options}") from exc


__all__ = ["dist_tv", "dist_hell", "dist_rms", "DISTANCES", "get_distance"]
