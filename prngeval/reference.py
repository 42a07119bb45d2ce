"""Theoretical reference measures for random-walk statistics.

Two limiting laws are provided, each discretized over a caller-supplied
partition:

- Arcsine law: distribution of the fraction of time a symmetric random walk
  spends above zero, ``F(x) = (2/pi) asin(sqrt(x))`` on ``[0, 1]``.
- Law of the iterated logarithm: the normalized walk ``S_n / sqrt(2 n ln ln n)``
  approximated by a normal law scaled by ``s = sqrt(2 ln ln n)``.

Normal interval masses are computed from ``math.erfc`` on the side of the
median the interval lies in, so intervals deep in either tail do not lose
their mass to cancellation.

References
----------
- Feller, W. (1968). An Introduction to Probability Theory and Its
  Applications, Vol. 1, Chapter III.
- Wang, Y., & Nicol, T. (2015). On statistical distance based testing of
  pseudo random sequences and experiments with PHP and Debian OpenSSL.
  Computers & Security, 53, 44-64.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
import math

from prngeval.errors import InvalidDomainParameter
from prngeval.measure import Measure
from prngeval.partition import Partition, make_partition_for_asin, make_partition_for_lil


_SQRT2 = math.sqrt(2.0)


def arcsine_cdf(x: float) -> float:
    """Arcsine distribution function, clamped to 0 below 0 and 1 above 1."""

    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return 2.0 / math.pi * math.asin(math.sqrt(x))


def arcsine_interval(a: float, b: float) -> float:
    """Arcsine mass of ``[a, b)``; an inverted interval has no mass."""

    if a > b:
        return 0.0
    return arcsine_cdf(b) - arcsine_cdf(a)


def normal_cdf(x: float) -> float:
    """Standard normal distribution function via ``erfc``."""

    return 0.5 * math.erfc(-x / _SQRT2)


def normal_interval(a: float, b: float) -> float:
    """Standard normal mass of ``[a, b)``, i.e. ``Phi(b) - Phi(a)``."""

    if a >= 0.0:
        # Upper tail: Q(a) - Q(b)
        return 0.5 * (math.erfc(a / _SQRT2) - math.erfc(b / _SQRT2))
    if b <= 0.0:
        return 0.5 * (math.erfc(-b / _SQRT2) - math.erfc(-a / _SQRT2))
    return 1.0 - 0.5 * math.erfc(b / _SQRT2) - 0.5 * math.erfc(-a / _SQRT2)


def lil_scale(n: int) -> float:
    """Return ``sqrt(2 ln ln n)``.

    Raises
    ------
    InvalidDomainParameter
        If ``n <= e``, where ``ln ln n`` is undefined or not positive.
    """

    if n <= math.e:
        raise InvalidDomainParameter(f"Sequence length must exceed e for the LIL measure, got {n}")
    return math.sqrt(2.0 * math.log(math.log(n)))


def ideal_asin_measure(n: int, partition: Partition) -> Measure:
    """Arcsine-law measure over ``partition``.

    ``n`` is the bit sequence length. It is accepted for finite-sample
    corrections but currently ignored: the asymptotic law is used as is.
    """

    values = tuple(arcsine_interval(a, b) for a, b in partition)
    return Measure(partition, values)


def ideal_lil_measure(n: int, partition: Partition) -> Measure:
    """Iterated-logarithm measure ``Phi(b s) - Phi(a s)`` over ``partition``."""

    s = lil_scale(n)
    values = tuple(normal_interval(a * s, b * s) for a, b in partition)
    return Measure(partition, values)


@dataclass(frozen=True)
class ReferenceLaw:
    """A limiting law paired with the partition family suited to it."""

    name: str
    description: str
    make_partition: Callable[[int], Partition]
    make_measure: Callable[[int, Partition], Measure]


REFERENCE_LAWS: dict[str, ReferenceLaw] = {
    "asin": ReferenceLaw(
        name="asin",
        description="Arcsine law for the fraction of time above zero",
        make_partition=make_partition_for_asin,
        make_measure=ideal_asin_measure,
    ),
    "lil": ReferenceLaw(
        name="lil",
        description="Law of the iterated logarithm, normal approximation",
        make_partition=make_partition_for_lil,
        make_measure=ideal_lil_measure,
    ),
}


def get_reference_law(name: str) -> ReferenceLaw:
    """Return the ``ReferenceLaw`` registered as ``name`` or raise ``ValueError``."""

    try:
        return REFERENCE_LAWS[name]
    except KeyError as exc:
        options = ", ".join(sorted(REFERENCE_LAWS))
        raise ValueError(f"Unknown reference law: {name!r}. Available: {options}") from exc


__all__ = [
    "arcsine_cdf",
    "arcsine_interval",
    "normal_cdf",
    "normal_interval",
    "lil_scale",
    "ideal_asin_measure",
    "ideal_lil_measure",
    "ReferenceLaw",
    "REFERENCE_LAWS",
    "get_reference_law",
]
