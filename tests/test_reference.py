import math

import pytest

from prngeval.errors import InvalidDomainParameter
from prngeval.partition import make_partition, make_partition_for_asin, make_partition_for_lil
from prngeval.reference import (
    REFERENCE_LAWS,
    arcsine_cdf,
    arcsine_interval,
    get_reference_law,
    ideal_asin_measure,
    ideal_lil_measure,
    lil_scale,
    normal_cdf,
    normal_interval,
)


def test_arcsine_cdf_clamps():
    assert arcsine_cdf(-3.0) == 0.0
    assert arcsine_cdf(0.0) == 0.0
    assert arcsine_cdf(0.5) == pytest.approx(0.5)
    assert arcsine_cdf(1.0) == 1.0
    assert arcsine_cdf(7.0) == 1.0
    assert arcsine_cdf(-math.inf) == 0.0
    assert arcsine_cdf(math.inf) == 1.0


def test_arcsine_inverted_interval_is_empty():
    assert arcsine_interval(0.8, 0.2) == 0.0


def test_arcsine_above_support_is_empty():
    assert arcsine_interval(1.5, math.inf) == 0.0


def test_four_bin_arcsine_scenario():
    m = ideal_asin_measure(1000, make_partition(4, 0, 1))
    assert m.values == pytest.approx((0.0, 0.5, 0.5, 0.0))


@pytest.mark.parametrize("count", [3, 4, 12, 22, 101])
def test_arcsine_measure_sums_to_one(count):
    m = ideal_asin_measure(1 << 16, make_partition_for_asin(count))
    assert sum(m.values) == pytest.approx(1.0)
    assert all(v >= 0.0 for v in m.values)


def test_arcsine_ignores_length():
    part = make_partition_for_asin(22)
    assert ideal_asin_measure(10, part) == ideal_asin_measure(10**6, part)


def test_arcsine_symmetry():
    """Bins centered on k*step and 1 - k*step carry the same mass."""

    m = ideal_asin_measure(1000, make_partition_for_asin(12))
    assert m.values[0] == 0.0
    tail = m.values[1:]
    assert tail == pytest.approx(tuple(reversed(tail)))


def test_normal_cdf_values():
    assert normal_cdf(0.0) == pytest.approx(0.5)
    assert normal_cdf(1.96) == pytest.approx(0.9750021, rel=1e-6)
    assert normal_cdf(-math.inf) == 0.0
    assert normal_cdf(math.inf) == 1.0


def test_normal_interval_matches_cdf_difference():
    for a, b in [(-2.0, -1.0), (-0.5, 0.7), (0.3, 1.2), (-math.inf, 0.0), (0.0, math.inf)]:
        assert normal_interval(a, b) == pytest.approx(normal_cdf(b) - normal_cdf(a))


def test_normal_interval_far_tail_keeps_mass():
    """Naive Phi(b) - Phi(a) rounds to zero this far out."""

    mass = normal_interval(9.0, 10.0)
    assert normal_cdf(10.0) - normal_cdf(9.0) == 0.0
    assert mass > 0.0
    assert mass == pytest.approx(0.5 * (math.erfc(9.0 / math.sqrt(2)) - math.erfc(10.0 / math.sqrt(2))))
    assert normal_interval(-10.0, -9.0) == pytest.approx(mass)


def test_lil_scale():
    n = 1 << 20
    assert lil_scale(n) == pytest.approx(math.sqrt(2 * math.log(math.log(n))))


@pytest.mark.parametrize("n", [0, 1, 2])
def test_lil_rejects_small_n(n):
    with pytest.raises(InvalidDomainParameter):
        ideal_lil_measure(n, make_partition_for_lil(10))


def test_lil_measure_sums_to_one_and_is_symmetric():
    m = ideal_lil_measure(1 << 16, make_partition_for_lil(22))
    assert sum(m.values) == pytest.approx(1.0)
    assert m.values == pytest.approx(tuple(reversed(m.values)))


def test_lil_measure_values():
    n = 1 << 16
    s = math.sqrt(2 * math.log(math.log(n)))
    part = make_partition_for_lil(4)
    m = ideal_lil_measure(n, part)
    assert m.values[0] == pytest.approx(normal_cdf(-s))
    assert m.values[1] == pytest.approx(0.5 - normal_cdf(-s))
    assert m.partition == part


def test_reference_law_registry():
    assert set(REFERENCE_LAWS) == {"asin", "lil"}
    law = get_reference_law("lil")
    part = law.make_partition(10)
    assert part == make_partition_for_lil(10)
    assert law.make_measure(1000, part) == ideal_lil_measure(1000, part)
    with pytest.raises(ValueError):
        get_reference_law("uniform")
