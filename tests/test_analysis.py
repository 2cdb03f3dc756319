"""Tests for wheel payout analysis."""

import numpy as np
import pytest

from wheelspin.wheel.analysis import credit_distribution, expected_credits, hit_probabilities, simulate
from wheelspin.wheel.segments import REFERENCE_WHEEL, WheelSegment


def test_hit_probabilities_follow_weights():
    p = hit_probabilities(REFERENCE_WHEEL)

    assert p.sum() == pytest.approx(1.0)
    assert p[0] == pytest.approx(4 / 354)
    assert p[1] == pytest.approx(100 / 354)


def test_expected_credits():
    assert expected_credits(REFERENCE_WHEEL) == pytest.approx(160_000 / 354)


def test_credit_distribution_merges_equal_prizes():
    distribution = credit_distribution(REFERENCE_WHEEL)

    assert list(distribution) == [200, 400, 1000, 2000, 5000]
    assert distribution[200] == pytest.approx(200 / 354)
    assert sum(distribution.values()) == pytest.approx(1.0)


def test_simulation_matches_probabilities():
    report = simulate(REFERENCE_WHEEL, spins=20_000, seed=42)

    assert report.hits.sum() == 20_000
    assert report.misses == 0
    np.testing.assert_allclose(report.frequencies, hit_probabilities(REFERENCE_WHEEL), atol=0.02)
    assert report.mean_credits == pytest.approx(expected_credits(REFERENCE_WHEEL), rel=0.1)


def test_simulation_is_reproducible():
    a = simulate(REFERENCE_WHEEL, spins=500, seed=9)
    b = simulate(REFERENCE_WHEEL, spins=500, seed=9)

    assert a.total_credits == b.total_credits
    np.testing.assert_array_equal(a.hits, b.hits)


def test_zero_weight_wheel():
    segments = [WheelSegment(angle_deg=0, credits=100, weight=0)]

    assert hit_probabilities(segments).tolist() == [0.0]
    assert expected_credits(segments) == 0.0
    report = simulate(segments, spins=10, seed=1)
    assert report.misses == 10
    assert report.mean_credits == 0
