"""
Tests for the standard normal distribution primitives.
"""

import math

import numpy as np
import pytest

from bsm_pricer.analytics.normal import erf, norm_cdf, norm_pdf


class TestErf:
    """Test the error function approximation."""

    @pytest.mark.parametrize("x", [-4.0, -2.5, -1.0, -0.3, 0.0, 0.1, 0.5, 1.0, 2.0, 3.5, 6.0])
    def test_matches_math_erf(self, x):
        """Approximation stays within the documented absolute error."""
        assert abs(erf(x) - math.erf(x)) < 1.5e-7

    def test_antisymmetric(self):
        """erf(-x) == -erf(x) exactly for x != 0."""
        for x in np.linspace(0.05, 5.0, 100):
            assert erf(-x) == -erf(x)

    def test_limits(self):
        """erf tends to ±1 far from zero."""
        assert erf(10.0) == pytest.approx(1.0, abs=1e-12)
        assert erf(-10.0) == pytest.approx(-1.0, abs=1e-12)

    def test_near_zero(self):
        assert abs(erf(0.0)) < 1e-8


class TestNormPdf:
    """Test the standard normal density."""

    def test_peak(self):
        assert norm_pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), rel=1e-15)

    def test_symmetric(self):
        for x in [0.1, 0.7, 1.5, 3.0]:
            assert norm_pdf(x) == norm_pdf(-x)

    def test_known_value(self):
        """φ(1) = e^(-1/2)/√(2π)."""
        assert norm_pdf(1.0) == pytest.approx(0.24197072451914337, rel=1e-14)

    def test_integrates_to_one(self):
        """Trapezoidal integral over [-10, 10] is one."""
        grid = np.linspace(-10.0, 10.0, 20001)
        values = np.array([norm_pdf(x) for x in grid])
        integral = float(np.sum((values[1:] + values[:-1]) * 0.5 * np.diff(grid)))
        assert integral == pytest.approx(1.0, abs=1e-8)


class TestNormCdf:
    """Test the standard normal cumulative distribution function."""

    def test_half_at_zero(self):
        assert norm_cdf(0.0) == pytest.approx(0.5, abs=1e-8)

    @pytest.mark.parametrize("x", [0.01, 0.35, 1.0, 1.96, 2.5, 4.0, 8.0])
    def test_symmetry(self, x):
        """N(x) + N(-x) = 1."""
        assert norm_cdf(x) + norm_cdf(-x) == pytest.approx(1.0, abs=1e-12)

    def test_monotone_on_grid(self):
        """N is non-decreasing on a sampled grid."""
        values = np.array([norm_cdf(x) for x in np.linspace(-8.0, 8.0, 1601)])
        assert np.all(np.diff(values) >= 0.0)

    def test_tails(self):
        assert norm_cdf(-40.0) == pytest.approx(0.0, abs=1e-12)
        assert norm_cdf(40.0) == pytest.approx(1.0, abs=1e-12)

    @pytest.mark.parametrize(
        "x,expected",
        [
            (1.0, 0.8413447460685429),
            (1.959963984540054, 0.975),
            (-1.0, 0.15865525393145707),
            (0.35, 0.6368306511756191),
        ],
    )
    def test_known_values(self, x, expected):
        assert norm_cdf(x) == pytest.approx(expected, abs=1e-7)
