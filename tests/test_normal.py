"""Tests for the Hastings normal CDF approximation."""

import numpy as np
import pytest
from scipy.stats import norm

from digipricer.normal import norm_cdf, norm_cdf_vec, CDF_MAX_ERROR


class TestNormCDF:
    def test_at_zero(self):
        assert abs(norm_cdf(0.0) - 0.5) < 1e-7

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.96, 3.0, 6.0, 12.0])
    def test_symmetry(self, x):
        assert abs(norm_cdf(x) + norm_cdf(-x) - 1.0) < 1e-15

    def test_error_bound_vs_scipy(self):
        xs = np.linspace(-10.0, 10.0, 4001)
        approx = np.array([norm_cdf(x) for x in xs])
        assert np.max(np.abs(approx - norm.cdf(xs))) < CDF_MAX_ERROR

    def test_known_values(self):
        assert abs(norm_cdf(1.96) - 0.9750021) < 1.5e-7
        assert abs(norm_cdf(-1.0) - 0.1586553) < 1.5e-7

    def test_limits(self):
        assert norm_cdf(40.0) == 1.0
        assert norm_cdf(-40.0) == 0.0


class TestNormCDFVec:
    def test_matches_scalar(self):
        xs = np.linspace(-8.0, 8.0, 801)
        expected = np.array([norm_cdf(x) for x in xs])
        np.testing.assert_allclose(norm_cdf_vec(xs), expected, rtol=0, atol=1e-15)

    def test_non_decreasing(self):
        vals = norm_cdf_vec(np.linspace(-5.0, 5.0, 2001))
        assert np.all(np.diff(vals) >= 0)

    def test_scalar_input(self):
        assert float(norm_cdf_vec(0.0)) == pytest.approx(0.5, abs=1e-7)
