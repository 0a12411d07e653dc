"""Vectorised pricers agree with the scalar ones."""

import numpy as np
import pytest

from digipricer.core import PricingRequest
from digipricer.black_scholes import call_price, put_price
from digipricer.black_scholes_vec import bs_call_vec, bs_put_vec
from digipricer.digital import (
    digital_call_price, digital_put_price,
    digital_call_price_vec, digital_put_price_vec,
)

SPOTS = np.linspace(80.0, 120.0, 41)
SIGMA, T, BUF = 0.5, 300 / 31_557_600.0, 0.05


class TestVanillaVec:
    @pytest.mark.parametrize("sigma, T", [(0.2, 1.0), (0.5, 1e-5), (0.0, 1.0)])
    def test_call_matches_scalar(self, sigma, T):
        expected = [call_price(S, 100.0, sigma, T) for S in SPOTS]
        np.testing.assert_allclose(bs_call_vec(SPOTS, 100.0, sigma, T), expected, rtol=0, atol=1e-12)

    @pytest.mark.parametrize("sigma, T", [(0.2, 1.0), (0.5, 1e-5), (0.3, 0.0)])
    def test_put_matches_scalar(self, sigma, T):
        expected = [put_price(S, 100.0, sigma, T) for S in SPOTS]
        np.testing.assert_allclose(bs_put_vec(SPOTS, 100.0, sigma, T), expected, rtol=0, atol=1e-12)

    def test_shape(self):
        assert bs_call_vec(SPOTS, 100.0, 0.2, 1.0).shape == SPOTS.shape


class TestDigitalVec:
    def test_call_matches_scalar(self):
        barriers = np.linspace(99.0, 101.0, 21)
        got = digital_call_price_vec(100.0, barriers, SIGMA, T, BUF, 0.999)
        expected = [
            digital_call_price(PricingRequest(100.0, B, SIGMA, T, BUF), 0.999) for B in barriers
        ]
        np.testing.assert_allclose(got, expected, rtol=0, atol=1e-11)

    def test_put_matches_scalar(self):
        barriers = np.linspace(99.0, 101.0, 21)
        got = digital_put_price_vec(100.0, barriers, SIGMA, T, BUF, 1.001)
        expected = [
            digital_put_price(PricingRequest(100.0, B, SIGMA, T, BUF), 1.001) for B in barriers
        ]
        np.testing.assert_allclose(got, expected, rtol=0, atol=1e-11)

    def test_lambda_validation(self):
        with pytest.raises(ValueError):
            digital_call_price_vec(SPOTS, 100.0, SIGMA, T, BUF, 1.0)
        with pytest.raises(ValueError):
            digital_put_price_vec(SPOTS, 100.0, SIGMA, T, BUF, 1.0)
