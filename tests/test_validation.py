"""Tests for the model validation helpers."""

import numpy as np
import pytest

from digipricer import LONG, SHORT, MarketConfig, default_market_config
from digipricer.normal import CDF_MAX_ERROR
from digipricer.validation import cdf_error, digital_vs_closed_form, check_monotonicity

YEAR = MarketConfig(epoch_duration_secs=86_400, settle_delay_epochs=365,
                    sigma2=0.25, vega_buffer=0.0, call_lambda=0.9999, put_lambda=1.0001)


class TestCDFError:
    def test_within_bound(self):
        result = cdf_error()
        assert result["max_abs_error"] < CDF_MAX_ERROR
        assert -10.0 <= result["argmax"] <= 10.0

    def test_custom_points(self):
        result = cdf_error(np.array([0.0]))
        assert result["max_abs_error"] < 1e-7
        assert result["argmax"] == 0.0


class TestDigitalVsClosedForm:
    @pytest.mark.parametrize("side", [LONG, SHORT])
    @pytest.mark.parametrize("barrier", [80.0, 100.0, 125.0])
    def test_no_buffer_tracks_closed_form(self, side, barrier):
        result = digital_vs_closed_form(100.0, barrier, side, YEAR)
        assert result["abs_diff"] < 1e-3
        assert 0.0 < result["closed_form"] < 1.0

    def test_buffer_widens_gap(self):
        tight = digital_vs_closed_form(100.0, 100.0, LONG, YEAR)
        wide = digital_vs_closed_form(100.0, 100.0, LONG, YEAR.replace(vega_buffer=0.01))
        assert wide["abs_diff"] > tight["abs_diff"]

    def test_requires_positive_time(self):
        with pytest.raises(ValueError):
            digital_vs_closed_form(100.0, 100.0, LONG, YEAR.replace(settle_delay_epochs=0))


class TestCheckMonotonicity:
    @pytest.mark.parametrize("side", [LONG, SHORT])
    def test_one_year_market_is_monotone(self, side):
        cfg = YEAR.replace(sigma2=1.0, call_lambda=0.999, put_lambda=1.001)
        result = check_monotonicity(100.0, side, cfg)
        assert result["monotone"]
        assert result["max_violation"] == 0.0
        assert result["barriers"].shape == result["premiums"].shape == (200,)

    def test_flat_tail_not_strictly_monotone(self):
        # 5-minute horizon: premiums underflow to zero far from spot
        result = check_monotonicity(100.0, LONG, default_market_config())
        assert not result["monotone"]
