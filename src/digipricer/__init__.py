# digipricer: digital option premium pricing and barrier inversion
# Public API

import logging

# Data model
from .core import (
    Side, LONG, SHORT, MarketConfig, PricingRequest, SolverResult, CurvePoint,
    SECONDS_PER_YEAR, default_market_config, time_to_expiry_years,
)

# Numerical layers
from .normal import norm_cdf, norm_cdf_vec
from .black_scholes import call_price, put_price
from .black_scholes_vec import bs_call_vec, bs_put_vec
from .digital import (
    digital_call_price, digital_put_price,
    digital_call_price_vec, digital_put_price_vec,
)

# Payouts
from .payout import payout_cash_or_nothing, payout_odds_based, calculate_premium

# Premium evaluation & inversion
from .premium import evaluate_premium, evaluate_premium_vec, premium_curve
from .solver import solve_barrier, solve_for_barrier, solve_for_odds

# Model validation
from .validation import cdf_error, digital_vs_closed_form, check_monotonicity

__all__ = [
    # Data model
    "Side", "LONG", "SHORT", "MarketConfig", "PricingRequest", "SolverResult",
    "CurvePoint", "SECONDS_PER_YEAR", "default_market_config", "time_to_expiry_years",
    # Numerical layers
    "norm_cdf", "norm_cdf_vec", "call_price", "put_price",
    "bs_call_vec", "bs_put_vec",
    "digital_call_price", "digital_put_price",
    "digital_call_price_vec", "digital_put_price_vec",
    # Payouts
    "payout_cash_or_nothing", "payout_odds_based", "calculate_premium",
    # Premium evaluation & inversion
    "evaluate_premium", "evaluate_premium_vec", "premium_curve",
    "solve_barrier", "solve_for_barrier", "solve_for_odds",
    # Validation
    "cdf_error", "digital_vs_closed_form", "check_monotonicity",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
