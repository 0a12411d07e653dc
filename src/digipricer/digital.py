# digital.py
# Cash-or-nothing digital prices as a normalised vanilla spread.
#
# The two legs straddle the barrier at strikes B and B*lambda.  The leg
# nearer the money ("tight") is priced at sigma + vega_buffer and the other
# ("loose") at sigma - vega_buffer, so the spread is a conservative
# finite-difference estimate of -dC/dK = Phi(d2) (call) or dP/dK (put).
# Results are clamped below at zero.

from __future__ import annotations
import numpy as np

from .core import PricingRequest
from .black_scholes import call_price, put_price
from .black_scholes_vec import bs_call_vec, bs_put_vec

SIGMA_FLOOR = 1e-9


def _check_call_lambda(call_lambda: float) -> None:
    if call_lambda >= 1.0:
        raise ValueError(f"call_lambda must be < 1.0, got {call_lambda}")


def _check_put_lambda(put_lambda: float) -> None:
    if put_lambda <= 1.0:
        raise ValueError(f"put_lambda must be > 1.0, got {put_lambda}")


# ---------------------------------------------------------------------------
# Scalar pricers
# ---------------------------------------------------------------------------
def digital_call_price(req: PricingRequest, call_lambda: float) -> float:
    """Digital call price: probability-like value of spot finishing above the barrier.

    Parameters
    ----------
    req : PricingRequest
        Spot, barrier, volatility, time to expiry and vega buffer.
    call_lambda : float
        Lower-strike multiplier, must be < 1 (e.g. 0.999).

    Returns
    -------
    float
        ``max((C(B*lambda, sigma+buf) - C(B, sigma-buf)) / (B - B*lambda), 0)``.

    Raises
    ------
    ValueError
        If ``call_lambda >= 1``.
    """
    _check_call_lambda(call_lambda)

    K1 = req.barrier * call_lambda      # lower, tight
    K2 = req.barrier                    # upper, loose
    width = K2 - K1

    sigma_tight = max(req.volatility + req.vega_buffer, SIGMA_FLOOR)
    sigma_loose = max(req.volatility - req.vega_buffer, SIGMA_FLOOR)

    C1 = call_price(req.spot, K1, sigma_tight, req.time_years)
    C2 = call_price(req.spot, K2, sigma_loose, req.time_years)
    return max((C1 - C2) / width, 0.0)


def digital_put_price(req: PricingRequest, put_lambda: float) -> float:
    """Digital put price: probability-like value of spot finishing below the barrier.

    Parameters
    ----------
    req : PricingRequest
        Spot, barrier, volatility, time to expiry and vega buffer.
    put_lambda : float
        Upper-strike multiplier, must be > 1 (e.g. 1.001).

    Returns
    -------
    float
        ``max((P(B*lambda, sigma+buf) - P(B, sigma-buf)) / (B*lambda - B), 0)``.

    Raises
    ------
    ValueError
        If ``put_lambda <= 1``.
    """
    _check_put_lambda(put_lambda)

    K1 = req.barrier                    # lower, loose
    K2 = req.barrier * put_lambda       # upper, tight
    width = K2 - K1

    sigma_tight = max(req.volatility + req.vega_buffer, SIGMA_FLOOR)
    sigma_loose = max(req.volatility - req.vega_buffer, SIGMA_FLOOR)

    P1 = put_price(req.spot, K1, sigma_loose, req.time_years)
    P2 = put_price(req.spot, K2, sigma_tight, req.time_years)
    return max((P2 - P1) / width, 0.0)


# ---------------------------------------------------------------------------
# Vectorised pricers (spot / barrier arrays broadcast)
# ---------------------------------------------------------------------------
def digital_call_price_vec(S, B, sigma, T, vega_buffer, call_lambda) -> np.ndarray:
    """Vectorised :func:`digital_call_price`; ``call_lambda`` is a scalar."""
    _check_call_lambda(call_lambda)
    S, B = np.asarray(S, dtype=float), np.asarray(B, dtype=float)
    K1 = B * call_lambda
    width = B - K1
    sigma_tight = max(sigma + vega_buffer, SIGMA_FLOOR)
    sigma_loose = max(sigma - vega_buffer, SIGMA_FLOOR)
    C1 = bs_call_vec(S, K1, sigma_tight, T)
    C2 = bs_call_vec(S, B, sigma_loose, T)
    return np.maximum((C1 - C2) / width, 0.0)


def digital_put_price_vec(S, B, sigma, T, vega_buffer, put_lambda) -> np.ndarray:
    """Vectorised :func:`digital_put_price`; ``put_lambda`` is a scalar."""
    _check_put_lambda(put_lambda)
    S, B = np.asarray(S, dtype=float), np.asarray(B, dtype=float)
    K2 = B * put_lambda
    width = K2 - B
    sigma_tight = max(sigma + vega_buffer, SIGMA_FLOOR)
    sigma_loose = max(sigma - vega_buffer, SIGMA_FLOOR)
    P1 = bs_put_vec(S, B, sigma_loose, T)
    P2 = bs_put_vec(S, K2, sigma_tight, T)
    return np.maximum((P2 - P1) / width, 0.0)
