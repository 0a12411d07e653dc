"""Premium evaluation: the single call surface over the digital pricers.

Volatility and time to expiry are always derived from the
:class:`~digipricer.core.MarketConfig` here, so every caller (the barrier
solver, curve generation, the CLI) prices with the same parameters.
"""

from __future__ import annotations

import numpy as np

from .core import MarketConfig, PricingRequest, CurvePoint, Side, as_side
from .digital import (
    digital_call_price, digital_put_price,
    digital_call_price_vec, digital_put_price_vec,
)

__all__ = ["evaluate_premium", "evaluate_premium_vec", "premium_curve"]


def evaluate_premium(spot: float, barrier: float, side, config: MarketConfig) -> float:
    """Digital price for ``side`` at ``barrier`` given ``spot``.

    ``Side.LONG`` prices the digital call with ``config.call_lambda``;
    ``Side.SHORT`` prices the digital put with ``config.put_lambda``.
    """
    req = PricingRequest.from_market(spot, barrier, side, config)
    if req.side is Side.LONG:
        return digital_call_price(req, config.call_lambda)
    return digital_put_price(req, config.put_lambda)


def evaluate_premium_vec(spot, barrier, side, config: MarketConfig) -> np.ndarray:
    """Vectorised :func:`evaluate_premium` over spot and/or barrier arrays."""
    side = as_side(side)
    args = (spot, barrier, config.volatility, config.time_years, config.vega_buffer)
    if side is Side.LONG:
        return digital_call_price_vec(*args, config.call_lambda)
    return digital_put_price_vec(*args, config.put_lambda)


def premium_curve(
    barrier: float,
    config: MarketConfig,
    *,
    range_pct: float = 30.0,
    n_points: int = 50,
) -> list[CurvePoint]:
    """Long and short premiums across spots around a fixed barrier.

    Parameters
    ----------
    barrier : float
        Barrier held fixed along the curve.
    range_pct : float
        Spots span ``barrier * (1 -/+ range_pct/100)``.
    n_points : int
        Number of evenly spaced spots (>= 2).

    Returns
    -------
    list[CurvePoint]
    """
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")
    if not (0.0 < range_pct < 100.0):
        raise ValueError(f"range_pct must be in (0, 100), got {range_pct}")

    spots = np.linspace(barrier * (1 - range_pct / 100), barrier * (1 + range_pct / 100), n_points)
    long_px = evaluate_premium_vec(spots, barrier, Side.LONG, config)
    short_px = evaluate_premium_vec(spots, barrier, Side.SHORT, config)
    return [
        CurvePoint(float(s), float(lp), float(sp))
        for s, lp, sp in zip(spots, long_px, short_px)
    ]
