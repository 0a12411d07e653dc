"""Model validation for the digital pricing stack.

Benchmarks the Hastings CDF and the spread-approximated digital against
scipy's exact normal distribution, and scans the barrier solver's bracket
to check the monotonicity the bisection relies on.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from scipy.stats import norm

from .core import MarketConfig, Side, as_side
from .normal import norm_cdf_vec
from .premium import evaluate_premium, evaluate_premium_vec
from .solver import barrier_bracket

__all__ = [
    "cdf_error",
    "digital_vs_closed_form",
    "check_monotonicity",
]


# ---------------------------------------------------------------------------
# CDF accuracy
# ---------------------------------------------------------------------------

def cdf_error(xs: Optional[np.ndarray] = None) -> dict:
    """Max absolute error of :func:`norm_cdf_vec` against ``scipy.stats.norm.cdf``.

    Parameters
    ----------
    xs : array-like, optional
        Evaluation points.  Default: 20001 points on [-10, 10].

    Returns
    -------
    dict
        ``"max_abs_error"`` and ``"argmax"`` (the x where it occurs).
    """
    if xs is None:
        xs = np.linspace(-10.0, 10.0, 20_001)
    xs = np.asarray(xs, dtype=float)
    err = np.abs(norm_cdf_vec(xs) - norm.cdf(xs))
    i = int(np.argmax(err))
    return {"max_abs_error": float(err[i]), "argmax": float(xs.flat[i])}


# ---------------------------------------------------------------------------
# Spread approximation vs closed form
# ---------------------------------------------------------------------------

def digital_vs_closed_form(
    spot: float, barrier: float, side, config: MarketConfig,
) -> dict:
    """Compare the spread price to the exact zero-rate digital.

    Closed form: ``Phi(d2)`` for a call, ``Phi(-d2)`` for a put, with
    ``d2 = (ln(S/B) - sigma^2 T / 2) / (sigma sqrt(T))``.  Only
    meaningful for ``sigma > 0`` and ``T > 0``; the spread converges to it
    as ``vega_buffer -> 0`` and the lambdas -> 1.

    Returns
    -------
    dict
        ``"spread"``, ``"closed_form"``, ``"abs_diff"``.
    """
    side = as_side(side)
    sigma, T = config.volatility, config.time_years
    if sigma <= 0 or T <= 0:
        raise ValueError("closed form requires positive volatility and time to expiry")
    sig_sqrt_T = sigma * math.sqrt(T)
    d2 = (math.log(spot / barrier) - 0.5 * sig_sqrt_T * sig_sqrt_T) / sig_sqrt_T
    closed = float(norm.cdf(d2 if side is Side.LONG else -d2))
    spread = evaluate_premium(spot, barrier, side, config)
    return {"spread": spread, "closed_form": closed, "abs_diff": abs(spread - closed)}


# ---------------------------------------------------------------------------
# Solver precondition
# ---------------------------------------------------------------------------

def check_monotonicity(
    spot: float, side, config: MarketConfig, *, n_points: int = 200,
) -> dict:
    """Scan the solver bracket for ``side`` and test strict monotonicity.

    Returns
    -------
    dict
        ``"monotone"`` (bool), ``"max_violation"`` (largest step against the
        assumed direction, 0 if none), ``"barriers"``, ``"premiums"``.
    """
    side = as_side(side)
    lo, hi = barrier_bracket(spot, side)
    barriers = np.linspace(lo, hi, n_points)
    premiums = evaluate_premium_vec(spot, barriers, side, config)

    steps = np.diff(premiums)
    if side is Side.LONG:
        steps = -steps  # expected decreasing
    violation = float(np.max(np.maximum(-steps, 0.0))) if steps.size else 0.0
    return {
        "monotone": bool(np.all(steps > 0)),
        "max_violation": violation,
        "barriers": barriers,
        "premiums": premiums,
    }
