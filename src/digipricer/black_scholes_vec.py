# black_scholes_vec.py
# Vectorised zero-rate Black-Scholes call / put.
# All public functions accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
import numpy as np

from .normal import norm_cdf_vec as _N


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _d1_d2(S, K, sigma, T):
    """Compute d1, d2 arrays; entries where sigma*sqrt(T) <= 0 are NaN."""
    S, K, sigma, T = (np.asarray(x, dtype=float) for x in (S, K, sigma, T))
    sig_sqrt_T = sigma * np.sqrt(np.maximum(T, 0.0))
    safe = np.where(sig_sqrt_T > 0, sig_sqrt_T, np.nan)
    d1 = (np.log(S / K) + 0.5 * safe * safe) / safe
    d2 = d1 - safe
    return d1, d2


def _degenerate(sigma, T) -> np.ndarray:
    sigma, T = np.asarray(sigma, dtype=float), np.asarray(T, dtype=float)
    return (sigma <= 0) | (T <= 0)


# ---------------------------------------------------------------------------
# Vectorised prices
# ---------------------------------------------------------------------------
def bs_call_vec(S, K, sigma, T) -> np.ndarray:
    """Vectorised call price; intrinsic value where sigma <= 0 or T <= 0."""
    S, K = np.asarray(S, dtype=float), np.asarray(K, dtype=float)
    d1, d2 = _d1_d2(S, K, sigma, T)
    px = S * _N(d1) - K * _N(d2)
    return np.where(_degenerate(sigma, T), np.maximum(S - K, 0.0), px)


def bs_put_vec(S, K, sigma, T) -> np.ndarray:
    """Vectorised put price; intrinsic value where sigma <= 0 or T <= 0."""
    S, K = np.asarray(S, dtype=float), np.asarray(K, dtype=float)
    d1, d2 = _d1_d2(S, K, sigma, T)
    px = K * (1.0 - _N(d2)) - S * (1.0 - _N(d1))
    return np.where(_degenerate(sigma, T), np.maximum(K - S, 0.0), px)
