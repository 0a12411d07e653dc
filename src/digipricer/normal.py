# normal.py
# Standard-normal CDF via the Hastings rational approximation
# (Abramowitz & Stegun 26.2.17).  |error| < 1.5e-7 for all real x.

from __future__ import annotations
import math
import numpy as np

_P = 0.2316419
_A1, _A2, _A3, _A4, _A5 = (
    0.31938153, -0.356563782, 1.781477937, -1.821255978, 1.330274429,
)
_INV_SQRT_2PI = 0.3989422804014327

CDF_MAX_ERROR = 1.5e-7


def norm_cdf(x: float) -> float:
    """Phi(x): probability that a standard normal variable is <= x."""
    z = abs(x)
    t = 1.0 / (1.0 + _P * z)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    pdf = _INV_SQRT_2PI * math.exp(-0.5 * z * z)
    cdf = 1.0 - pdf * poly
    return 1.0 - cdf if x < 0 else cdf


def norm_cdf_vec(x) -> np.ndarray:
    """Vectorised :func:`norm_cdf`; accepts scalars or arrays."""
    x = np.asarray(x, dtype=float)
    z = np.abs(x)
    t = 1.0 / (1.0 + _P * z)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    pdf = _INV_SQRT_2PI * np.exp(-0.5 * z * z)
    cdf = 1.0 - pdf * poly
    return np.where(x < 0, 1.0 - cdf, cdf)
