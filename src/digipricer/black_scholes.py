from math import log, sqrt
from .normal import norm_cdf


def _d1_d2(S, K, sigma, T):
    sig_sqrt_T = sigma * sqrt(T)
    d1 = (log(S / K) + 0.5 * sig_sqrt_T * sig_sqrt_T) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return d1, d2


def call_price(S: float, K: float, sigma: float, T: float) -> float:
    """Black-Scholes European call with r = q = 0.

    Falls back to intrinsic value ``max(S - K, 0)`` when sigma <= 0 or T <= 0.
    """
    if sigma <= 0 or T <= 0:
        return max(S - K, 0.0)
    d1, d2 = _d1_d2(S, K, sigma, T)
    return S * norm_cdf(d1) - K * norm_cdf(d2)


def put_price(S: float, K: float, sigma: float, T: float) -> float:
    """Black-Scholes European put with r = q = 0.

    Falls back to intrinsic value ``max(K - S, 0)`` when sigma <= 0 or T <= 0.
    """
    if sigma <= 0 or T <= 0:
        return max(K - S, 0.0)
    d1, d2 = _d1_d2(S, K, sigma, T)
    return K * (1.0 - norm_cdf(d2)) - S * (1.0 - norm_cdf(d1))
