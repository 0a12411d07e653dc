"""Barrier inversion: find the barrier whose premium matches a target.

Bisection over a fixed bracket per side.  The direction rule assumes the
premium is monotone in the barrier across the bracket:

- ``LONG``  barrier in ``[1.001*S, 3*S]``, premium strictly decreasing;
- ``SHORT`` barrier in ``[0.01*S, 0.999*S]``, premium strictly increasing.

The assumption is a precondition of the caller's market parameters (a very
large ``vega_buffer`` relative to ``sigma2`` can break it).  The endpoint
premiums are checked against the target before bisecting; a target outside
them is reported through ``SolverResult.bracketed`` rather than raised.
"""

from __future__ import annotations

import logging

import structlog

from .core import MarketConfig, SolverResult, Side, as_side
from .premium import evaluate_premium

__all__ = [
    "barrier_bracket",
    "solve_barrier",
    "solve_for_barrier",
    "solve_for_odds",
]

# routed through stdlib logging: silent unless the application configures it
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger,
)

LONG_BRACKET = (1.001, 3.0)
SHORT_BRACKET = (0.01, 0.999)


def barrier_bracket(spot: float, side) -> tuple[float, float]:
    """Initial ``(lo, hi)`` barrier search interval for ``side``."""
    lo_mult, hi_mult = LONG_BRACKET if as_side(side) is Side.LONG else SHORT_BRACKET
    return spot * lo_mult, spot * hi_mult


def solve_barrier(
    target_premium: float,
    spot: float,
    side,
    config: MarketConfig,
    *,
    tolerance: float = 1e-6,
    max_iterations: int = 100,
) -> SolverResult:
    """Invert :func:`evaluate_premium` for the barrier by bisection.

    Parameters
    ----------
    target_premium : float
        Desired digital price, in (0, 1).
    spot : float
        Current spot.
    side : Side or str
    config : MarketConfig
    tolerance : float
        Stop once the bracket width is <= tolerance.
    max_iterations : int
        Iteration budget.

    Returns
    -------
    SolverResult
        ``barrier`` is the final bracket midpoint whichever stop rule fired.
    """
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

    side = as_side(side)
    decreasing = side is Side.LONG
    lo, hi = barrier_bracket(spot, side)

    p_lo = evaluate_premium(spot, lo, side, config)
    p_hi = evaluate_premium(spot, hi, side, config)
    if decreasing:
        bracketed = p_hi <= target_premium <= p_lo
    else:
        bracketed = p_lo <= target_premium <= p_hi
    if not bracketed:
        logger.warning(
            "Target premium outside bracket",
            side=side.value, target=target_premium, spot=spot,
            premium_lo=p_lo, premium_hi=p_hi,
        )

    iterations = 0
    while hi - lo > tolerance and iterations < max_iterations:
        mid = 0.5 * (lo + hi)
        premium = evaluate_premium(spot, mid, side, config)
        # move the bound on the side of the root the premium says we are on
        if (premium > target_premium) == decreasing:
            lo = mid
        else:
            hi = mid
        iterations += 1

    converged = hi - lo <= tolerance
    barrier = 0.5 * (lo + hi)
    if not converged:
        logger.warning(
            "Iteration budget exhausted",
            side=side.value, target=target_premium, iterations=iterations,
            width=hi - lo, tolerance=tolerance,
        )
    logger.debug("Solved barrier", side=side.value, barrier=barrier, iterations=iterations)

    return SolverResult(
        target_premium=target_premium,
        spot=spot,
        side=side,
        barrier=barrier,
        iterations=iterations,
        converged=converged,
        bracketed=bracketed,
    )


def solve_for_barrier(
    target_premium: float,
    spot: float,
    side,
    config: MarketConfig,
    tolerance: float = 1e-6,
    max_iterations: int = 100,
) -> float:
    """Best-effort barrier estimate; see :func:`solve_barrier` for diagnostics."""
    return solve_barrier(
        target_premium, spot, side, config,
        tolerance=tolerance, max_iterations=max_iterations,
    ).barrier


def solve_for_odds(
    odds: float,
    spot: float,
    side,
    config: MarketConfig,
    *,
    tolerance: float = 1e-6,
    max_iterations: int = 100,
) -> SolverResult:
    """Barrier that prices the digital at ``1/odds`` (e.g. odds 10 -> premium 0.1)."""
    if odds <= 1.0:
        raise ValueError(f"odds must be > 1, got {odds}")
    return solve_barrier(
        1.0 / odds, spot, side, config,
        tolerance=tolerance, max_iterations=max_iterations,
    )
