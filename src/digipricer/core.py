from __future__ import annotations
import math
from dataclasses import dataclass, replace
from enum import Enum

SECONDS_PER_YEAR = 365.25 * 24 * 3600


class Side(str, Enum):
    """Direction of a digital position.

    ``LONG`` pays when spot finishes above the barrier (digital call),
    ``SHORT`` pays when spot finishes below it (digital put).
    """
    LONG = "long"
    SHORT = "short"


LONG  = Side.LONG
SHORT = Side.SHORT


def as_side(side) -> Side:
    """Coerce ``"long"`` / ``"short"`` (any case) or a ``Side`` to ``Side``."""
    if isinstance(side, Side):
        return side
    try:
        return Side(str(side).strip().lower())
    except ValueError:
        raise ValueError(f"side must be 'long' or 'short', got {side!r}") from None


def time_to_expiry_years(epoch_duration_secs: float, settle_delay_epochs: float) -> float:
    return epoch_duration_secs * settle_delay_epochs / SECONDS_PER_YEAR


# ---------------------------------------------------------------------------
# Market configuration, owned by the caller, passed into every call
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class MarketConfig:
    """Per-market pricing parameters.

    Parameters
    ----------
    epoch_duration_secs : int
        Seconds per settlement epoch.
    settle_delay_epochs : int
        Number of epochs until settlement.
    sigma2 : float
        Variance proxy; volatility is ``sqrt(max(sigma2, 0))``.
    vega_buffer : float
        IV half-width applied to the two legs of the strike spread.
    call_lambda : float
        Lower-strike multiplier for the call spread, must be < 1 when used.
    put_lambda : float
        Upper-strike multiplier for the put spread, must be > 1 when used.

    The lambda bounds are enforced by the digital pricer, not here.
    """
    epoch_duration_secs: int = 300
    settle_delay_epochs: int = 1
    sigma2: float = 0.25
    vega_buffer: float = 0.05
    call_lambda: float = 0.999
    put_lambda: float = 1.001

    def __post_init__(self):
        if self.epoch_duration_secs <= 0:
            raise ValueError(
                f"epoch_duration_secs must be positive, got {self.epoch_duration_secs}"
            )
        if self.settle_delay_epochs < 0:
            raise ValueError(
                f"settle_delay_epochs must be non-negative, got {self.settle_delay_epochs}"
            )
        if self.vega_buffer < 0:
            raise ValueError(f"vega_buffer must be non-negative, got {self.vega_buffer}")

    @property
    def volatility(self) -> float:
        return math.sqrt(max(self.sigma2, 0.0))

    @property
    def time_years(self) -> float:
        return time_to_expiry_years(self.epoch_duration_secs, self.settle_delay_epochs)

    def replace(self, **changes) -> MarketConfig:
        """Return a copy with ``changes`` applied (validated again)."""
        return replace(self, **changes)


def default_market_config() -> MarketConfig:
    """Starting configuration for an interactive session: 5-minute epochs, IV ≈ 50%."""
    return MarketConfig()


# ---------------------------------------------------------------------------
# Per-call value objects
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PricingRequest:
    """Inputs to a single digital pricing call.

    ``volatility`` and ``time_years`` are already derived; use
    :meth:`from_market` to derive them from a :class:`MarketConfig`.
    """
    spot: float
    barrier: float
    volatility: float
    time_years: float
    vega_buffer: float = 0.0
    side: Side = Side.LONG

    @classmethod
    def from_market(cls, spot: float, barrier: float, side, config: MarketConfig) -> PricingRequest:
        return cls(
            spot=spot,
            barrier=barrier,
            volatility=config.volatility,
            time_years=config.time_years,
            vega_buffer=config.vega_buffer,
            side=as_side(side),
        )


@dataclass(frozen=True)
class SolverResult:
    """Outcome of a barrier inversion.

    ``converged`` is False when the iteration budget ran out before the
    bracket shrank to ``tolerance``; ``bracketed`` is False when the target
    premium lay outside the premiums at the initial bracket ends, in which
    case ``barrier`` sits at the nearest bracket end.
    """
    target_premium: float
    spot: float
    side: Side
    barrier: float
    iterations: int
    converged: bool
    bracketed: bool

    @property
    def percent_change(self) -> float:
        """Move from spot to barrier, in percent."""
        return (self.barrier / self.spot - 1.0) * 100.0


@dataclass(frozen=True)
class CurvePoint:
    spot: float
    long_premium: float
    short_premium: float
