from __future__ import annotations
import math
from dataclasses import dataclass, replace

from .errors import InvalidArgument

CALL = "call"
PUT  = "put"


# ---------------------------------------------------------------------------
# Contract parameters: one immutable bundle per pricing request
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionParams:
    """Everything needed to price one European option.

    Parameters
    ----------
    kind : str
        ``"call"`` or ``"put"``.
    r : float
        Continuously-compounded risk-free rate.
    T : float
        Time to expiry in years.  ``T <= 0`` means expired.
    sigma : float
        Annualised volatility.  ``sigma <= 0`` selects the zero-vol limit.
    K : float
        Strike price.
    S : float
        Current underlying price.
    q : float
        Continuous dividend yield (default 0).
    """
    kind: str
    r: float
    T: float
    sigma: float
    K: float
    S: float
    q: float = 0.0

    def __post_init__(self):
        if self.kind not in (CALL, PUT):
            raise InvalidArgument("kind", self.kind, "must be 'call' or 'put'")
        for name in ("r", "T", "sigma", "K", "S", "q"):
            if math.isnan(getattr(self, name)):
                raise InvalidArgument(name, getattr(self, name), "must be a number")
        if self.S <= 0:
            raise InvalidArgument("S", self.S)
        if self.K <= 0:
            raise InvalidArgument("K", self.K)

    @property
    def is_call(self) -> bool:
        return self.kind == CALL

    def with_sigma(self, sigma: float) -> OptionParams:
        """Same contract, different volatility."""
        return replace(self, sigma=sigma)

    def with_kind(self, kind: str) -> OptionParams:
        return replace(self, kind=kind)


# ---------------------------------------------------------------------------
# Implied-vol solver settings
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SolverConfig:
    """Newton-Raphson knobs for :func:`ivpricer.implied_vol`.

    ``vega_floor`` aborts the iteration on a near-flat price surface and
    ``sigma_floor`` replaces any non-positive volatility step.
    """
    initial_guess: float = 0.2
    tol: float = 1e-8
    maxiter: int = 100
    vega_floor: float = 1e-12
    sigma_floor: float = 1e-8

    def __post_init__(self):
        if not self.tol > 0:
            raise InvalidArgument("tol", self.tol)
        if self.maxiter < 1:
            raise InvalidArgument("maxiter", self.maxiter, "must be at least 1")
        if not self.vega_floor >= 0:
            raise InvalidArgument("vega_floor", self.vega_floor, "must be non-negative")
        if not self.sigma_floor > 0:
            raise InvalidArgument("sigma_floor", self.sigma_floor)


DEFAULT_SOLVER = SolverConfig()
