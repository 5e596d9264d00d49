"""Implied volatility by safeguarded Newton-Raphson on the Black-Scholes price.

Black-Scholes price is smooth and increasing in sigma, so Newton converges
quadratically near the root.  Two guards keep the iteration honest:

* a vega floor: when the price surface is nearly flat (deep ITM/OTM, or
  almost no time left) the step ``error / vega`` is meaningless and the solver
  raises :class:`~ivpricer.errors.VegaTooSmall`;
* a positivity clamp: a step that lands on ``sigma <= 0`` is replaced by a
  tiny positive volatility so the next evaluation stays on the valid branch.

The loop is bounded by ``maxiter``; running out raises
:class:`~ivpricer.errors.DidNotConverge`.
"""

from __future__ import annotations
import logging

from .black_scholes import price, vega
from .core import OptionParams, SolverConfig, DEFAULT_SOLVER
from .errors import VegaTooSmall, DidNotConverge

__all__ = ["implied_vol"]

logger = logging.getLogger(__name__)


def implied_vol(
    kind: str,
    market_price: float,
    r: float,
    T: float,
    K: float,
    S: float,
    q: float = 0.0,
    initial_guess: float = DEFAULT_SOLVER.initial_guess,
    tol: float = DEFAULT_SOLVER.tol,
    maxiter: int = DEFAULT_SOLVER.maxiter,
    *,
    config: SolverConfig | None = None,
) -> float:
    """Volatility at which the Black-Scholes price equals ``market_price``.

    Parameters
    ----------
    kind : str
        ``"call"`` or ``"put"``.
    market_price : float
        Observed option price.
    r, T, K, S, q : float
        Rate, expiry (years), strike, spot and dividend yield.
    initial_guess, tol, maxiter
        Starting volatility, absolute price tolerance and iteration budget.
    config : SolverConfig, optional
        Overrides the three keyword settings above and also supplies the
        vega floor and volatility clamp.

    Returns
    -------
    float
        Implied volatility.

    Raises
    ------
    VegaTooSmall
        Vega dropped below ``config.vega_floor`` before convergence.
    DidNotConverge
        ``maxiter`` steps did not bring the price error under ``tol``.
    """
    if config is None:
        config = SolverConfig(initial_guess=initial_guess, tol=tol, maxiter=maxiter)

    params = OptionParams(kind, r, T, config.initial_guess, K, S, q)
    sigma = config.initial_guess

    for it in range(1, config.maxiter + 1):
        params = params.with_sigma(sigma)
        error = price(params) - market_price

        if abs(error) < config.tol:
            logger.debug("implied vol converged: sigma=%.12g after %d evaluation(s)", sigma, it)
            return sigma

        v = vega(params)
        if abs(v) < config.vega_floor:
            logger.warning(
                "vega %.3g below floor at sigma=%.6g (%s K=%g S=%g T=%g, target %g)",
                v, sigma, kind, K, S, T, market_price,
            )
            raise VegaTooSmall(
                f"vega {v:.3g} below {config.vega_floor:g} at sigma={sigma:.6g}; "
                "Newton step would be unstable",
                sigma, it,
            )

        sigma -= error / v
        if sigma <= 0:
            sigma = config.sigma_floor
        logger.debug("iter %d: error=%.3e vega=%.6g -> sigma=%.12g", it, error, v, sigma)

    logger.warning(
        "implied vol did not converge in %d iterations (%s K=%g S=%g T=%g, target %g)",
        config.maxiter, kind, K, S, T, market_price,
    )
    raise DidNotConverge(
        f"no convergence within {config.maxiter} iterations "
        f"(last sigma={sigma:.6g}, tol={config.tol:g})",
        sigma, config.maxiter,
    )
