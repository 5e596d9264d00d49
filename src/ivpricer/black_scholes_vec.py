# black_scholes_vec.py
# Vectorised Black-Scholes pricing, vega, and implied-vol.
# All public functions accept scalars *or* NumPy arrays and broadcast.
# Expired (T <= 0) and zero-vol (sigma <= 0) entries take the same closed-form
# limits as the scalar engine.

from __future__ import annotations
import numpy as np
from scipy.stats import norm

from .core import DEFAULT_SOLVER

_N = norm.cdf   # vectorised standard-normal CDF
_n = norm.pdf   # vectorised standard-normal PDF


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _d1_d2(S, K, T, r, q, sigma):
    """Compute d1, d2 arrays.  All inputs broadcast.

    Entries with ``T <= 0`` or ``sigma <= 0`` are evaluated at a dummy
    ``T = sigma = 1`` and must be masked out by the caller.
    """
    S, K, T, r, q, sigma = (np.asarray(x, dtype=float) for x in (S, K, T, r, q, sigma))
    live = (T > 0) & (sigma > 0)
    T = np.where(live, T, 1.0)
    sigma = np.where(live, sigma, 1.0)
    sig_sqrt_T = sigma * np.sqrt(T)
    d1 = (np.log(S / K) + (r - q + 0.5 * sigma * sigma) * T) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return d1, d2, live


def _is_call(kind) -> np.ndarray:
    """Return boolean mask: True where kind == 'call'."""
    kind = np.asarray(kind)
    if kind.ndim == 0:
        return np.bool_(str(kind) == "call")
    return np.array([str(k) == "call" for k in kind.flat], dtype=bool).reshape(kind.shape)


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, T, r, q, sigma, kind) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).
    """
    S, K, T, r, q, sigma = (np.asarray(x, dtype=float) for x in (S, K, T, r, q, sigma))
    d1, d2, live = _d1_d2(S, K, T, r, q, sigma)
    T_pos = np.maximum(T, 0.0)
    fwd_S = np.exp(-q * T_pos) * S
    pv_K = np.exp(-r * T_pos) * K
    is_call = _is_call(kind)

    call_px = fwd_S * _N(d1) - pv_K * _N(d2)
    put_px  = pv_K * _N(-d2) - fwd_S * _N(-d1)
    # T <= 0 collapses fwd_S / pv_K to S / K, so one limit covers both edges
    call_lim = np.maximum(fwd_S - pv_K, 0.0)
    put_lim  = np.maximum(pv_K - fwd_S, 0.0)

    px = np.where(is_call, call_px, put_px)
    lim = np.where(is_call, call_lim, put_lim)
    return np.where(live, px, lim)


# ---------------------------------------------------------------------------
# Vectorised vega
# ---------------------------------------------------------------------------
def bs_vega_vec(S, K, T, r, q, sigma) -> np.ndarray:
    """Vectorised vega (dPrice/dSigma, absolute).  Zero where T or sigma <= 0."""
    S, K, T, r, q, sigma = (np.asarray(x, dtype=float) for x in (S, K, T, r, q, sigma))
    d1, _, live = _d1_d2(S, K, T, r, q, sigma)
    T_pos = np.maximum(T, 0.0)
    vega = S * np.exp(-q * T_pos) * _n(d1) * np.sqrt(T_pos)
    return np.where(live, vega, 0.0)


# ---------------------------------------------------------------------------
# Vectorised implied-vol (Newton-Raphson, vectorisable unlike Brent)
# ---------------------------------------------------------------------------
def bs_implied_vol_vec(
    S, K, T, r, q, target_prices, kind,
    *, tol: float = DEFAULT_SOLVER.tol, maxiter: int = DEFAULT_SOLVER.maxiter,
    init_vol: float = DEFAULT_SOLVER.initial_guess,
    vega_floor: float = DEFAULT_SOLVER.vega_floor,
    sigma_floor: float = DEFAULT_SOLVER.sigma_floor,
) -> np.ndarray:
    """Recover implied vol from market prices via Newton-Raphson on vega.

    Each entry follows the scalar solver exactly: stop when the price error
    is under ``tol``, give up when vega is under ``vega_floor``, clamp
    non-positive steps to ``sigma_floor``.

    Parameters
    ----------
    target_prices : array-like
        Observed market prices.
    init_vol : float
        Initial guess for sigma (same for all entries).

    Returns
    -------
    np.ndarray
        Implied volatilities.  Entries that hit the vega floor or fail to
        converge are ``NaN``.
    """
    S, K, T, r, q, target_prices = (
        np.asarray(x, dtype=float) for x in (S, K, T, r, q, target_prices)
    )
    # broadcast to common shape
    shape = np.broadcast_shapes(
        S.shape, K.shape, T.shape, r.shape, q.shape, target_prices.shape,
        np.shape(kind),
    )
    sigma = np.full(shape, init_vol, dtype=float)
    active = np.ones(shape, dtype=bool)
    failed = np.zeros(shape, dtype=bool)

    for _ in range(maxiter):
        err = bs_price_vec(S, K, T, r, q, sigma, kind) - target_prices
        vega = bs_vega_vec(S, K, T, r, q, sigma)

        active &= ~(np.abs(err) < tol)
        flat = active & (np.abs(vega) < vega_floor)
        failed |= flat
        active &= ~flat
        if not active.any():
            break

        step = np.divide(err, vega, out=np.zeros(shape), where=active)
        sigma = np.where(active, sigma - step, sigma)
        sigma = np.where(sigma <= 0, sigma_floor, sigma)

    # Entries still iterating ran out of budget
    return np.where(failed | active, np.nan, sigma)
