"""Scalar Black-Scholes-Merton price and vega.

Both functions are total over any constructible :class:`OptionParams`:
an expired contract (``T <= 0``) is worth its intrinsic value and a
zero-volatility contract its discounted forward intrinsic value, with zero
vega in both regions.
"""

from __future__ import annotations
from math import exp, log, sqrt

from .core import OptionParams, CALL, PUT
from .gaussian import norm_cdf as _N, norm_pdf as _n

__all__ = ["d1_d2", "price", "vega", "parity_gap", "bs_price", "bs_vega"]


def d1_d2(S: float, K: float, T: float, r: float, q: float, sigma: float):
    """Standardised moneyness terms.  Requires ``T > 0`` and ``sigma > 0``."""
    rt = sigma * sqrt(T)
    d1 = (log(S / K) + (r - q + 0.5 * sigma * sigma) * T) / rt
    d2 = d1 - rt
    return d1, d2


def price(p: OptionParams) -> float:
    """Fair value of a European call or put."""
    if p.T <= 0:
        if p.is_call:
            return max(p.S - p.K, 0.0)
        return max(p.K - p.S, 0.0)

    disc_r = exp(-p.r * p.T)
    disc_q = exp(-p.q * p.T)
    fwd_S = disc_q * p.S
    pv_K = disc_r * p.K

    if p.sigma <= 0:
        if p.is_call:
            return max(fwd_S - pv_K, 0.0)
        return max(pv_K - fwd_S, 0.0)

    d1, d2 = d1_d2(p.S, p.K, p.T, p.r, p.q, p.sigma)
    if p.is_call:
        return fwd_S * _N(d1) - pv_K * _N(d2)
    return pv_K * _N(-d2) - fwd_S * _N(-d1)


def vega(p: OptionParams) -> float:
    """dPrice/dSigma in absolute vol units (not per 1%).  Same for calls and puts."""
    if p.T <= 0 or p.sigma <= 0:
        return 0.0
    d1, _ = d1_d2(p.S, p.K, p.T, p.r, p.q, p.sigma)
    return p.S * exp(-p.q * p.T) * sqrt(p.T) * _n(d1)


def parity_gap(p: OptionParams) -> float:
    """Absolute put-call parity violation ``|C - P - (S e^-qT - K e^-rT)|``.

    ``p.kind`` is ignored; the call and put sharing the other fields are priced.
    """
    call_px = price(p.with_kind(CALL))
    put_px = price(p.with_kind(PUT))
    T = max(p.T, 0.0)
    forward_gap = p.S * exp(-p.q * T) - p.K * exp(-p.r * T)
    return abs(call_px - put_px - forward_gap)


# ---------------------------------------------------------------------------
# Flat-argument interface
# ---------------------------------------------------------------------------
def bs_price(kind: str, r: float, T: float, sigma: float, K: float, S: float,
             q: float = 0.0) -> float:
    return price(OptionParams(kind, r, T, sigma, K, S, q))


def bs_vega(kind: str, r: float, T: float, sigma: float, K: float, S: float,
            q: float = 0.0) -> float:
    return vega(OptionParams(kind, r, T, sigma, K, S, q))
