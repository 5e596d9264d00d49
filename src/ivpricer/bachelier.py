# bachelier.py
# At-the-money closed forms under the normal (Bachelier) model.
#
# ATM the normal-model price collapses to  C = S * sigma * sqrt(T) / sqrt(2 pi),
# with sigma quoted relative to spot, so the implied vol needs no iteration.

from __future__ import annotations
import math

from .errors import InvalidArgument

__all__ = ["bachelier_implied_vol_atm", "bachelier_price_atm"]

_SQRT_2PI = math.sqrt(2.0 * math.pi)


def bachelier_implied_vol_atm(option_price: float, S: float, T: float,
                              r: float) -> float:
    """Normal-model implied vol of an ATM option.

    ``r`` is accepted for call-site symmetry with the Black-Scholes solver;
    the ATM formula does not discount.
    """
    if not option_price > 0:
        raise InvalidArgument("option_price", option_price)
    if not S > 0:
        raise InvalidArgument("S", S)
    if not T > 0:
        raise InvalidArgument("T", T)
    return option_price * _SQRT_2PI / (S * math.sqrt(T))


def bachelier_price_atm(sigma: float, S: float, T: float) -> float:
    """Normal-model ATM price; inverse of :func:`bachelier_implied_vol_atm`."""
    if not sigma >= 0:
        raise InvalidArgument("sigma", sigma, "must be non-negative")
    if not S > 0:
        raise InvalidArgument("S", S)
    if not T > 0:
        raise InvalidArgument("T", T)
    return S * sigma * math.sqrt(T) / _SQRT_2PI
