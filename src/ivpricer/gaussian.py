# gaussian.py
# Standard-normal CDF / PDF used by every pricing formula.

from __future__ import annotations
import math
from scipy.special import ndtr

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def norm_cdf(x: float) -> float:
    """Standard-normal CDF.  Saturates to exactly 0 / 1 far in the tails."""
    return float(ndtr(x))


def norm_pdf(x: float) -> float:
    """Standard-normal density ``exp(-x^2/2) / sqrt(2 pi)``."""
    return _INV_SQRT_2PI * math.exp(-0.5 * x * x)
