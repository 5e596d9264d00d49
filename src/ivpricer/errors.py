"""Exception hierarchy for the pricing engine.

Pricing and vega never raise on a valid :class:`~ivpricer.core.OptionParams`;
everything here is either a caller error (:class:`InvalidArgument`) or a
failure of the implied-vol iteration (:class:`SolverError` subclasses).
"""

from __future__ import annotations

__all__ = [
    "PricingError",
    "InvalidArgument",
    "SolverError",
    "VegaTooSmall",
    "DidNotConverge",
]


class PricingError(Exception):
    """Base class for every error raised by ``ivpricer``."""


class InvalidArgument(PricingError, ValueError):
    """A caller-supplied parameter is outside its valid domain."""

    def __init__(self, name: str, value, requirement: str = "must be positive"):
        self.name = name
        self.value = value
        super().__init__(f"{name} {requirement}, got {value!r}")


class SolverError(PricingError, ArithmeticError):
    """Implied-vol iteration stopped without a root.

    Attributes
    ----------
    sigma : float
        Last volatility estimate when the solver gave up.
    iterations : int
        Number of Newton steps evaluated.
    """

    def __init__(self, message: str, sigma: float, iterations: int):
        self.sigma = sigma
        self.iterations = iterations
        super().__init__(message)


class VegaTooSmall(SolverError):
    """Vega fell below the floor; a Newton step would be unstable."""


class DidNotConverge(SolverError):
    """Iteration budget exhausted before the price error met tolerance."""
