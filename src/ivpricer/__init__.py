# ivpricer: European option pricing and implied volatility
# Public API

# Contract data model
from .core import OptionParams, SolverConfig, DEFAULT_SOLVER, CALL, PUT

# Errors
from .errors import (
    PricingError, InvalidArgument, SolverError, VegaTooSmall, DidNotConverge,
)

# Gaussian primitives
from .gaussian import norm_cdf, norm_pdf

# Scalar Black-Scholes
from .black_scholes import d1_d2, price, vega, parity_gap, bs_price, bs_vega
from .implied_vol import implied_vol

# Bachelier (normal model)
from .bachelier import bachelier_implied_vol_atm, bachelier_price_atm

# Vectorised pricers
from .black_scholes_vec import bs_price_vec, bs_vega_vec, bs_implied_vol_vec

__all__ = [
    # Data model
    "OptionParams", "SolverConfig", "DEFAULT_SOLVER", "CALL", "PUT",
    # Errors
    "PricingError", "InvalidArgument", "SolverError",
    "VegaTooSmall", "DidNotConverge",
    # Gaussian
    "norm_cdf", "norm_pdf",
    # Scalar
    "d1_d2", "price", "vega", "parity_gap", "bs_price", "bs_vega",
    "implied_vol",
    # Bachelier
    "bachelier_implied_vol_atm", "bachelier_price_atm",
    # Vectorised
    "bs_price_vec", "bs_vega_vec", "bs_implied_vol_vec",
]

__version__ = "0.1.0"
