"""
Black-Scholes-Merton Option Pricing Engine

Closed-form prices, Greeks and Newton-Raphson implied volatility for
European options on a dividend-paying asset.
"""

from bsm_pricer._version import __version__

# Core components
from bsm_pricer.errors import ConvergenceError, PricingError, ValidationError
from bsm_pricer.greeks.types import Greeks
from bsm_pricer.models.black_scholes import BlackScholesModel, OptionType

# Analytics
from bsm_pricer.analytics.implied_vol import ImpliedVolConfig, implied_vol
from bsm_pricer.analytics.normal import erf, norm_cdf, norm_pdf

__all__ = [
    # Version
    "__version__",
    # Model
    "BlackScholesModel",
    "OptionType",
    "Greeks",
    # Errors
    "PricingError",
    "ValidationError",
    "ConvergenceError",
    # Analytics
    "ImpliedVolConfig",
    "implied_vol",
    "erf",
    "norm_cdf",
    "norm_pdf",
]
