"""
Analytics module for the standard normal primitives and implied volatility.

Provides the distribution functions the closed-form formulas are built on
and the Newton-Raphson volatility solver, without scipy dependency.
"""

from bsm_pricer.analytics.implied_vol import ImpliedVolConfig, implied_vol
from bsm_pricer.analytics.normal import erf, norm_cdf, norm_pdf

__all__ = [
    "ImpliedVolConfig",
    "erf",
    "implied_vol",
    "norm_cdf",
    "norm_pdf",
]
