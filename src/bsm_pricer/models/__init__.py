"""
Models package initialization.
"""

from bsm_pricer.models.black_scholes import BlackScholesModel, OptionType

__all__ = [
    "BlackScholesModel",
    "OptionType",
]
