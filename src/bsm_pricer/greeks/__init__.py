"""
Greeks package initialization.
"""

from bsm_pricer.greeks.types import Greeks

__all__ = [
    "Greeks",
]
