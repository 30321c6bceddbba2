#!/usr/bin/env python
"""
Command-line interface for Black-Scholes-Merton option pricing.

This is a thin wrapper around bsm_pricer.cli for running from a checkout.
Prefer using the installed 'bsm-price' command or 'python -m bsm_pricer.cli'.

Example usage:
    bsm-price --S0 100 --K 100 --T 1.0 --r 0.05 --sigma 0.2
    python scripts/bsm_price.py --S0 100 --K 105 --T 0.5 --r 0.05 --sigma 0.25 \
        --option_type call
"""

import sys
from pathlib import Path

# Add parent directory to path to allow running without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bsm_pricer.cli import main

if __name__ == "__main__":
    sys.exit(main())
