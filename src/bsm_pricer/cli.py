#!/usr/bin/env python
"""
Command-line interface for Black-Scholes-Merton option pricing.

This module provides the main CLI entrypoint for the bsm-price command.

Example usage:
    bsm-price
    bsm-price --S0 100 --K 105 --T 0.5 --r 0.05 --sigma 0.25
    bsm-price --S0 100 --K 100 --T 1.0 --r 0.05 --sigma 0.2 --option_type put --market_price 6.0
"""

import argparse
import logging
import math
import sys
from dataclasses import replace

import numpy as np

from bsm_pricer.errors import PricingError
from bsm_pricer.models.black_scholes import BlackScholesModel, OptionType


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Black-Scholes-Merton option pricing",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Market parameters
    parser.add_argument("--S0", type=float, default=100.0, help="Spot price")
    parser.add_argument("--K", type=float, default=100.0, help="Strike price")
    parser.add_argument("--T", type=float, default=1.0, help="Time to expiry (years)")
    parser.add_argument("--r", type=float, default=0.05, help="Risk-free rate")
    parser.add_argument("--sigma", type=float, default=0.2, help="Volatility")
    parser.add_argument("--q", type=float, default=0.0, help="Dividend yield")

    # Option parameters
    parser.add_argument(
        "--option_type",
        type=str,
        choices=["call", "put", "both"],
        default="both",
        help="Option type to report: call, put, or both",
    )

    # Implied volatility parameters
    parser.add_argument(
        "--market_price",
        type=float,
        default=None,
        help="Market price to invert (defaults to the model's own call price)",
    )
    parser.add_argument(
        "--max_iter",
        type=int,
        default=100,
        help="Maximum Newton-Raphson iterations",
    )
    parser.add_argument(
        "--tol",
        type=float,
        default=1e-6,
        help="Implied volatility price tolerance",
    )

    # Sensitivity ladder
    parser.add_argument("--ladder_low", type=float, default=90.0, help="Lowest ladder spot")
    parser.add_argument("--ladder_high", type=float, default=110.0, help="Highest ladder spot")
    parser.add_argument("--ladder_step", type=float, default=5.0, help="Ladder spot increment")

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(args)


def _print_greeks(model: BlackScholesModel, option_type: OptionType) -> float:
    price = model.price(option_type)
    greeks = model.greeks(option_type)

    print(f"\n--- {option_type.value.capitalize()} Option ---")
    print(f"  Price:                  {price:.4f}")
    print("  Greeks:")
    print(f"    Delta:                {greeks.delta:.4f}")
    print(f"    Gamma:                {greeks.gamma:.4f}")
    print(f"    Vega:                 {greeks.vega:.4f}")
    print(f"    Theta:                {greeks.theta:.4f}")
    print(f"    Rho:                  {greeks.rho:.4f}")
    return price


def main(args: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Exit code (0 for success, non-zero for errors).
    """
    parsed = parse_args(args)

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if parsed.ladder_step <= 0:
        print("Error: --ladder_step must be positive")
        return 1
    if parsed.ladder_high < parsed.ladder_low:
        print("Error: --ladder_high must not be below --ladder_low")
        return 1

    try:
        model = BlackScholesModel(
            spot_price=parsed.S0,
            strike_price=parsed.K,
            time_to_expiry=parsed.T,
            risk_free_rate=parsed.r,
            volatility=parsed.sigma,
            dividend_yield=parsed.q,
        )
    except PricingError as e:
        print(f"Error: {e}")
        return 1

    # Print input parameters
    print("=" * 70)
    print("Black-Scholes-Merton Option Pricing")
    print("=" * 70)
    print("\nInput Parameters:")
    print(f"  Spot Price (S):         {model.spot_price:,.2f}")
    print(f"  Strike Price (K):       {model.strike_price:,.2f}")
    print(f"  Time to Expiry (T):     {model.time_to_expiry:.2f} years")
    print(f"  Risk-free Rate (r):     {model.risk_free_rate * 100:.2f}%")
    print(f"  Volatility (σ):         {model.volatility * 100:.2f}%")
    print(f"  Dividend Yield (q):     {model.dividend_yield * 100:.2f}%")

    if parsed.option_type == "both":
        selected = [OptionType.CALL, OptionType.PUT]
    else:
        selected = [OptionType.parse(parsed.option_type)]

    prices = {option_type: _print_greeks(model, option_type) for option_type in selected}

    # Put-call parity needs both legs
    if len(prices) == 2:
        T = model.time_to_expiry
        parity_left = prices[OptionType.CALL] - prices[OptionType.PUT]
        parity_right = model.spot_price * math.exp(
            -model.dividend_yield * T
        ) - model.strike_price * math.exp(-model.risk_free_rate * T)
        print("\n--- Put-Call Parity Check ---")
        print(f"  C - P:                  {parity_left:.4f}")
        print(f"  S·e^(-qT) - K·e^(-rT):  {parity_right:.4f}")
        print(f"  Difference:             {abs(parity_left - parity_right):.6f}")

    # Implied volatility
    iv_type = selected[0]
    if parsed.market_price is None:
        market_price = model.price(iv_type)
    else:
        market_price = parsed.market_price

    print("\n--- Implied Volatility ---")
    print(f"  Market Price ({iv_type.value}):    {market_price:.4f}")
    try:
        iv = model.implied_volatility(
            iv_type,
            market_price,
            max_iterations=parsed.max_iter,
            tolerance=parsed.tol,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    print(f"  Implied Volatility:     {iv:.4f} ({iv * 100:.2f}%)")

    # Price sensitivity ladder
    spots = np.arange(
        parsed.ladder_low,
        parsed.ladder_high + 0.5 * parsed.ladder_step,
        parsed.ladder_step,
    )
    print("\n--- Price Sensitivity Analysis ---")
    print("  Spot Price | Call Price | Put Price")
    print("  -----------|------------|----------")
    for spot in spots:
        try:
            shifted = replace(model, spot_price=float(spot))
        except PricingError as e:
            print(f"Error: {e}")
            return 1
        call = shifted.price(OptionType.CALL)
        put = shifted.price(OptionType.PUT)
        print(f"  {spot:>10.2f} | {call:>10.2f} | {put:>9.2f}")

    print("\n" + "=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
