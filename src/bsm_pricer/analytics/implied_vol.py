"""
Implied volatility solver for European options.

Uses Newton-Raphson on σ with the unscaled vega as the derivative,
starting from a fixed volatility guess.
"""

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bsm_pricer.errors import ConvergenceError

if TYPE_CHECKING:
    from bsm_pricer.models.black_scholes import BlackScholesModel, OptionType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImpliedVolConfig:
    """
    Tuning constants for the Newton-Raphson solver.

    Attributes
    ----------
    initial_guess : float
        Starting volatility, independent of the market price
    vega_floor : float
        Vega below which the Newton step is considered undefined
    min_volatility : float
        Floor applied when a step would make σ non-positive
    max_volatility : float
        Ceiling above which the iteration is treated as diverged
    """

    initial_guess: float = 0.2
    vega_floor: float = 1e-10
    min_volatility: float = 1e-6
    max_volatility: float = 1e3

    def __post_init__(self):
        if not self.initial_guess > 0:
            raise ValueError("initial_guess must be positive")
        if not self.vega_floor > 0:
            raise ValueError("vega_floor must be positive")
        if not self.min_volatility > 0:
            raise ValueError("min_volatility must be positive")
        if not self.max_volatility > self.min_volatility:
            raise ValueError("max_volatility must exceed min_volatility")


DEFAULT_CONFIG = ImpliedVolConfig()


def implied_vol(
    model: "BlackScholesModel",
    option_type: "OptionType",
    market_price: float,
    *,
    max_iterations: int = 100,
    tolerance: float = 1e-6,
    config: ImpliedVolConfig | None = None,
) -> float:
    """
    Compute implied volatility using Newton-Raphson.

    Solves for σ such that price(S, K, T, r, σ, q) = market_price, with
    every parameter except σ taken from ``model``.

    Parameters
    ----------
    model : BlackScholesModel
        Model supplying S, K, T, r and q (its volatility is ignored)
    option_type : OptionType
        CALL or PUT
    market_price : float
        Observed market price of the option
    max_iterations : int, optional
        Maximum number of Newton steps (default: 100)
    tolerance : float, optional
        Convergence tolerance on |price - market_price| (default: 1e-6)
    config : ImpliedVolConfig, optional
        Solver constants (default: initial guess 0.2, vega floor 1e-10,
        volatility floor 1e-6, volatility ceiling 1e3)

    Returns
    -------
    float
        Implied volatility

    Raises
    ------
    ValueError
        If max_iterations < 1, tolerance <= 0 or market_price is not finite
    ConvergenceError
        If vega falls below the floor, σ diverges, or max_iterations is
        exhausted before reaching tolerance

    Notes
    -----
    The market price is expected to exceed ``model.intrinsic_floor``. This
    is not checked: a price below the floor drives σ to the floor where
    vega vanishes, and the solver raises ConvergenceError.

    The starting guess is fixed, so deep in/out-of-the-money or very
    short-dated options may need more iterations or fail to converge.
    """
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")
    if not tolerance > 0:
        raise ValueError("tolerance must be positive")
    if not math.isfinite(market_price):
        raise ValueError("market_price must be finite")

    cfg = config or DEFAULT_CONFIG

    sigma = cfg.initial_guess
    best_sigma = sigma
    best_error = math.inf

    for iteration in range(1, max_iterations + 1):
        trial = model.with_volatility(sigma)
        error = trial.price(option_type) - market_price

        if abs(error) < best_error:
            best_error = abs(error)
            best_sigma = sigma

        logger.debug(
            "iteration %d: sigma=%.8f price_error=%.3e", iteration, sigma, error
        )

        if abs(error) < tolerance:
            return sigma

        vega = trial.vega_raw()
        if vega < cfg.vega_floor:
            logger.warning(
                "Vega %.3e below floor at sigma=%.6f after %d iterations",
                vega,
                sigma,
                iteration,
            )
            raise ConvergenceError("vega too small", best_sigma, iteration)

        sigma -= error / vega

        if not math.isfinite(sigma) or sigma > cfg.max_volatility:
            logger.warning("Volatility diverged after %d iterations", iteration)
            raise ConvergenceError("volatility diverged", best_sigma, iteration)
        if sigma <= 0:
            sigma = cfg.min_volatility

    logger.warning(
        "Implied volatility not within tolerance %.1e after %d iterations "
        "(best error %.3e)",
        tolerance,
        max_iterations,
        best_error,
    )
    raise ConvergenceError("iteration limit reached", best_sigma, max_iterations)
