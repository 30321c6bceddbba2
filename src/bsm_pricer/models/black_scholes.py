"""
Black-Scholes-Merton model for European options on a dividend-paying asset.

The model is an immutable value: parameters are validated once at
construction and every query (price, Greeks, implied volatility) is a pure
function of them.
"""

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from bsm_pricer.analytics.implied_vol import ImpliedVolConfig, implied_vol
from bsm_pricer.analytics.normal import norm_cdf, norm_pdf
from bsm_pricer.errors import ValidationError
from bsm_pricer.greeks.types import Greeks

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.0
PERCENT = 100.0


class OptionType(Enum):
    """European option variant."""

    CALL = "call"
    PUT = "put"

    @classmethod
    def parse(cls, value: "OptionType | str") -> "OptionType":
        """
        Coerce a string such as ``"call"`` or ``"PUT"`` to an OptionType.

        Raises
        ------
        ValueError
            If value is not 'call' or 'put'
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"option_type must be 'call' or 'put', got {value!r}") from None


def _saturating_exp(x: float) -> float:
    """exp(x) that returns inf instead of raising OverflowError."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _unknown_option_type(option_type: object) -> ValueError:
    return ValueError(f"option_type must be an OptionType, got {option_type!r}")


@dataclass(frozen=True)
class BlackScholesModel:
    """
    Validated Black-Scholes-Merton parameters for a single contract.

    Attributes
    ----------
    spot_price : float
        Current price of the underlying S (must be > 0)
    strike_price : float
        Strike price K (must be > 0)
    time_to_expiry : float
        Time to expiry T in years (must be > 0)
    risk_free_rate : float
        Continuously compounded risk-free rate r (any sign)
    volatility : float
        Annualized volatility σ (must be > 0)
    dividend_yield : float
        Continuous dividend yield q (any sign, default 0)

    Raises
    ------
    ValidationError
        If any parameter is non-finite or S, K, T, σ is not positive

    Notes
    -----
    Pricing methods never raise on a constructed model. For extreme rT or
    qT the discount factors saturate to inf, and results may be inf or nan.
    """

    spot_price: float
    strike_price: float
    time_to_expiry: float
    risk_free_rate: float
    volatility: float
    dividend_yield: float = 0.0

    def __post_init__(self):
        for name in (
            "spot_price",
            "strike_price",
            "time_to_expiry",
            "risk_free_rate",
            "volatility",
            "dividend_yield",
        ):
            value = getattr(self, name)
            if not math.isfinite(value):
                self._reject(name, value, f"{name} must be finite")

        if self.spot_price <= 0:
            self._reject("spot_price", self.spot_price, "Spot price must be positive")
        if self.strike_price <= 0:
            self._reject("strike_price", self.strike_price, "Strike price must be positive")
        if self.time_to_expiry <= 0:
            self._reject("time_to_expiry", self.time_to_expiry, "Time to expiry must be positive")
        if self.volatility <= 0:
            self._reject("volatility", self.volatility, "Volatility must be positive")

    @staticmethod
    def _reject(parameter: str, value: float, reason: str) -> None:
        logger.debug("Rejected %s=%r: %s", parameter, value, reason)
        raise ValidationError(parameter, value, reason)

    def with_volatility(self, volatility: float) -> "BlackScholesModel":
        """Return a copy of this model with only the volatility replaced."""
        return replace(self, volatility=volatility)

    # ------------------------------------------------------------------
    # Intermediate quantities
    # ------------------------------------------------------------------

    def _discount_factors(self) -> tuple[float, float]:
        """Return (e^(-rT), e^(-qT))."""
        T = self.time_to_expiry
        return (
            _saturating_exp(-self.risk_free_rate * T),
            _saturating_exp(-self.dividend_yield * T),
        )

    def d1(self) -> float:
        """
        d1 = [ln(S/K) + (r - q + σ²/2)T] / (σ√T)
        """
        sigma = self.volatility
        T = self.time_to_expiry
        numerator = (
            math.log(self.spot_price / self.strike_price)
            + (self.risk_free_rate - self.dividend_yield + 0.5 * sigma * sigma) * T
        )
        return numerator / (sigma * math.sqrt(T))

    def d2(self) -> float:
        """d2 = d1 - σ√T"""
        return self.d1() - self.volatility * math.sqrt(self.time_to_expiry)

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def price(self, option_type: OptionType) -> float:
        """
        Compute the European option price.

        Parameters
        ----------
        option_type : OptionType
            CALL or PUT

        Returns
        -------
        float
            Option price

        Notes
        -----
        Call: S·e^(-qT)·N(d1) - K·e^(-rT)·N(d2)
        Put:  K·e^(-rT)·N(-d2) - S·e^(-qT)·N(-d1)
        """
        d1 = self.d1()
        d2 = d1 - self.volatility * math.sqrt(self.time_to_expiry)
        discount, dividend_discount = self._discount_factors()
        S = self.spot_price
        K = self.strike_price

        if option_type is OptionType.CALL:
            return S * dividend_discount * norm_cdf(d1) - K * discount * norm_cdf(d2)
        if option_type is OptionType.PUT:
            return K * discount * norm_cdf(-d2) - S * dividend_discount * norm_cdf(-d1)
        raise _unknown_option_type(option_type)

    def intrinsic_floor(self, option_type: OptionType) -> float:
        """
        Lower no-arbitrage bound on the option price.

        Call: max(0, S·e^(-qT) - K·e^(-rT))
        Put:  max(0, K·e^(-rT) - S·e^(-qT))

        Market prices at or below this floor have no positive implied
        volatility.
        """
        discount, dividend_discount = self._discount_factors()
        forward_spot = self.spot_price * dividend_discount
        discounted_strike = self.strike_price * discount

        if option_type is OptionType.CALL:
            return max(0.0, forward_spot - discounted_strike)
        if option_type is OptionType.PUT:
            return max(0.0, discounted_strike - forward_spot)
        raise _unknown_option_type(option_type)

    # ------------------------------------------------------------------
    # Greeks
    # ------------------------------------------------------------------

    def vega_raw(self) -> float:
        """
        Unscaled vega ∂V/∂σ = S·e^(-qT)·φ(d1)·√T (same for calls and puts).

        This is the derivative used by the implied volatility solver; the
        reported ``Greeks.vega`` is this value divided by 100.
        """
        _, dividend_discount = self._discount_factors()
        return (
            self.spot_price
            * dividend_discount
            * norm_pdf(self.d1())
            * math.sqrt(self.time_to_expiry)
        )

    def greeks(self, option_type: OptionType) -> Greeks:
        """
        Compute delta, gamma, vega, theta and rho.

        Parameters
        ----------
        option_type : OptionType
            CALL or PUT

        Returns
        -------
        Greeks
            Sensitivities with vega and rho per 1% move and theta per
            calendar day

        Notes
        -----
        Gamma = e^(-qT)·φ(d1) / (S·σ·√T)
        Vega  = S·e^(-qT)·φ(d1)·√T / 100

        For call:
            Delta = e^(-qT)·N(d1)
            Theta = [-S·φ(d1)·σ·e^(-qT)/(2√T) - q·S·N(d1)·e^(-qT)
                     + r·K·e^(-rT)·N(d2)] / 365
            Rho   = K·T·e^(-rT)·N(d2) / 100
        For put:
            Delta = -e^(-qT)·N(-d1)
            Theta = [-S·φ(d1)·σ·e^(-qT)/(2√T) + q·S·N(-d1)·e^(-qT)
                     - r·K·e^(-rT)·N(-d2)] / 365
            Rho   = -K·T·e^(-rT)·N(-d2) / 100
        """
        S = self.spot_price
        K = self.strike_price
        T = self.time_to_expiry
        r = self.risk_free_rate
        q = self.dividend_yield
        sigma = self.volatility

        sqrt_t = math.sqrt(T)
        d1 = self.d1()
        d2 = d1 - sigma * sqrt_t
        pdf_d1 = norm_pdf(d1)
        discount, dividend_discount = self._discount_factors()

        gamma = dividend_discount * pdf_d1 / (S * sigma * sqrt_t)
        vega = S * dividend_discount * pdf_d1 * sqrt_t / PERCENT
        decay = -(S * pdf_d1 * sigma * dividend_discount) / (2.0 * sqrt_t)

        if option_type is OptionType.CALL:
            cdf_d1 = norm_cdf(d1)
            cdf_d2 = norm_cdf(d2)
            delta = dividend_discount * cdf_d1
            theta = (
                decay
                - q * S * cdf_d1 * dividend_discount
                + r * K * discount * cdf_d2
            ) / DAYS_PER_YEAR
            rho = K * T * discount * cdf_d2 / PERCENT
        elif option_type is OptionType.PUT:
            cdf_minus_d1 = norm_cdf(-d1)
            cdf_minus_d2 = norm_cdf(-d2)
            delta = -dividend_discount * cdf_minus_d1
            theta = (
                decay
                + q * S * cdf_minus_d1 * dividend_discount
                - r * K * discount * cdf_minus_d2
            ) / DAYS_PER_YEAR
            rho = -K * T * discount * cdf_minus_d2 / PERCENT
        else:
            raise _unknown_option_type(option_type)

        return Greeks(delta=delta, gamma=gamma, vega=vega, theta=theta, rho=rho)

    # ------------------------------------------------------------------
    # Implied volatility
    # ------------------------------------------------------------------

    def implied_volatility(
        self,
        option_type: OptionType,
        market_price: float,
        max_iterations: int = 100,
        tolerance: float = 1e-6,
        config: ImpliedVolConfig | None = None,
    ) -> float:
        """
        Solve for the volatility reproducing ``market_price``.

        The model's own volatility is ignored; S, K, T, r and q are held
        fixed. See :func:`bsm_pricer.analytics.implied_vol.implied_vol`.

        Raises
        ------
        ConvergenceError
            If vega vanishes or the iteration budget is exhausted
        """
        return implied_vol(
            self,
            option_type,
            market_price,
            max_iterations=max_iterations,
            tolerance=tolerance,
            config=config,
        )
