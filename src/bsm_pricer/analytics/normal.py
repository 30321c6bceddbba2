"""
Standard normal distribution primitives.

The error function is evaluated with a fixed-coefficient rational
approximation so the pricing formulas do not depend on the platform libm
or on scipy.
"""

import math

# Abramowitz & Stegun 7.1.26
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

_SQRT_2 = math.sqrt(2.0)
_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def erf(x: float) -> float:
    """
    Gauss error function approximation.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        erf(x), absolute error below 1.5e-7 over the real line

    Notes
    -----
    Abramowitz & Stegun formula 7.1.26, evaluated on |x| with the sign
    restored afterwards, so erf(-x) == -erf(x) holds exactly.
    """
    sign = -1.0 if x < 0 else 1.0
    x = abs(x)

    t = 1.0 / (1.0 + _P * x)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    y = 1.0 - poly * math.exp(-x * x)

    return sign * y


def norm_pdf(x: float) -> float:
    """
    Probability density function for standard normal distribution.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        PDF value at x: φ(x) = exp(-x²/2)/√(2π)
    """
    return math.exp(-0.5 * x * x) * _INV_SQRT_2PI


def norm_cdf(x: float) -> float:
    """
    Cumulative distribution function for standard normal distribution.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        CDF value at x: P(Z <= x) where Z ~ N(0,1)
    """
    return 0.5 * (1.0 + erf(x / _SQRT_2))
