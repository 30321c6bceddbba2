"""
Exception types raised by the pricing engine.

Both concrete errors derive from ``ValueError`` so that callers catching
``ValueError`` around pricing calls keep working.
"""

from typing import Any


class PricingError(ValueError):
    """Base exception for all pricing engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(PricingError):
    """
    Raised when model parameters fail validation at construction time.

    Attributes
    ----------
    parameter : str
        Name of the offending parameter
    value : float
        Value that was rejected
    """

    def __init__(self, parameter: str, value: float, reason: str):
        super().__init__(
            f"{reason}, got {value!r}",
            details={"parameter": parameter, "value": value},
        )
        self.parameter = parameter
        self.value = value


class ConvergenceError(PricingError):
    """
    Raised when the implied volatility solver cannot reach tolerance.

    Attributes
    ----------
    estimate : float
        Best volatility estimate found before giving up
    iterations : int
        Number of iterations performed
    reason : str
        Short description of why the solver stopped
    """

    def __init__(self, reason: str, estimate: float, iterations: int):
        super().__init__(
            f"Implied volatility did not converge: {reason} "
            f"(best estimate σ={estimate:.6f} after {iterations} iterations)",
            details={"reason": reason, "estimate": estimate, "iterations": iterations},
        )
        self.reason = reason
        self.estimate = estimate
        self.iterations = iterations
