"""
Greeks result types.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Greeks:
    """
    First-order sensitivities of a European option.

    Attributes
    ----------
    delta : float
        ∂V/∂S
    gamma : float
        ∂²V/∂S² (identical for calls and puts)
    vega : float
        ∂V/∂σ per one percentage point of volatility
    theta : float
        Time decay per calendar day
    rho : float
        ∂V/∂r per one percentage point of rate
    """

    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def __repr__(self) -> str:
        return (
            f"Greeks(\n"
            f"  delta={self.delta:.6f},\n"
            f"  gamma={self.gamma:.6f},\n"
            f"  vega={self.vega:.6f},\n"
            f"  theta={self.theta:.6f},\n"
            f"  rho={self.rho:.6f}\n"
            f")"
        )
