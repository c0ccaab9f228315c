"""Greeks value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Greeks:
    """Option sensitivities in reporting units.

    theta is per calendar day, vega per 1 vol point, rho per 1 rate point;
    delta and gamma are unscaled.
    """

    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0
    rho: float = 0.0

    @classmethod
    def zero(cls) -> "Greeks":
        return cls()

    def scaled(self, multiplier: float) -> "Greeks":
        """Scale every sensitivity (e.g. by signed quantity)."""
        return Greeks(
            delta=self.delta * multiplier,
            gamma=self.gamma * multiplier,
            theta=self.theta * multiplier,
            vega=self.vega * multiplier,
            rho=self.rho * multiplier,
        )

    def __add__(self, other: "Greeks") -> "Greeks":
        if not isinstance(other, Greeks):
            return NotImplemented
        return Greeks(
            delta=self.delta + other.delta,
            gamma=self.gamma + other.gamma,
            theta=self.theta + other.theta,
            vega=self.vega + other.vega,
            rho=self.rho + other.rho,
        )

    def as_dict(self) -> dict:
        return {
            'delta': self.delta,
            'gamma': self.gamma,
            'theta': self.theta,
            'vega': self.vega,
            'rho': self.rho,
        }

    def __repr__(self) -> str:
        return (f"Greeks(Δ={self.delta:.4f} Γ={self.gamma:.4f} Θ={self.theta:.4f} "
                f"V={self.vega:.4f} ρ={self.rho:.4f})")
