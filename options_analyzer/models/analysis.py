"""Analysis result data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .greeks import Greeks


class StrategyLabel(str, Enum):
    """Coarse strategy categories derived from leg count and type."""

    LONG_CALL = "Long Call"
    LONG_PUT = "Long Put"
    SHORT_CALL = "Short Call"
    SHORT_PUT = "Short Put"
    CALL_SPREAD = "Call Spread"
    PUT_SPREAD = "Put Spread"
    STRADDLE_STRANGLE = "Straddle/Strangle"
    COMPLEX = "Complex Strategy"


@dataclass(frozen=True)
class PayoffPoint:
    price: float
    payoff: float


@dataclass(frozen=True)
class TimeDecayPoint:
    days_elapsed: int
    theta: float


@dataclass(frozen=True)
class VolatilityPoint:
    volatility_pct: float
    vega: float


@dataclass(frozen=True)
class AnalysisResult:
    """Full analytics for one strategy at one spot price.

    All computed values stored as immutable fields; a change of input
    produces a new result rather than mutating this one.
    """

    ticker: str
    spot_price: float

    greeks: Greeks

    # Expiration payoff metrics (from the price sweep)
    breakeven_prices: Tuple[float, ...]
    max_profit: float              # >= 0
    max_loss: float                # <= 0
    risk_reward_ratio: float | None  # None when max_loss == 0

    # Monte Carlo estimate, percentage (0-100)
    probability_of_profit: float

    # Sensitivity projections
    time_decay_series: Tuple[TimeDecayPoint, ...]
    volatility_impact_series: Tuple[VolatilityPoint, ...]

    risk_score: float              # 0 (low) to 10 (high)
    strategy_label: StrategyLabel | None

    net_premium: float = 0.0
    payoff_curve: Tuple[PayoffPoint, ...] = field(default_factory=tuple)

    @property
    def has_defined_risk_reward(self) -> bool:
        return self.risk_reward_ratio is not None

    @property
    def risk_profile(self) -> Dict[str, float | None]:
        """Inputs for a risk radar chart (magnitudes only)."""
        return {
            'max_profit': self.max_profit,
            'max_loss': abs(self.max_loss),
            'probability_of_profit': self.probability_of_profit,
            'risk_reward': self.risk_reward_ratio,
            'delta': abs(self.greeks.delta),
            'vega': abs(self.greeks.vega),
        }

    def __repr__(self) -> str:
        """Compact string representation."""
        label = self.strategy_label.value if self.strategy_label else "N/A"
        rr = f"{self.risk_reward_ratio:.2f}" if self.risk_reward_ratio is not None else "undefined"
        return (f"AnalysisResult({self.ticker or '?'} {label} "
                f"MaxP={self.max_profit:.2f} MaxL={self.max_loss:.2f} R/R={rr} "
                f"POP={self.probability_of_profit:.1f}% Risk={self.risk_score:.1f})")
