"""Option strategy data model."""

from dataclasses import dataclass
from typing import Tuple

from ..utils.error_handling import ValidationError, require_finite
from .leg import OptionLeg


@dataclass(frozen=True)
class Strategy:
    """A set of option legs on one underlying.

    Leg order is kept for display only and does not affect any computation.
    A strategy with zero legs is valid and analyzes to a degenerate result.
    """

    legs: Tuple[OptionLeg, ...]
    underlying_spot_price: float
    ticker: str = ""

    def __post_init__(self) -> None:
        """Validate strategy and freeze the leg sequence."""
        legs = tuple(self.legs)
        for index, leg in enumerate(legs):
            if not isinstance(leg, OptionLeg):
                raise ValidationError(f"Leg {index} is not an OptionLeg: {leg!r}")

        spot = require_finite("underlying_spot_price", self.underlying_spot_price)
        if spot <= 0:
            raise ValidationError(f"Underlying spot price must be positive, got {self.underlying_spot_price}")

        object.__setattr__(self, 'legs', legs)
        object.__setattr__(self, 'underlying_spot_price', spot)
        object.__setattr__(self, 'ticker', str(self.ticker))

    @property
    def is_empty(self) -> bool:
        return not self.legs

    @property
    def calls(self) -> Tuple[OptionLeg, ...]:
        return tuple(leg for leg in self.legs if leg.is_call)

    @property
    def puts(self) -> Tuple[OptionLeg, ...]:
        return tuple(leg for leg in self.legs if not leg.is_call)

    @property
    def net_premium(self) -> float:
        """Total premium paid across legs.

        Returns:
            Positive for a net debit, negative for a net credit
        """
        return sum(leg.cost for leg in self.legs)

    def with_spot(self, spot_price: float) -> "Strategy":
        """Return a copy of this strategy at a different spot price."""
        return Strategy(legs=self.legs, underlying_spot_price=spot_price, ticker=self.ticker)

    def __len__(self) -> int:
        return len(self.legs)

    def __bool__(self) -> bool:
        # An empty strategy is still a strategy
        return True

    def __repr__(self) -> str:
        """Compact string representation."""
        return (f"Strategy({self.ticker or '?'} @ {self.underlying_spot_price:.2f}, "
                f"{len(self.legs)} legs, net={self.net_premium:+.2f})")
