"""Option leg data model."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from numbers import Integral

from ..utils.error_handling import ValidationError, require_finite

DEFAULT_IMPLIED_VOLATILITY = 0.20
MAX_IMPLIED_VOLATILITY = 5.0


class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"


class Action(str, Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class OptionLeg:
    """One option contract position within a strategy.

    Immutable and validated on construction: an invalid leg raises
    ValidationError and no partially-valid object is produced. Premium is
    per-share in dollars, IV as decimal (0.25 = 25%).
    """

    strike: float
    option_type: OptionType
    action: Action
    quantity: int = 1
    premium: float = 0.0
    implied_volatility: float = DEFAULT_IMPLIED_VOLATILITY

    # Informational only; analytics use a fixed horizon
    expiration: date | None = None

    def __post_init__(self) -> None:
        """Validate and normalize leg fields."""
        strike = require_finite("strike", self.strike)
        if strike <= 0:
            raise ValidationError(f"Strike must be positive, got {self.strike}")

        try:
            option_type = OptionType(self.option_type)
        except ValueError:
            raise ValidationError(f"Invalid option_type: {self.option_type!r}") from None

        try:
            action = Action(self.action)
        except ValueError:
            raise ValidationError(f"Invalid action: {self.action!r}") from None

        if isinstance(self.quantity, bool) or not isinstance(self.quantity, Integral):
            raise ValidationError(f"Quantity must be an integer, got {self.quantity!r}")
        if self.quantity <= 0:
            raise ValidationError(f"Quantity must be positive, got {self.quantity}")

        premium = require_finite("premium", self.premium)
        if premium < 0:
            raise ValidationError(f"Premium must be 0 or greater, got {self.premium}")

        iv = require_finite("implied_volatility", self.implied_volatility)
        if not 0 < iv <= MAX_IMPLIED_VOLATILITY:
            raise ValidationError(
                f"Implied volatility must be in (0, {MAX_IMPLIED_VOLATILITY}], got {self.implied_volatility}"
            )

        if self.expiration is not None and not isinstance(self.expiration, date):
            raise ValidationError(f"Expiration must be a date, got {self.expiration!r}")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'strike', strike)
        object.__setattr__(self, 'option_type', option_type)
        object.__setattr__(self, 'action', action)
        object.__setattr__(self, 'quantity', int(self.quantity))
        object.__setattr__(self, 'premium', premium)
        object.__setattr__(self, 'implied_volatility', iv)

    @classmethod
    def from_quote(
        cls,
        strike: float,
        option_type: OptionType | str,
        action: Action | str,
        bid: float | None,
        ask: float | None,
        implied_volatility: float = DEFAULT_IMPLIED_VOLATILITY,
        quantity: int = 1,
        expiration: date | None = None,
    ) -> "OptionLeg":
        """Build a leg priced from an option-chain quote.

        A bought leg pays the ask, a sold leg receives the bid. A missing
        quote side prices the leg at 0.

        Example:
            >>> OptionLeg.from_quote(150, "call", "sell", bid=2.10, ask=2.25).premium
            2.1
        """
        try:
            side = Action(action)
        except ValueError:
            raise ValidationError(f"Invalid action: {action!r}") from None

        premium = ask if side is Action.BUY else bid
        return cls(
            strike=strike,
            option_type=option_type,
            action=side,
            quantity=quantity,
            premium=premium if premium is not None else 0.0,
            implied_volatility=implied_volatility,
            expiration=expiration,
        )

    @property
    def is_call(self) -> bool:
        return self.option_type is OptionType.CALL

    @property
    def is_long(self) -> bool:
        return self.action is Action.BUY

    @property
    def direction(self) -> int:
        """+1 for bought legs, -1 for sold legs."""
        return 1 if self.is_long else -1

    @property
    def signed_quantity(self) -> int:
        """Quantity weighted by direction (used for Greeks aggregation)."""
        return self.direction * self.quantity

    @property
    def cost(self) -> float:
        """Net premium paid for the leg (negative when premium is received)."""
        return self.premium * self.quantity * self.direction

    def __repr__(self) -> str:
        """Compact string representation for debugging."""
        return (f"OptionLeg({self.action.value.upper()} {self.quantity}x "
                f"{self.strike:g}{self.option_type.value[0].upper()} "
                f"@ {self.premium:.2f} IV={self.implied_volatility:.2%})")
