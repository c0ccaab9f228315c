"""Expiration payoff of option legs and strategies.

Every other component is built on these functions: the sweeps, the Monte
Carlo estimator and the caller-facing payoff curve all evaluate
total_payoff_at / total_payoff_curve.
"""

from typing import List

import numpy as np

from ..models.analysis import PayoffPoint
from ..models.leg import Action, OptionLeg, OptionType
from ..models.strategy import Strategy


def payoff_at(leg: OptionLeg, price: float) -> float:
    """Payoff of one contract of a leg at expiration, net of premium.

    Args:
        leg: Option leg
        price: Hypothetical underlying price (>= 0)

    Returns:
        Per-contract P&L in dollars per share

    Example:
        >>> leg = OptionLeg(strike=100, option_type="call", action="buy", premium=3)
        >>> payoff_at(leg, 110)
        7.0
    """
    if leg.option_type is OptionType.CALL:
        intrinsic = max(0.0, price - leg.strike)
    else:
        intrinsic = max(0.0, leg.strike - price)

    if leg.action is Action.BUY:
        return intrinsic - leg.premium
    return leg.premium - intrinsic


def total_payoff_at(strategy: Strategy, price: float) -> float:
    """Strategy payoff at one price: sum of leg payoffs times quantity."""
    total = 0.0
    for leg in strategy.legs:
        total += payoff_at(leg, price) * leg.quantity
    return total


def _leg_payoff_curve(leg: OptionLeg, prices: np.ndarray) -> np.ndarray:
    if leg.option_type is OptionType.CALL:
        intrinsic = np.maximum(0.0, prices - leg.strike)
    else:
        intrinsic = np.maximum(0.0, leg.strike - prices)

    if leg.action is Action.BUY:
        return intrinsic - leg.premium
    return leg.premium - intrinsic


def total_payoff_curve(strategy: Strategy, prices: np.ndarray) -> np.ndarray:
    """Vectorized total_payoff_at over an array of prices."""
    prices = np.asarray(prices, dtype=float)
    total = np.zeros_like(prices)
    for leg in strategy.legs:
        total += _leg_payoff_curve(leg, prices) * leg.quantity
    return total


def payoff_curve(
    strategy: Strategy,
    lower_multiplier: float = 0.7,
    upper_multiplier: float = 1.3,
    steps: int = 50,
) -> List[PayoffPoint]:
    """Payoff curve around the current spot for charting.

    Args:
        strategy: Strategy to evaluate
        lower_multiplier: Curve start as a multiple of spot
        upper_multiplier: Curve end as a multiple of spot
        steps: Number of intervals (returns steps + 1 points)

    Returns:
        List of PayoffPoint ordered by price
    """
    spot = strategy.underlying_spot_price
    prices = np.linspace(spot * lower_multiplier, spot * upper_multiplier, steps + 1)
    payoffs = total_payoff_curve(strategy, prices)
    return [PayoffPoint(price=float(p), payoff=float(v)) for p, v in zip(prices, payoffs)]
