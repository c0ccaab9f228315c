"""Time-decay and volatility-impact projections.

Both resample the aggregate Greeks: theta across the days remaining to
expiry, vega across a grid of implied volatilities.
"""

from typing import List

import numpy as np

from ..models.analysis import TimeDecayPoint, VolatilityPoint
from ..models.strategy import Strategy
from .config import DAYS_PER_YEAR
from .greeks import aggregate_greeks


def time_decay_series(
    strategy: Strategy,
    spot: float,
    horizon_days: int = 30,
    rate: float = 0.05,
) -> List[TimeDecayPoint]:
    """Aggregate theta from horizon_days remaining down to expiry.

    Args:
        strategy: Strategy to evaluate (each leg at its own IV)
        spot: Underlying price
        horizon_days: Starting days to expiry
        rate: Risk-free rate

    Returns:
        horizon_days + 1 points ordered by days elapsed (0 first). The
        final point is at expiry, where theta is zero.
    """
    if strategy.is_empty:
        return []

    series = []
    for days_remaining in range(horizon_days, -1, -1):
        greeks = aggregate_greeks(
            strategy,
            spot,
            time_to_expiry=days_remaining / DAYS_PER_YEAR,
            rate=rate,
        )
        series.append(TimeDecayPoint(days_elapsed=horizon_days - days_remaining, theta=greeks.theta))

    return series


def volatility_grid(vol_min: float = 0.10, vol_max: float = 0.50, vol_step: float = 0.05) -> np.ndarray:
    """Volatilities vol_min..vol_max inclusive, spaced by vol_step."""
    count = int(np.floor((vol_max - vol_min) / vol_step + 1e-9)) + 1
    return np.round(vol_min + np.arange(count) * vol_step, 10)


def volatility_impact_series(
    strategy: Strategy,
    spot: float,
    time_to_expiry: float = 30 / 365,
    rate: float = 0.05,
    vol_min: float = 0.10,
    vol_max: float = 0.50,
    vol_step: float = 0.05,
) -> List[VolatilityPoint]:
    """Aggregate vega with every leg repriced at each grid volatility.

    Returns:
        One point per grid volatility, volatility expressed in percent
    """
    if strategy.is_empty:
        return []

    series = []
    for vol in volatility_grid(vol_min, vol_max, vol_step):
        vol = float(vol)
        greeks = aggregate_greeks(strategy, spot, time_to_expiry=time_to_expiry, rate=rate, vol_override=vol)
        series.append(VolatilityPoint(volatility_pct=round(vol * 100, 8), vega=greeks.vega))

    return series
