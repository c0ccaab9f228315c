"""Discretized price sweeps for max profit, max loss and breakevens.

Brute-force search over a bounded price grid instead of deriving the
piecewise-linear payoff breakpoints. Strategies have few legs and the
domain is bounded, so a few hundred samples are enough.
"""

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from ..models.strategy import Strategy
from .config import AnalysisConfig
from .payoff import total_payoff_curve

logger = logging.getLogger("options_analyzer.sweep")


@dataclass(frozen=True)
class SweepDomain:
    """Closed price interval to sweep."""

    lower: float = 50.0
    upper: float = 250.0

    def grid(self, step: float) -> np.ndarray:
        """Sample prices lower, lower + step, ... up to and including upper.

        Built as lower + i * step so samples don't accumulate rounding error.
        """
        count = int(np.floor((self.upper - self.lower) / step + 1e-9)) + 1
        return self.lower + np.arange(count) * step


def sweep_domain_for(spot: float, config: AnalysisConfig) -> SweepDomain:
    """Choose the sweep domain for a spot price.

    The default is the fixed absolute interval from config; with
    spot_relative_sweep enabled it is [lower_mult * spot, upper_mult * spot].
    """
    if config.spot_relative_sweep:
        return SweepDomain(
            lower=spot * config.spot_lower_multiplier,
            upper=spot * config.spot_upper_multiplier,
        )
    return SweepDomain(lower=config.sweep_lower, upper=config.sweep_upper)


def max_profit(strategy: Strategy, domain: SweepDomain = SweepDomain(), step: float = 1.0) -> float:
    """Largest sampled payoff, floored at zero.

    Returns:
        Max profit in dollars (>= 0)
    """
    best = 0.0
    if strategy.is_empty:
        return best

    payoffs = total_payoff_curve(strategy, domain.grid(step))
    return max(best, float(payoffs.max()))


def max_loss(strategy: Strategy, domain: SweepDomain = SweepDomain(), step: float = 1.0) -> float:
    """Smallest sampled payoff, capped at zero.

    Returns:
        Max loss in dollars (<= 0)
    """
    worst = 0.0
    if strategy.is_empty:
        return worst

    payoffs = total_payoff_curve(strategy, domain.grid(step))
    return min(worst, float(payoffs.min()))


def breakeven_prices(
    strategy: Strategy,
    domain: SweepDomain = SweepDomain(),
    step: float = 0.5,
    tolerance: float = 0.01,
    deduplicate: bool = False,
) -> List[float]:
    """Sample prices where the total payoff is within tolerance of zero.

    Args:
        strategy: Strategy to evaluate
        domain: Price interval to sweep
        step: Sample spacing
        tolerance: |payoff| strictly below this qualifies
        deduplicate: Collapse runs of adjacent qualifying samples (a flat
            near-zero payoff) to the middle sample of each run

    Returns:
        Ascending list of breakeven prices
    """
    if strategy.is_empty:
        return []

    prices = domain.grid(step)
    payoffs = total_payoff_curve(strategy, prices)
    hits = np.nonzero(np.abs(payoffs) < tolerance)[0]

    if not deduplicate:
        return [float(prices[i]) for i in hits]

    runs: List[List[int]] = []
    for i in hits:
        if runs and i == runs[-1][-1] + 1:
            runs[-1].append(int(i))
        else:
            runs.append([int(i)])

    if len(runs) < len(hits):
        logger.debug("Collapsed %d breakeven samples into %d", len(hits), len(runs))

    return [float(prices[run[len(run) // 2]]) for run in runs]
