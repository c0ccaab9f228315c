"""Monte Carlo probability of profit.

Simulated terminal prices use a uniform perturbation of log-price,
S' = S * exp((U - 0.5) * sigma * sqrt(T) * 2) with U ~ Uniform[0, 1),
not a lognormal diffusion. Randomness comes from an injectable
numpy Generator so runs are reproducible by seed.
"""

import logging
import math

import numpy as np

from ..models.strategy import Strategy
from .payoff import total_payoff_curve

logger = logging.getLogger("options_analyzer.probability")


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Build a random generator; seed=None draws fresh OS entropy."""
    return np.random.default_rng(seed)


def simulate_terminal_prices(
    spot: float,
    volatility: float,
    time_to_expiry: float,
    num_simulations: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw num_simulations terminal prices around spot.

    Prices are bounded within spot * exp(+/- sigma * sqrt(T)).
    """
    uniforms = rng.random(num_simulations)
    return spot * np.exp((uniforms - 0.5) * volatility * math.sqrt(time_to_expiry) * 2)


def probability_of_profit(
    strategy: Strategy,
    spot: float,
    volatility: float = 0.20,
    time_to_expiry: float = 30 / 365,
    num_simulations: int = 1000,
    rng: np.random.Generator | None = None,
) -> float:
    """Estimate the chance the strategy finishes with a positive payoff.

    Args:
        strategy: Strategy to evaluate
        spot: Current underlying price
        volatility: Annualized volatility of the price perturbation
        time_to_expiry: Horizon in years
        num_simulations: Number of trials
        rng: Random generator (unseeded if None)

    Returns:
        Percentage of profitable trials (0-100)

    Example:
        >>> pop = probability_of_profit(strategy, 150.0, rng=make_rng(42))
        >>> # Same seed, same answer
    """
    if strategy.is_empty:
        return 0.0

    if rng is None:
        rng = make_rng()

    prices = simulate_terminal_prices(spot, volatility, time_to_expiry, num_simulations, rng)
    profitable = int(np.count_nonzero(total_payoff_curve(strategy, prices) > 0))

    logger.debug(
        "Monte Carlo: %d/%d profitable trials for %s",
        profitable, num_simulations, strategy.ticker or "strategy"
    )

    return 100.0 * profitable / num_simulations
