"""Main analytics orchestrator.

Runs every analytics component against a strategy and assembles one
AnalysisResult.
"""

import logging

from ..models.analysis import AnalysisResult
from ..models.strategy import Strategy
from ..scoring.classifier import classify_strategy
from ..scoring.risk import calculate_risk_score, risk_reward_ratio
from .config import AnalysisConfig
from .greeks import aggregate_greeks
from .payoff import payoff_curve
from .probability import make_rng, probability_of_profit
from .sensitivity import time_decay_series, volatility_impact_series
from .sweep import breakeven_prices, max_loss, max_profit, sweep_domain_for

logger = logging.getLogger("options_analyzer.analyzer")


class AnalysisEngine:
    """Facade over the payoff, Greeks, sweep, Monte Carlo and scoring components.

    Stateless apart from its configuration; one engine can analyze any
    number of strategies, from any thread.
    """

    def __init__(self, config: AnalysisConfig | None = None):
        self.config = config or AnalysisConfig()

    def analyze(self, strategy: Strategy, rng_seed: int | None = None) -> AnalysisResult:
        """Compute full analytics for a strategy.

        Args:
            strategy: Validated strategy (legs + spot)
            rng_seed: Seed for the Monte Carlo estimator; None for a fresh draw

        Returns:
            AnalysisResult with all computed metrics. Deterministic for a
            given (strategy, config, rng_seed).
        """
        config = self.config
        spot = strategy.underlying_spot_price
        horizon = config.time_to_expiry

        greeks = aggregate_greeks(strategy, spot, time_to_expiry=horizon, rate=config.risk_free_rate)

        domain = sweep_domain_for(spot, config)
        best = max_profit(strategy, domain, step=config.profit_loss_step)
        worst = max_loss(strategy, domain, step=config.profit_loss_step)
        breakevens = breakeven_prices(
            strategy,
            domain,
            step=config.breakeven_step,
            tolerance=config.breakeven_tolerance,
            deduplicate=config.deduplicate_breakevens,
        )

        pop = probability_of_profit(
            strategy,
            spot,
            volatility=config.mc_volatility,
            time_to_expiry=horizon,
            num_simulations=config.num_simulations,
            rng=make_rng(rng_seed),
        )

        ratio = risk_reward_ratio(best, worst)
        if strategy.is_empty:
            # Degenerate result: every metric zero or empty
            score = 0.0
        else:
            score = calculate_risk_score(
                worst,
                pop,
                ratio,
                loss_normalizer=config.loss_normalizer,
                risk_reward_cap=config.risk_reward_cap,
            )

        time_decay = time_decay_series(
            strategy, spot, horizon_days=config.horizon_days, rate=config.risk_free_rate
        )
        vol_impact = volatility_impact_series(
            strategy,
            spot,
            time_to_expiry=horizon,
            rate=config.risk_free_rate,
            vol_min=config.vol_min,
            vol_max=config.vol_max,
            vol_step=config.vol_step,
        )

        curve = payoff_curve(
            strategy,
            lower_multiplier=config.curve_lower_multiplier,
            upper_multiplier=config.curve_upper_multiplier,
            steps=config.curve_steps,
        ) if not strategy.is_empty else []

        label = classify_strategy(strategy.legs)

        result = AnalysisResult(
            ticker=strategy.ticker,
            spot_price=spot,
            greeks=greeks,
            breakeven_prices=tuple(breakevens),
            max_profit=best,
            max_loss=worst,
            risk_reward_ratio=ratio,
            probability_of_profit=pop,
            time_decay_series=tuple(time_decay),
            volatility_impact_series=tuple(vol_impact),
            risk_score=score,
            strategy_label=label,
            net_premium=strategy.net_premium,
            payoff_curve=tuple(curve),
        )

        logger.info(
            "Analyzed %s (%s, %d legs): max profit %.2f, max loss %.2f, POP %.1f%%, risk %.1f",
            strategy.ticker or "strategy",
            label.value if label else "empty",
            len(strategy.legs),
            best, worst, pop, score
        )
        if not breakevens and not strategy.is_empty:
            logger.debug("No breakevens in sweep domain [%.2f, %.2f]", domain.lower, domain.upper)

        return result


def analyze(
    strategy: Strategy,
    rng_seed: int | None = None,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Analyze a strategy with a one-off engine.

    Example:
        >>> result = analyze(strategy, rng_seed=7)
        >>> result.strategy_label
        <StrategyLabel.LONG_CALL: 'Long Call'>
    """
    return AnalysisEngine(config).analyze(strategy, rng_seed=rng_seed)
