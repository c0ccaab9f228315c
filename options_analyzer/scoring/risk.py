"""Heuristic risk scoring for option strategies.

Combines loss magnitude, profit probability and risk/reward into a single
0-10 number. Higher score = higher risk.
"""

from ..utils.error_handling import safe_divide


def risk_reward_ratio(max_profit: float, max_loss: float) -> float | None:
    """Max profit per dollar of max loss.

    Returns:
        max_profit / |max_loss|, or None when max_loss is zero (undefined)
    """
    return safe_divide(max_profit, abs(max_loss), default=None)


def calculate_risk_score(
    max_loss: float,
    probability_of_profit_pct: float,
    risk_reward: float | None,
    loss_normalizer: float = 1000.0,
    risk_reward_cap: float = 3.0,
) -> float:
    """Compute the 0-10 risk score.

    Args:
        max_loss: Max loss in dollars (<= 0; sign ignored)
        probability_of_profit_pct: Probability of profit (0-100)
        risk_reward: Risk/reward ratio, None when undefined
        loss_normalizer: Dollar loss that maps to 1.0 before weighting
        risk_reward_cap: Ratio at or above which the ratio term is fully favorable

    Returns:
        Risk score clamped to [0, 10]

    Formula:
        score = |max_loss| / 1000 * 3
              + (1 - pop / 100) * 4
              + max(0, 2 - min(rr, 3)) * 2

        An undefined ratio (no possible loss) counts as the cap.
    """
    loss_component = abs(max_loss) / loss_normalizer
    profit_probability = probability_of_profit_pct / 100

    if risk_reward is None:
        capped_risk_reward = risk_reward_cap
    else:
        capped_risk_reward = min(risk_reward, risk_reward_cap)

    score = (
        loss_component * 3 +
        (1 - profit_probability) * 4 +
        max(0.0, 2 - capped_risk_reward) * 2
    )

    return max(0.0, min(10.0, score))
