"""Rule-based strategy classification.

Intentionally coarse: only leg count, option type and action are
considered, never strikes or expirations.
"""

from typing import Sequence

from ..models.analysis import StrategyLabel
from ..models.leg import Action, OptionLeg, OptionType

_SINGLE_LEG_LABELS = {
    (Action.BUY, OptionType.CALL): StrategyLabel.LONG_CALL,
    (Action.BUY, OptionType.PUT): StrategyLabel.LONG_PUT,
    (Action.SELL, OptionType.CALL): StrategyLabel.SHORT_CALL,
    (Action.SELL, OptionType.PUT): StrategyLabel.SHORT_PUT,
}


def classify_strategy(legs: Sequence[OptionLeg]) -> StrategyLabel | None:
    """Label a strategy from its leg composition.

    Returns:
        StrategyLabel, or None for an empty strategy
    """
    if not legs:
        return None

    if len(legs) == 1:
        leg = legs[0]
        return _SINGLE_LEG_LABELS[(leg.action, leg.option_type)]

    if len(legs) == 2:
        calls = sum(1 for leg in legs if leg.option_type is OptionType.CALL)
        if calls == 2:
            return StrategyLabel.CALL_SPREAD
        if calls == 0:
            return StrategyLabel.PUT_SPREAD
        return StrategyLabel.STRADDLE_STRANGLE

    return StrategyLabel.COMPLEX
