"""Core data models for option strategy analysis."""

from .analysis import AnalysisResult, PayoffPoint, StrategyLabel, TimeDecayPoint, VolatilityPoint
from .greeks import Greeks
from .leg import Action, OptionLeg, OptionType
from .strategy import Strategy

__all__ = [
    "Action",
    "AnalysisResult",
    "Greeks",
    "OptionLeg",
    "OptionType",
    "PayoffPoint",
    "Strategy",
    "StrategyLabel",
    "TimeDecayPoint",
    "VolatilityPoint",
]
