"""Option strategy analytics: payoff, Greeks, probability of profit and risk."""

from .analytics.analyzer import AnalysisEngine, analyze
from .analytics.config import AnalysisConfig
from .models import (
    Action,
    AnalysisResult,
    Greeks,
    OptionLeg,
    OptionType,
    Strategy,
    StrategyLabel,
)
from .utils.error_handling import AnalysisError, ConfigurationError, ValidationError

__version__ = "0.1.0"

__all__ = [
    "Action",
    "AnalysisConfig",
    "AnalysisEngine",
    "AnalysisError",
    "AnalysisResult",
    "ConfigurationError",
    "Greeks",
    "OptionLeg",
    "OptionType",
    "Strategy",
    "StrategyLabel",
    "ValidationError",
    "analyze",
]
