"""Error types and guarded arithmetic for strategy analysis.

Validation failures are raised at construction time; everything downstream
of a validated Strategy is a total function and reports degenerate cases
through explicit sentinels instead of exceptions.
"""

import logging
import math
from numbers import Real
from typing import TypeVar

logger = logging.getLogger("options_analyzer.error_handling")

T = TypeVar('T')


def safe_divide(numerator: float, denominator: float, default: T = None) -> float | T:
    """Divide two numbers, returning default when the denominator is zero.

    Args:
        numerator: Numerator value
        denominator: Denominator value
        default: Sentinel returned on division by zero (None unless given)

    Returns:
        Result of division, or default if denominator is zero

    Example:
        >>> safe_divide(7.0, 3.5)
        2.0
        >>> safe_divide(7.0, 0.0) is None
        True
    """
    if denominator == 0:
        logger.debug("Division by zero: %s/%s, returning %s", numerator, denominator, default)
        return default
    return numerator / denominator


def require_finite(name: str, value: float) -> float:
    """Reject NaN/inf and non-numeric values.

    Raises:
        ValidationError: If value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value!r}")
    return float(value)


class AnalysisError(Exception):
    """Base exception for strategy analysis errors."""
    pass


class ValidationError(ValueError, AnalysisError):
    """Raised when a leg or strategy fails validation.

    Inherits from ValueError so callers can treat it as bad input.
    """
    pass


class DataValidationError(ValidationError):
    """Raised when a strategy file cannot be parsed into valid legs."""
    pass


class ConfigurationError(AnalysisError):
    """Raised when analysis configuration is invalid."""
    pass
