"""Loaders that build strategies from YAML and CSV files."""

import csv
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..models.leg import DEFAULT_IMPLIED_VOLATILITY, OptionLeg
from ..models.strategy import Strategy
from ..utils.error_handling import DataValidationError, ValidationError

logger = logging.getLogger("options_analyzer.loaders")

LEG_FIELDS = ('strike', 'option_type', 'action', 'quantity', 'premium', 'implied_volatility', 'expiration')
REQUIRED_LEG_FIELDS = {'strike', 'option_type', 'action'}


def load_strategy_from_yaml(
    yaml_path: str | Path,
    default_volatility: float = DEFAULT_IMPLIED_VOLATILITY,
) -> Strategy:
    """Load a strategy from a YAML file.

    Expected YAML format:
        ticker: SPY
        spot_price: 150.0
        legs:
          - {strike: 150, option_type: call, action: buy, quantity: 1, premium: 5.0}
          - {strike: 160, option_type: call, action: sell, premium: 2.0, implied_volatility: 0.22}

    Args:
        yaml_path: Path to YAML file
        default_volatility: IV for legs that don't specify one

    Returns:
        Validated Strategy

    Raises:
        FileNotFoundError: If the file doesn't exist
        DataValidationError: If the file or any leg is invalid
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        logger.error("Strategy file not found: %s", yaml_path)
        raise FileNotFoundError(f"Strategy file not found: {yaml_path}")

    logger.info("Loading strategy from YAML: %s", yaml_path)

    try:
        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("Error parsing YAML file %s: %s", yaml_path, e)
        raise DataValidationError(f"Failed to parse {yaml_path}: {e}") from e

    if not isinstance(data, dict):
        raise DataValidationError(f"Strategy file {yaml_path} must contain a mapping")

    return strategy_from_dict(data, default_volatility=default_volatility)


def strategy_from_dict(
    data: Dict[str, Any],
    default_volatility: float = DEFAULT_IMPLIED_VOLATILITY,
) -> Strategy:
    """Build a Strategy from a plain dictionary.

    Raises:
        DataValidationError: If fields are missing or any leg is invalid
    """
    if 'spot_price' not in data:
        raise DataValidationError("Missing required field: spot_price")

    raw_legs = data.get('legs') or []
    if not isinstance(raw_legs, list):
        raise DataValidationError("legs must be a list")

    legs = []
    for index, raw in enumerate(raw_legs):
        if not isinstance(raw, dict):
            raise DataValidationError(f"Leg {index}: expected a mapping, got {raw!r}")
        try:
            legs.append(_parse_leg(raw, default_volatility))
        except (ValidationError, ValueError, TypeError) as e:
            raise DataValidationError(f"Leg {index}: {e}") from e

    try:
        strategy = Strategy(
            legs=tuple(legs),
            underlying_spot_price=_to_float(data['spot_price']),
            ticker=str(data.get('ticker', '')).strip().upper(),
        )
    except (ValidationError, ValueError, TypeError) as e:
        raise DataValidationError(str(e)) from e

    logger.info("Built strategy %r", strategy)
    return strategy


def load_legs_from_csv(
    csv_path: str | Path,
    default_volatility: float = DEFAULT_IMPLIED_VOLATILITY,
) -> List[OptionLeg]:
    """Load option legs from a CSV file.

    Expected CSV format:
        strike,option_type,action,quantity,premium,implied_volatility,expiration

    Only strike, option_type and action are required columns. Unlike a
    market-data load, a bad row is not skipped: dropping a leg silently
    would change the strategy being analyzed.

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        DataValidationError: If headers are missing or a row is invalid
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        logger.error("CSV file not found: %s", csv_path)
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    logger.info("Loading legs from CSV: %s", csv_path)

    legs = []
    with open(csv_path, 'r', newline='') as f:
        reader = csv.DictReader(f)

        if not REQUIRED_LEG_FIELDS.issubset(set(reader.fieldnames or [])):
            missing = REQUIRED_LEG_FIELDS - set(reader.fieldnames or [])
            logger.error("CSV missing required fields: %s", missing)
            raise DataValidationError(f"CSV missing required fields: {missing}")

        for row_num, row in enumerate(reader, start=2):  # Header is row 1
            fields = {key: value for key, value in row.items() if value not in (None, '')}
            try:
                legs.append(_parse_leg(fields, default_volatility))
            except (ValidationError, ValueError, TypeError) as e:
                logger.error("Invalid leg on row %d of %s: %s", row_num, csv_path.name, e)
                raise DataValidationError(f"Row {row_num} of {csv_path.name}: {e}") from e

    logger.info("Loaded %d legs from %s", len(legs), csv_path.name)
    return legs


def _parse_leg(raw: Dict[str, Any], default_volatility: float) -> OptionLeg:
    """Parse one leg mapping (YAML entry or CSV row) into an OptionLeg."""
    missing = REQUIRED_LEG_FIELDS - set(raw)
    if missing:
        raise DataValidationError(f"Missing required fields: {sorted(missing)}")

    unknown = set(raw) - set(LEG_FIELDS)
    if unknown:
        logger.warning("Ignoring unknown leg fields: %s", sorted(unknown))

    return OptionLeg(
        strike=_to_float(raw['strike']),
        option_type=str(raw['option_type']).strip().lower(),
        action=str(raw['action']).strip().lower(),
        quantity=_to_int(raw.get('quantity', 1)),
        premium=_to_float(raw.get('premium', 0.0)),
        implied_volatility=_to_float(raw.get('implied_volatility', default_volatility)),
        expiration=_parse_expiration(raw.get('expiration')),
    )


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    return float(value)


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"Quantity must be a whole number, got {value!r}")
    return int(number)


def _parse_expiration(value: Any) -> date | None:
    """Parse expiration date (supports ISO and MM/DD/YYYY)."""
    if value is None or isinstance(value, date):
        return value

    exp_str = str(value).strip()
    if not exp_str:
        return None
    try:
        return datetime.strptime(exp_str, '%Y-%m-%d').date()
    except ValueError:
        try:
            return datetime.strptime(exp_str, '%m/%d/%Y').date()
        except ValueError:
            raise ValueError(f"Invalid expiration date format: {exp_str}")
