"""Model constants for strategy analysis.

Every fixed number the analytics use (rate, horizon, sweep bounds, trial
count, ...) is a field here and is passed explicitly into each component.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from ..utils.error_handling import ConfigurationError

logger = logging.getLogger("options_analyzer.config")

DAYS_PER_YEAR = 365.0


class AnalysisConfig:
    """Configuration for the analysis engine."""

    def __init__(
        self,
        risk_free_rate: float = 0.05,
        horizon_days: int = 30,
        default_volatility: float = 0.20,
        sweep_lower: float = 50.0,
        sweep_upper: float = 250.0,
        profit_loss_step: float = 1.0,
        breakeven_step: float = 0.5,
        breakeven_tolerance: float = 0.01,
        deduplicate_breakevens: bool = False,
        spot_relative_sweep: bool = False,
        spot_lower_multiplier: float = 0.3,
        spot_upper_multiplier: float = 3.0,
        mc_volatility: float = 0.20,
        num_simulations: int = 1000,
        vol_min: float = 0.10,
        vol_max: float = 0.50,
        vol_step: float = 0.05,
        curve_lower_multiplier: float = 0.7,
        curve_upper_multiplier: float = 1.3,
        curve_steps: int = 50,
        loss_normalizer: float = 1000.0,
        risk_reward_cap: float = 3.0,
    ):
        """Initialize analysis configuration.

        Args:
            risk_free_rate: Annualized risk-free rate for Black-Scholes
            horizon_days: Fixed days-to-expiry used for Greeks and Monte Carlo
            default_volatility: IV assumed for legs built without one
            sweep_lower: Lower bound of the absolute price sweep
            sweep_upper: Upper bound of the absolute price sweep
            profit_loss_step: Price step for max profit/loss sweep
            breakeven_step: Price step for breakeven sweep
            breakeven_tolerance: |payoff| below this counts as breakeven
            deduplicate_breakevens: Collapse runs of adjacent breakeven samples
            spot_relative_sweep: Sweep [lower*spot, upper*spot] instead of absolute bounds
            spot_lower_multiplier: Lower multiplier for spot-relative sweep
            spot_upper_multiplier: Upper multiplier for spot-relative sweep
            mc_volatility: Volatility of the Monte Carlo price perturbation
            num_simulations: Monte Carlo trial count
            vol_min: First volatility of the vega projection
            vol_max: Last volatility of the vega projection (inclusive)
            vol_step: Volatility increment of the vega projection
            curve_lower_multiplier: Payoff curve lower bound as multiple of spot
            curve_upper_multiplier: Payoff curve upper bound as multiple of spot
            curve_steps: Number of payoff curve intervals (points = steps + 1)
            loss_normalizer: Dollar loss that contributes 3 risk points
            risk_reward_cap: Cap applied to risk/reward in the risk score
        """
        self.risk_free_rate = risk_free_rate
        self.horizon_days = horizon_days
        self.default_volatility = default_volatility

        self.sweep_lower = sweep_lower
        self.sweep_upper = sweep_upper
        self.profit_loss_step = profit_loss_step
        self.breakeven_step = breakeven_step
        self.breakeven_tolerance = breakeven_tolerance
        self.deduplicate_breakevens = deduplicate_breakevens
        self.spot_relative_sweep = spot_relative_sweep
        self.spot_lower_multiplier = spot_lower_multiplier
        self.spot_upper_multiplier = spot_upper_multiplier

        self.mc_volatility = mc_volatility
        self.num_simulations = num_simulations

        self.vol_min = vol_min
        self.vol_max = vol_max
        self.vol_step = vol_step

        self.curve_lower_multiplier = curve_lower_multiplier
        self.curve_upper_multiplier = curve_upper_multiplier
        self.curve_steps = curve_steps

        self.loss_normalizer = loss_normalizer
        self.risk_reward_cap = risk_reward_cap

        self._validate()

    def _validate(self) -> None:
        if self.horizon_days <= 0:
            raise ConfigurationError(f"horizon_days must be positive, got {self.horizon_days}")
        if not 0 < self.default_volatility <= 5:
            raise ConfigurationError(f"default_volatility must be in (0, 5], got {self.default_volatility}")
        if self.sweep_lower >= self.sweep_upper:
            raise ConfigurationError(
                f"sweep_lower {self.sweep_lower} must be below sweep_upper {self.sweep_upper}"
            )
        if self.spot_lower_multiplier >= self.spot_upper_multiplier:
            raise ConfigurationError("spot_lower_multiplier must be below spot_upper_multiplier")
        if self.profit_loss_step <= 0 or self.breakeven_step <= 0:
            raise ConfigurationError("Sweep steps must be positive")
        if self.breakeven_tolerance <= 0:
            raise ConfigurationError("breakeven_tolerance must be positive")
        if self.num_simulations <= 0:
            raise ConfigurationError(f"num_simulations must be positive, got {self.num_simulations}")
        if self.mc_volatility < 0:
            raise ConfigurationError("mc_volatility must be non-negative")
        if self.vol_min <= 0 or self.vol_min > self.vol_max or self.vol_step <= 0:
            raise ConfigurationError(
                f"Invalid volatility grid: min={self.vol_min} max={self.vol_max} step={self.vol_step}"
            )
        if self.curve_lower_multiplier >= self.curve_upper_multiplier or self.curve_steps <= 0:
            raise ConfigurationError("Invalid payoff curve range")
        if self.loss_normalizer <= 0 or self.risk_reward_cap <= 0:
            raise ConfigurationError("Risk normalization values must be positive")

    @property
    def time_to_expiry(self) -> float:
        """Fixed horizon in years."""
        return self.horizon_days / DAYS_PER_YEAR

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "AnalysisConfig":
        """Create AnalysisConfig from dictionary (e.g., from YAML).

        Args:
            config: Dictionary with optional sections greeks, sweep,
                monte_carlo, sensitivity, payoff_curve, risk

        Returns:
            AnalysisConfig instance
        """
        greeks = _section(config, 'greeks')
        sweep = _section(config, 'sweep')
        mc = _section(config, 'monte_carlo')
        sens = _section(config, 'sensitivity')
        curve = _section(config, 'payoff_curve')
        risk = _section(config, 'risk')

        return cls(
            risk_free_rate=greeks.get('risk_free_rate', 0.05),
            horizon_days=greeks.get('horizon_days', 30),
            default_volatility=greeks.get('default_volatility', 0.20),
            sweep_lower=sweep.get('lower', 50.0),
            sweep_upper=sweep.get('upper', 250.0),
            profit_loss_step=sweep.get('profit_loss_step', 1.0),
            breakeven_step=sweep.get('breakeven_step', 0.5),
            breakeven_tolerance=sweep.get('breakeven_tolerance', 0.01),
            deduplicate_breakevens=sweep.get('deduplicate_breakevens', False),
            spot_relative_sweep=sweep.get('spot_relative', False),
            spot_lower_multiplier=sweep.get('spot_lower_multiplier', 0.3),
            spot_upper_multiplier=sweep.get('spot_upper_multiplier', 3.0),
            mc_volatility=mc.get('volatility', 0.20),
            num_simulations=mc.get('num_simulations', 1000),
            vol_min=sens.get('vol_min', 0.10),
            vol_max=sens.get('vol_max', 0.50),
            vol_step=sens.get('vol_step', 0.05),
            curve_lower_multiplier=curve.get('lower_multiplier', 0.7),
            curve_upper_multiplier=curve.get('upper_multiplier', 1.3),
            curve_steps=curve.get('steps', 50),
            loss_normalizer=risk.get('loss_normalizer', 1000.0),
            risk_reward_cap=risk.get('risk_reward_cap', 3.0),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AnalysisConfig":
        """Load AnalysisConfig from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigurationError: If the YAML is not a mapping or values are invalid
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        logger.info("Loaded analysis config from %s", path)
        return cls.from_dict(data)

    def __repr__(self) -> str:
        return (f"AnalysisConfig(r={self.risk_free_rate}, T={self.horizon_days}d, "
                f"sweep=[{self.sweep_lower}, {self.sweep_upper}]"
                f"{' spot-relative' if self.spot_relative_sweep else ''}, "
                f"n_sims={self.num_simulations})")


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    """One config section; an empty `name:` key in YAML loads as None."""
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping, got {section!r}")
    return section
