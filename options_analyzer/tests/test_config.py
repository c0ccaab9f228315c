"""Tests for AnalysisConfig."""

from pathlib import Path

import pytest

from options_analyzer.analytics.config import AnalysisConfig
from options_analyzer.utils.error_handling import ConfigurationError

REPO_ROOT = Path(__file__).parents[2]


class TestAnalysisConfig:
    """Test suite for configuration defaults and validation."""

    def test_defaults(self):
        config = AnalysisConfig()

        assert config.risk_free_rate == 0.05
        assert config.horizon_days == 30
        assert (config.sweep_lower, config.sweep_upper) == (50.0, 250.0)
        assert config.profit_loss_step == 1.0
        assert config.breakeven_step == 0.5
        assert config.breakeven_tolerance == 0.01
        assert config.mc_volatility == 0.20
        assert config.num_simulations == 1000
        assert (config.vol_min, config.vol_max, config.vol_step) == (0.10, 0.50, 0.05)
        assert config.spot_relative_sweep is False
        assert config.deduplicate_breakevens is False

    def test_time_to_expiry(self):
        assert AnalysisConfig().time_to_expiry == 30 / 365
        assert AnalysisConfig(horizon_days=365).time_to_expiry == 1.0

    @pytest.mark.parametrize("kwargs", [
        {'horizon_days': 0},
        {'default_volatility': 0.0},
        {'default_volatility': 5.5},
        {'sweep_lower': 250.0, 'sweep_upper': 50.0},
        {'spot_lower_multiplier': 3.0, 'spot_upper_multiplier': 0.3},
        {'profit_loss_step': 0.0},
        {'breakeven_step': -0.5},
        {'breakeven_tolerance': 0.0},
        {'num_simulations': 0},
        {'mc_volatility': -0.1},
        {'vol_min': 0.0},
        {'vol_min': 0.6, 'vol_max': 0.5},
        {'vol_step': 0.0},
        {'curve_lower_multiplier': 1.3, 'curve_upper_multiplier': 0.7},
        {'curve_steps': 0},
        {'loss_normalizer': 0.0},
        {'risk_reward_cap': -1.0},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ConfigurationError):
            AnalysisConfig(**kwargs)

    def test_zero_mc_volatility_allowed(self):
        assert AnalysisConfig(mc_volatility=0.0).mc_volatility == 0.0

    def test_from_dict_sections(self):
        config = AnalysisConfig.from_dict({
            'greeks': {'risk_free_rate': 0.03, 'horizon_days': 45},
            'sweep': {'spot_relative': True, 'breakeven_step': 0.25},
            'monte_carlo': {'volatility': 0.3, 'num_simulations': 5000},
            'sensitivity': {'vol_max': 0.8},
            'payoff_curve': {'steps': 100},
            'risk': {'risk_reward_cap': 2.5},
        })

        assert config.risk_free_rate == 0.03
        assert config.horizon_days == 45
        assert config.spot_relative_sweep is True
        assert config.breakeven_step == 0.25
        assert config.mc_volatility == 0.3
        assert config.num_simulations == 5000
        assert config.vol_max == 0.8
        assert config.curve_steps == 100
        assert config.risk_reward_cap == 2.5
        # Untouched values keep their defaults
        assert config.sweep_lower == 50.0

    @pytest.mark.parametrize("section", ['greeks', 'sweep', 'monte_carlo', 'sensitivity', 'payoff_curve', 'risk'])
    def test_null_section_uses_defaults(self, section):
        config = AnalysisConfig.from_dict({section: None})
        assert vars(config) == vars(AnalysisConfig())

    @pytest.mark.parametrize("value", [0.05, "fast", [1, 2]])
    def test_non_mapping_section_rejected(self, value):
        with pytest.raises(ConfigurationError, match="greeks"):
            AnalysisConfig.from_dict({'greeks': value})

    def test_yaml_with_empty_section(self, tmp_path):
        path = tmp_path / "partial.yaml"
        path.write_text("greeks:\nmonte_carlo:\n  num_simulations: 500\n")

        config = AnalysisConfig.from_yaml(path)

        assert config.risk_free_rate == 0.05
        assert config.num_simulations == 500

    def test_from_empty_dict(self):
        assert repr(AnalysisConfig.from_dict({})) == repr(AnalysisConfig())

    def test_shipped_config_matches_defaults(self):
        config = AnalysisConfig.from_yaml(REPO_ROOT / "config" / "analysis.yaml")
        assert vars(config) == vars(AnalysisConfig())

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert AnalysisConfig.from_yaml(path).num_simulations == 1000

    def test_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n")
        with pytest.raises(ConfigurationError):
            AnalysisConfig.from_yaml(path)

    def test_missing_yaml(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AnalysisConfig.from_yaml(tmp_path / "missing.yaml")

    def test_repr(self):
        assert "spot-relative" in repr(AnalysisConfig(spot_relative_sweep=True))
        assert "spot-relative" not in repr(AnalysisConfig())
