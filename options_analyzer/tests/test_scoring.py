"""Tests for risk scoring and strategy classification."""

import pytest

from options_analyzer.models.analysis import StrategyLabel
from options_analyzer.models.leg import OptionLeg
from options_analyzer.scoring.classifier import classify_strategy
from options_analyzer.scoring.risk import calculate_risk_score, risk_reward_ratio


def _leg(option_type, action, strike=100.0):
    return OptionLeg(strike=strike, option_type=option_type, action=action, premium=1.0)


class TestRiskRewardRatio:
    """Test suite for the max profit / max loss ratio."""

    def test_bull_call_spread_ratio(self):
        assert risk_reward_ratio(7.0, -3.0) == pytest.approx(7.0 / 3.0)

    def test_sign_of_loss_ignored(self):
        assert risk_reward_ratio(10.0, -5.0) == risk_reward_ratio(10.0, 5.0) == 2.0

    def test_zero_loss_undefined(self):
        assert risk_reward_ratio(2.0, 0.0) is None

    def test_zero_profit(self):
        assert risk_reward_ratio(0.0, -2.0) == 0.0


class TestRiskScore:
    """Test suite for calculate_risk_score."""

    def test_formula(self):
        # 1000/1000*3 + (1 - 0.5)*4 + (2 - 1)*2
        assert calculate_risk_score(-1000.0, 50.0, 1.0) == pytest.approx(7.0)

    def test_formula_partial_terms(self):
        # 0.5*3 + 0.75*4 + 1.5*2
        assert calculate_risk_score(-500.0, 25.0, 0.5) == pytest.approx(7.5)

    def test_favorable_ratio_contributes_nothing(self):
        # Any ratio >= 2 zeroes the ratio term
        assert calculate_risk_score(-5.0, 100.0, 2.5) == pytest.approx(0.015)

    def test_ratio_capped(self):
        assert calculate_risk_score(-5.0, 40.0, 19.0) == calculate_risk_score(-5.0, 40.0, 3.0)

    def test_undefined_ratio_treated_as_cap(self):
        assert calculate_risk_score(0.0, 60.0, None) == calculate_risk_score(0.0, 60.0, 3.0)

    def test_clamped_to_ten(self):
        assert calculate_risk_score(-5000.0, 0.0, 0.0) == 10.0

    def test_best_case_zero(self):
        assert calculate_risk_score(0.0, 100.0, None) == 0.0

    def test_no_loss_zero_probability(self):
        """Only the probability term contributes."""
        assert calculate_risk_score(0.0, 0.0, None) == pytest.approx(4.0)

    def test_custom_normalizer(self):
        assert calculate_risk_score(-100.0, 100.0, 3.0, loss_normalizer=100.0) == pytest.approx(3.0)

    @pytest.mark.parametrize("max_loss", [0.0, -3.0, -250.0, -10_000.0])
    @pytest.mark.parametrize("pop", [0.0, 37.5, 100.0])
    @pytest.mark.parametrize("ratio", [None, 0.0, 1.2, 50.0])
    def test_always_in_range(self, max_loss, pop, ratio):
        assert 0.0 <= calculate_risk_score(max_loss, pop, ratio) <= 10.0


class TestClassifier:
    """Test suite for classify_strategy."""

    @pytest.mark.parametrize("option_type,action,expected", [
        ("call", "buy", StrategyLabel.LONG_CALL),
        ("put", "buy", StrategyLabel.LONG_PUT),
        ("call", "sell", StrategyLabel.SHORT_CALL),
        ("put", "sell", StrategyLabel.SHORT_PUT),
    ])
    def test_single_leg(self, option_type, action, expected):
        assert classify_strategy([_leg(option_type, action)]) is expected

    def test_two_calls(self, bull_call_spread):
        assert classify_strategy(bull_call_spread.legs) is StrategyLabel.CALL_SPREAD

    def test_two_calls_any_direction(self):
        legs = [_leg("call", "sell", 100.0), _leg("call", "sell", 110.0)]
        assert classify_strategy(legs) is StrategyLabel.CALL_SPREAD

    def test_two_puts(self):
        legs = [_leg("put", "buy", 100.0), _leg("put", "sell", 90.0)]
        assert classify_strategy(legs) is StrategyLabel.PUT_SPREAD

    def test_call_and_put(self, long_straddle):
        assert classify_strategy(long_straddle.legs) is StrategyLabel.STRADDLE_STRANGLE

    def test_strangle_strikes_ignored(self):
        legs = [_leg("call", "sell", 110.0), _leg("put", "sell", 90.0)]
        assert classify_strategy(legs) is StrategyLabel.STRADDLE_STRANGLE

    def test_three_or_more_legs_complex(self):
        condor = [
            _leg("put", "buy", 90.0),
            _leg("put", "sell", 95.0),
            _leg("call", "sell", 105.0),
            _leg("call", "buy", 110.0),
        ]
        assert classify_strategy(condor[:3]) is StrategyLabel.COMPLEX
        assert classify_strategy(condor) is StrategyLabel.COMPLEX

    def test_empty(self):
        assert classify_strategy([]) is None
        assert classify_strategy(()) is None
