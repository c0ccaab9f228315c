"""Tests for strategy loaders (YAML and CSV)."""

from datetime import date
from pathlib import Path

import pytest

from options_analyzer.data.loaders import (
    load_legs_from_csv,
    load_strategy_from_yaml,
    strategy_from_dict,
)
from options_analyzer.models.leg import Action, OptionType
from options_analyzer.utils.error_handling import DataValidationError

REPO_ROOT = Path(__file__).parents[2]


class TestStrategyFromDict:
    """Test suite for strategy_from_dict."""

    def test_minimal(self):
        strategy = strategy_from_dict({
            'spot_price': 100,
            'legs': [{'strike': 100, 'option_type': 'Call', 'action': 'BUY'}],
        })

        leg = strategy.legs[0]
        assert strategy.underlying_spot_price == 100.0
        assert leg.option_type is OptionType.CALL
        assert leg.action is Action.BUY
        assert leg.quantity == 1
        assert leg.premium == 0.0
        assert leg.implied_volatility == 0.20

    def test_default_volatility_applied(self):
        strategy = strategy_from_dict(
            {'spot_price': 100, 'legs': [{'strike': 100, 'option_type': 'put', 'action': 'sell'}]},
            default_volatility=0.35,
        )
        assert strategy.legs[0].implied_volatility == 0.35

    def test_ticker_normalized(self):
        strategy = strategy_from_dict({'spot_price': 100, 'ticker': ' spy '})
        assert strategy.ticker == "SPY"

    def test_no_legs_is_empty_strategy(self):
        assert strategy_from_dict({'spot_price': 100}).is_empty
        assert strategy_from_dict({'spot_price': 100, 'legs': None}).is_empty

    def test_missing_spot(self):
        with pytest.raises(DataValidationError, match="spot_price"):
            strategy_from_dict({'legs': []})

    def test_invalid_spot(self):
        with pytest.raises(DataValidationError):
            strategy_from_dict({'spot_price': 0})

    def test_legs_not_a_list(self):
        with pytest.raises(DataValidationError, match="legs must be a list"):
            strategy_from_dict({'spot_price': 100, 'legs': {'strike': 100}})

    def test_leg_not_a_mapping(self):
        with pytest.raises(DataValidationError, match="Leg 0"):
            strategy_from_dict({'spot_price': 100, 'legs': ["150C"]})

    def test_invalid_leg_names_index(self):
        legs = [
            {'strike': 100, 'option_type': 'call', 'action': 'buy'},
            {'strike': 100, 'option_type': 'call', 'action': 'buy', 'implied_volatility': 6.0},
        ]
        with pytest.raises(DataValidationError, match="Leg 1"):
            strategy_from_dict({'spot_price': 100, 'legs': legs})

    def test_missing_leg_field(self):
        with pytest.raises(DataValidationError, match="action"):
            strategy_from_dict({'spot_price': 100, 'legs': [{'strike': 100, 'option_type': 'call'}]})

    def test_boolean_quantity_rejected(self):
        legs = [{'strike': 100, 'option_type': 'call', 'action': 'buy', 'quantity': True}]
        with pytest.raises(DataValidationError):
            strategy_from_dict({'spot_price': 100, 'legs': legs})

    def test_unknown_field_warns(self, caplog):
        legs = [{'strike': 100, 'option_type': 'call', 'action': 'buy', 'delta': 0.5}]
        strategy = strategy_from_dict({'spot_price': 100, 'legs': legs})

        assert len(strategy) == 1
        assert "Ignoring unknown leg fields" in caplog.text


class TestLoadStrategyFromYaml:
    """Test suite for YAML strategy files."""

    def test_shipped_example(self):
        strategy = load_strategy_from_yaml(REPO_ROOT / "strategies" / "bull_call_spread.yaml")

        assert strategy.ticker == "SPY"
        assert strategy.underlying_spot_price == 150.0
        assert [leg.strike for leg in strategy.legs] == [150.0, 160.0]
        assert strategy.legs[0].expiration == date(2025, 1, 17)
        assert strategy.net_premium == pytest.approx(3.0)

    def test_string_expiration(self, tmp_path):
        path = tmp_path / "s.yaml"
        path.write_text(
            "spot_price: 100\n"
            "legs:\n"
            "  - {strike: 100, option_type: put, action: buy, expiration: '03/21/2025'}\n"
        )
        assert load_strategy_from_yaml(path).legs[0].expiration == date(2025, 3, 21)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_strategy_from_yaml(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("legs: [unclosed\n")
        with pytest.raises(DataValidationError, match="Failed to parse"):
            load_strategy_from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(DataValidationError, match="mapping"):
            load_strategy_from_yaml(path)


class TestLoadLegsFromCsv:
    """Test suite for CSV leg files."""

    def _write(self, tmp_path, text):
        path = tmp_path / "legs.csv"
        path.write_text(text)
        return path

    def test_full_columns(self, tmp_path):
        path = self._write(
            tmp_path,
            "strike,option_type,action,quantity,premium,implied_volatility,expiration\n"
            "95,put,buy,2,1.25,0.30,2025-03-21\n"
            "105,call,sell,2,1.10,0.25,03/21/2025\n",
        )
        legs = load_legs_from_csv(path)

        assert len(legs) == 2
        assert legs[0].quantity == 2
        assert legs[0].implied_volatility == 0.30
        assert legs[0].expiration == legs[1].expiration == date(2025, 3, 21)
        assert legs[1].action is Action.SELL

    def test_blank_optional_fields_use_defaults(self, tmp_path):
        path = self._write(
            tmp_path,
            "strike,option_type,action,quantity,premium,implied_volatility\n"
            "100,call,buy,,,\n",
        )
        leg = load_legs_from_csv(path, default_volatility=0.4)[0]

        assert leg.quantity == 1
        assert leg.premium == 0.0
        assert leg.implied_volatility == 0.4

    def test_whole_float_quantity(self, tmp_path):
        path = self._write(tmp_path, "strike,option_type,action,quantity\n100,call,buy,3.0\n")
        assert load_legs_from_csv(path)[0].quantity == 3

    def test_fractional_quantity_rejected(self, tmp_path):
        path = self._write(tmp_path, "strike,option_type,action,quantity\n100,call,buy,1.5\n")
        with pytest.raises(DataValidationError, match="Row 2"):
            load_legs_from_csv(path)

    def test_missing_columns(self, tmp_path):
        path = self._write(tmp_path, "strike,option_type\n100,call\n")
        with pytest.raises(DataValidationError, match="missing required fields"):
            load_legs_from_csv(path)

    def test_bad_row_not_skipped(self, tmp_path):
        path = self._write(
            tmp_path,
            "strike,option_type,action,premium\n"
            "100,call,buy,2.0\n"
            "100,call,buy,-1.0\n",
        )
        with pytest.raises(DataValidationError, match="Row 3 of legs.csv"):
            load_legs_from_csv(path)

    def test_bad_expiration(self, tmp_path):
        path = self._write(tmp_path, "strike,option_type,action,expiration\n100,call,buy,next friday\n")
        with pytest.raises(DataValidationError, match="expiration"):
            load_legs_from_csv(path)

    def test_empty_file_body(self, tmp_path):
        path = self._write(tmp_path, "strike,option_type,action\n")
        assert load_legs_from_csv(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_legs_from_csv(tmp_path / "missing.csv")
