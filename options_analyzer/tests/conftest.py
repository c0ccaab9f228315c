"""Shared strategy fixtures.

SPY @ 150 throughout:
- Long call: buy 150C @ 5.00
- Bull call spread: buy 150C @ 5.00, sell 160C @ 2.00 (net debit 3.00)
- Long straddle: buy 150C @ 5.00, buy 150P @ 5.00 (net debit 10.00)
"""

from datetime import date

import pytest

from options_analyzer.models.leg import OptionLeg
from options_analyzer.models.strategy import Strategy

SPOT = 150.0
EXPIRATION = date(2025, 1, 17)


@pytest.fixture
def long_call_leg():
    return OptionLeg(
        strike=150.0,
        option_type="call",
        action="buy",
        quantity=1,
        premium=5.0,
        implied_volatility=0.20,
        expiration=EXPIRATION,
    )


@pytest.fixture
def short_call_leg():
    return OptionLeg(
        strike=160.0,
        option_type="call",
        action="sell",
        quantity=1,
        premium=2.0,
        implied_volatility=0.20,
        expiration=EXPIRATION,
    )


@pytest.fixture
def long_put_leg():
    return OptionLeg(
        strike=150.0,
        option_type="put",
        action="buy",
        quantity=1,
        premium=5.0,
        implied_volatility=0.20,
        expiration=EXPIRATION,
    )


@pytest.fixture
def long_call(long_call_leg):
    return Strategy(legs=(long_call_leg,), underlying_spot_price=SPOT, ticker="SPY")


@pytest.fixture
def bull_call_spread(long_call_leg, short_call_leg):
    return Strategy(legs=(long_call_leg, short_call_leg), underlying_spot_price=SPOT, ticker="SPY")


@pytest.fixture
def long_straddle(long_call_leg, long_put_leg):
    return Strategy(legs=(long_call_leg, long_put_leg), underlying_spot_price=SPOT, ticker="SPY")


@pytest.fixture
def empty_strategy():
    return Strategy(legs=(), underlying_spot_price=SPOT, ticker="SPY")
