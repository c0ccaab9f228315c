"""Greeks calculation using the Black-Scholes model.

Per-leg closed-form Greeks and their signed, quantity-weighted aggregate
across a strategy. The normal CDF uses the Abramowitz-Stegun erf
approximation (max abs error ~1.5e-7) so results are reproducible without
a statistics backend.
"""

import logging
import math

from ..models.greeks import Greeks
from ..models.leg import OptionType
from ..models.strategy import Strategy

logger = logging.getLogger("options_analyzer.greeks")

# Abramowitz & Stegun 7.1.26
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

THETA_SCALE = 365.0   # per calendar day
VEGA_SCALE = 100.0    # per 1 vol point
RHO_SCALE = 100.0     # per 1 rate point


def erf(x: float) -> float:
    """Error function, Abramowitz-Stegun approximation."""
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)

    t = 1.0 / (1.0 + _P * x)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * math.exp(-x * x)

    return sign * y


def norm_cdf(x: float) -> float:
    """Standard normal cumulative distribution."""
    return 0.5 * (1.0 + erf(x / math.sqrt(2.0)))


def norm_pdf(x: float) -> float:
    """Standard normal density."""
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)


class BlackScholesGreeks:
    """Calculate option Greeks using the Black-Scholes model.

    Assumes European-style options with no dividends.
    """

    @staticmethod
    def calculate_all_greeks(
        spot: float,
        strike: float,
        time_to_expiry: float,
        rate: float,
        vol: float,
        option_type: OptionType | str,
    ) -> Greeks:
        """Calculate all Greeks for one option.

        Args:
            spot: Current underlying price
            strike: Strike price
            time_to_expiry: Time to expiration in years
            rate: Risk-free interest rate (annualized)
            vol: Implied volatility (annualized)
            option_type: 'call' or 'put'

        Returns:
            Greeks with theta per day, vega and rho per 1 point

        Note:
            At or past expiration (or with zero volatility) the formula is
            undefined; intrinsic delta and zero for everything else is
            returned instead.

        Example:
            >>> g = BlackScholesGreeks.calculate_all_greeks(
            >>>     spot=150, strike=150, time_to_expiry=30/365,
            >>>     rate=0.05, vol=0.20, option_type='call'
            >>> )
            >>> # g.delta ~0.54
        """
        option_type = OptionType(option_type)

        if time_to_expiry <= 0 or vol <= 0:
            logger.debug(
                "Degenerate Greeks input (T=%s, vol=%s) for strike %s, using expiration values",
                time_to_expiry, vol, strike
            )
            return BlackScholesGreeks.expiration_greeks(spot, strike, option_type)

        sqrt_t = math.sqrt(time_to_expiry)
        d1 = BlackScholesGreeks._d1(spot, strike, time_to_expiry, rate, vol)
        d2 = d1 - vol * sqrt_t

        pdf_d1 = norm_pdf(d1)
        discount = math.exp(-rate * time_to_expiry)
        decay = -(spot * pdf_d1 * vol) / (2 * sqrt_t)

        if option_type is OptionType.CALL:
            delta = norm_cdf(d1)
            theta = decay - rate * strike * discount * norm_cdf(d2)
            rho = strike * time_to_expiry * discount * norm_cdf(d2)
        else:
            delta = norm_cdf(d1) - 1
            theta = decay + rate * strike * discount * norm_cdf(-d2)
            rho = -strike * time_to_expiry * discount * norm_cdf(-d2)

        gamma = pdf_d1 / (spot * vol * sqrt_t)
        vega = spot * pdf_d1 * sqrt_t

        return Greeks(
            delta=delta,
            gamma=gamma,
            theta=theta / THETA_SCALE,
            vega=vega / VEGA_SCALE,
            rho=rho / RHO_SCALE,
        )

    @staticmethod
    def expiration_greeks(spot: float, strike: float, option_type: OptionType) -> Greeks:
        """Greeks of an expired option: a delta step, nothing else."""
        if option_type is OptionType.CALL:
            delta = 1.0 if spot > strike else 0.0
        else:
            delta = -1.0 if spot < strike else 0.0
        return Greeks(delta=delta)

    @staticmethod
    def _d1(spot: float, strike: float, time_to_expiry: float, rate: float, vol: float) -> float:
        """Calculate d1 term in Black-Scholes formula."""
        return (math.log(spot / strike) + (rate + 0.5 * vol ** 2) * time_to_expiry) / \
               (vol * math.sqrt(time_to_expiry))


def aggregate_greeks(
    strategy: Strategy,
    spot: float,
    time_to_expiry: float = 30 / 365,
    rate: float = 0.05,
    vol_override: float | None = None,
) -> Greeks:
    """Sum per-leg Greeks weighted by direction and quantity.

    Args:
        strategy: Strategy whose legs are evaluated
        spot: Underlying price to evaluate at
        time_to_expiry: Time to expiration in years (same for every leg)
        rate: Risk-free rate
        vol_override: Evaluate every leg at this volatility instead of its own IV

    Returns:
        Aggregate Greeks (zero for an empty strategy)
    """
    total = Greeks.zero()
    for leg in strategy.legs:
        vol = leg.implied_volatility if vol_override is None else vol_override
        leg_greeks = BlackScholesGreeks.calculate_all_greeks(
            spot=spot,
            strike=leg.strike,
            time_to_expiry=time_to_expiry,
            rate=rate,
            vol=vol,
            option_type=leg.option_type,
        )
        total = total + leg_greeks.scaled(leg.signed_quantity)

    return total
