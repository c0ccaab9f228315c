"""Console output formatter for strategy analysis results."""

from ..models.analysis import AnalysisResult
from ..models.strategy import Strategy


def print_header(strategy: Strategy):
    """Print analysis session header.

    Args:
        strategy: Strategy being analyzed
    """
    print("\n" + "=" * 80)
    print(f"  OPTION STRATEGY ANALYZER - {strategy.ticker or 'N/A'}")
    print(f"  Spot Price: ${strategy.underlying_spot_price:.2f}")
    print("=" * 80)


def print_legs(strategy: Strategy):
    """Print the strategy's legs as a table."""
    if strategy.is_empty:
        print("No legs in strategy.")
        return

    print("\nLegs:")
    print("-" * 80)
    header = (
        f"{'#':>3} {'Action':^6} {'Qty':>4} {'Type':^5} {'Strike':>9} "
        f"{'Premium':>8} {'IV':>7} {'Cost':>9} {'Expiration':^12}"
    )
    print(header)
    print("-" * 80)

    for index, leg in enumerate(strategy.legs, start=1):
        exp_str = leg.expiration.strftime('%Y-%m-%d') if leg.expiration else "-"
        row = (
            f"{index:>3} {leg.action.value.upper():^6} {leg.quantity:>4} "
            f"{leg.option_type.value.upper():^5} {leg.strike:>9.2f} "
            f"{leg.premium:>8.2f} {leg.implied_volatility:>7.2%} "
            f"{leg.cost:>9.2f} {exp_str:^12}"
        )
        print(row)

    print("-" * 80)
    net = strategy.net_premium
    print(f"  Net premium: ${abs(net):.2f} {'debit' if net >= 0 else 'credit'}")


def print_analysis(result: AnalysisResult):
    """Print detailed analytics for a strategy.

    Args:
        result: AnalysisResult to display
    """
    label = result.strategy_label.value if result.strategy_label else "N/A"

    print(f"\n{'=' * 80}")
    print(f"{result.ticker or 'Strategy'}: {label}")
    print(f"{'=' * 80}")

    # Overview
    rr = f"{result.risk_reward_ratio:.2f}" if result.risk_reward_ratio is not None else "undefined"
    print(f"\nOverview:")
    print(f"  Max Profit:          ${result.max_profit:.2f}")
    print(f"  Max Loss:            ${result.max_loss:.2f}")
    print(f"  Risk/Reward:         {rr}")
    print(f"  Profit Probability:  {result.probability_of_profit:.1f}%")
    print(f"  Risk Score:          {result.risk_score:.1f}/10")

    if result.breakeven_prices:
        breakevens = ", ".join(f"${price:.2f}" for price in result.breakeven_prices)
        print(f"  Breakevens:          {breakevens}")
    else:
        print(f"  Breakevens:          none in sweep range")

    # Greeks
    g = result.greeks
    print(f"\nGreeks:")
    print(f"  Delta:  {g.delta:>10.4f}   (price sensitivity)")
    print(f"  Gamma:  {g.gamma:>10.4f}   (rate of change of delta)")
    print(f"  Theta:  {g.theta:>10.4f}   (time decay per day)")
    print(f"  Vega:   {g.vega:>10.4f}   (per 1 vol point)")
    print(f"  Rho:    {g.rho:>10.4f}   (per 1 rate point)")

    # Sensitivities, abbreviated
    if len(result.time_decay_series) >= 2:
        # Theta is zero at expiry, so report the last day before it
        first, last = result.time_decay_series[0], result.time_decay_series[-2]
        print(f"\nTime Decay:")
        print(f"  Theta at day {first.days_elapsed}:  {first.theta:.4f}")
        print(f"  Theta at day {last.days_elapsed}: {last.theta:.4f}")

    if result.volatility_impact_series:
        print(f"\nVolatility Impact:")
        for point in result.volatility_impact_series:
            print(f"  IV {point.volatility_pct:5.1f}%  vega {point.vega:>9.4f}")

    print(f"{'=' * 80}\n")
