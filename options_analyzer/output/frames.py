"""pandas views of analysis series for charting and export."""

from pathlib import Path
from typing import Dict

import pandas as pd

from ..models.analysis import AnalysisResult


def payoff_frame(result: AnalysisResult) -> pd.DataFrame:
    """Payoff curve as a DataFrame with columns price, payoff."""
    return pd.DataFrame(
        [(p.price, p.payoff) for p in result.payoff_curve],
        columns=['price', 'payoff'],
    )


def time_decay_frame(result: AnalysisResult) -> pd.DataFrame:
    """Time decay series with columns days_elapsed, theta."""
    return pd.DataFrame(
        [(p.days_elapsed, p.theta) for p in result.time_decay_series],
        columns=['days_elapsed', 'theta'],
    )


def volatility_impact_frame(result: AnalysisResult) -> pd.DataFrame:
    """Volatility impact series with columns volatility_pct, vega."""
    return pd.DataFrame(
        [(p.volatility_pct, p.vega) for p in result.volatility_impact_series],
        columns=['volatility_pct', 'vega'],
    )


def summary_frame(result: AnalysisResult) -> pd.DataFrame:
    """One-row summary of scalar metrics and aggregate Greeks."""
    row = {
        'ticker': result.ticker,
        'spot_price': result.spot_price,
        'strategy': result.strategy_label.value if result.strategy_label else None,
        'max_profit': result.max_profit,
        'max_loss': result.max_loss,
        'risk_reward': result.risk_reward_ratio,
        'probability_of_profit': result.probability_of_profit,
        'risk_score': result.risk_score,
        'net_premium': result.net_premium,
        'breakevens': ";".join(f"{price:g}" for price in result.breakeven_prices),
    }
    row.update(result.greeks.as_dict())
    return pd.DataFrame([row])


def export_csv(result: AnalysisResult, output_dir: str | Path) -> Dict[str, Path]:
    """Write summary and series CSVs to output_dir.

    Returns:
        Mapping of frame name to written path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    frames = {
        'summary': summary_frame(result),
        'payoff': payoff_frame(result),
        'time_decay': time_decay_frame(result),
        'volatility_impact': volatility_impact_frame(result),
    }

    prefix = result.ticker.lower() or "strategy"
    written = {}
    for name, frame in frames.items():
        path = output_dir / f"{prefix}_{name}.csv"
        frame.to_csv(path, index=False)
        written[name] = path

    return written
