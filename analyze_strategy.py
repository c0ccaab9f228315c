#!/usr/bin/env python3
"""Analyze an option strategy from a YAML or CSV file.

Usage:
    python3 analyze_strategy.py strategies/bull_call_spread.yaml
    python3 analyze_strategy.py legs.csv --spot 150 --ticker SPY
    python3 analyze_strategy.py strategies/bull_call_spread.yaml --seed 42 --export-dir out/
"""

import argparse
import sys
from pathlib import Path

from options_analyzer.analytics.analyzer import AnalysisEngine
from options_analyzer.analytics.config import AnalysisConfig
from options_analyzer.data.loaders import load_legs_from_csv, load_strategy_from_yaml
from options_analyzer.models.strategy import Strategy
from options_analyzer.output.console import print_analysis, print_header, print_legs
from options_analyzer.output.frames import export_csv
from options_analyzer.utils.error_handling import AnalysisError
from options_analyzer.utils.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(
        description='Analyze an option strategy: payoff, Greeks, probability of profit, risk',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a strategy file
  python3 analyze_strategy.py strategies/bull_call_spread.yaml

  # Legs from CSV (spot price required)
  python3 analyze_strategy.py legs.csv --spot 150 --ticker SPY

  # Reproducible probability of profit, custom constants, CSV export
  python3 analyze_strategy.py strategy.yaml --seed 42 \\
      --config analysis.yaml --export-dir out/
        """
    )

    parser.add_argument('strategy_file', help='Strategy YAML file or legs CSV file')
    parser.add_argument('--spot', type=float, default=None,
                        help='Underlying spot price (required for CSV, overrides YAML)')
    parser.add_argument('--ticker', default=None, help='Ticker label (CSV input)')
    parser.add_argument('--config', default=None, help='Analysis config YAML')
    parser.add_argument('--seed', type=int, default=None,
                        help='Monte Carlo seed for reproducible results')
    parser.add_argument('--export-dir', default=None,
                        help='Write summary and series CSVs to this directory')
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', default=None, help='Optional log file')

    args = parser.parse_args()

    setup_logging(log_level=args.log_level, log_file=args.log_file)

    try:
        config = AnalysisConfig.from_yaml(args.config) if args.config else AnalysisConfig()
        strategy = _load_strategy(args, config)
    except FileNotFoundError as e:
        print(f"❌ Error: {e}")
        return 1
    except AnalysisError as e:
        print(f"❌ Invalid input: {e}")
        return 1

    engine = AnalysisEngine(config)
    result = engine.analyze(strategy, rng_seed=args.seed)

    print_header(strategy)
    print_legs(strategy)
    print_analysis(result)

    if args.export_dir:
        written = export_csv(result, args.export_dir)
        print(f"📁 Exported {len(written)} files to {args.export_dir}")

    return 0


def _load_strategy(args: argparse.Namespace, config: AnalysisConfig) -> Strategy:
    path = Path(args.strategy_file)

    if path.suffix.lower() == '.csv':
        if args.spot is None:
            raise SystemExit("❌ Error: --spot is required for CSV input")
        legs = load_legs_from_csv(path, default_volatility=config.default_volatility)
        return Strategy(legs=tuple(legs), underlying_spot_price=args.spot, ticker=args.ticker or "")

    strategy = load_strategy_from_yaml(path, default_volatility=config.default_volatility)
    if args.spot is not None:
        strategy = strategy.with_spot(args.spot)
    return strategy


if __name__ == '__main__':
    sys.exit(main())
