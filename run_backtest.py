#!/usr/bin/env python3
"""
Run a crossover backtest on a CSV price file.

Usage:
    python run_backtest.py --data prices.csv                 # Defaults (or .env values)
    python run_backtest.py -d prices.csv --ma-period 50      # Override single parameters
    python run_backtest.py -d prices.csv --macd 8 21 5       # MACD fast/slow/signal
    python run_backtest.py --interactive                     # Prompt for file and parameters
    python run_backtest.py -d prices.csv --json              # Machine-readable output

Strategy:
    Enter LONG when close > SMA, MACD crosses above its signal line and
    RSI < overbought threshold. Exit on a bearish MACD crossover or on the
    last bar of the data.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import questionary
from questionary import Style

from backtester.backtest import run_backtest
from backtester.core.config import StrategyConfig
from backtester.simulation.historical_source import HistoricalDataSource
from backtester.ui import render_result

logger = logging.getLogger("run_backtest")

# Custom style for questionary prompts
MENU_STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "fg:white bold"),
        ("answer", "fg:green bold"),
    ]
)


def _positive_int(value: str) -> bool | str:
    """questionary validator for period fields."""
    return (value.isdigit() and int(value) > 0) or "Enter a positive whole number"


def _percentage(value: str) -> bool | str:
    try:
        return 0 <= float(value) <= 100 or "Enter a number between 0 and 100"
    except ValueError:
        return "Enter a number between 0 and 100"


def prompt_for_run(defaults: StrategyConfig, data_file: str | None) -> tuple[str, StrategyConfig]:
    """
    Ask for the data file and every strategy parameter.

    Returns:
        Tuple of (data_file, config)
    """
    data_file = questionary.path(
        "CSV price file:",
        default=data_file or "",
        validate=lambda p: Path(p).is_file() or "File not found",
        style=MENU_STYLE,
    ).ask()
    if data_file is None:
        raise KeyboardInterrupt

    answers = questionary.form(
        ma_period=questionary.text(
            "SMA period:", default=str(defaults.ma_period), validate=_positive_int
        ),
        rsi_period=questionary.text(
            "RSI period:", default=str(defaults.rsi_period), validate=_positive_int
        ),
        rsi_overbought=questionary.text(
            "RSI overbought:", default=str(defaults.rsi_overbought), validate=_percentage
        ),
        macd_fast=questionary.text(
            "MACD fast period:", default=str(defaults.macd_fast), validate=_positive_int
        ),
        macd_slow=questionary.text(
            "MACD slow period:", default=str(defaults.macd_slow), validate=_positive_int
        ),
        macd_signal=questionary.text(
            "MACD signal period:", default=str(defaults.macd_signal), validate=_positive_int
        ),
    ).ask()
    if not answers:
        raise KeyboardInterrupt

    config = StrategyConfig(
        ma_period=int(answers["ma_period"]),
        rsi_period=int(answers["rsi_period"]),
        rsi_overbought=float(answers["rsi_overbought"]),
        macd_fast=int(answers["macd_fast"]),
        macd_slow=int(answers["macd_slow"]),
        macd_signal=int(answers["macd_signal"]),
    )
    return data_file, config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Backtest an SMA / MACD / RSI crossover strategy on CSV price data"
    )
    parser.add_argument(
        "--data",
        "-d",
        help="Path to CSV file with a close column and a date/time/timestamp column",
    )
    parser.add_argument("--ma-period", type=int, help="SMA trend filter period")
    parser.add_argument("--rsi-period", type=int, help="RSI lookback period")
    parser.add_argument("--rsi-overbought", type=float, help="Skip entries at or above this RSI")
    parser.add_argument(
        "--macd",
        type=int,
        nargs=3,
        metavar=("FAST", "SLOW", "SIGNAL"),
        help="MACD fast, slow and signal periods",
    )
    parser.add_argument(
        "--env-file",
        help="Read BACKTEST_* defaults from this .env file (default: ./.env if present)",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Prompt for the data file and strategy parameters",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of tables",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every trade entry and exit",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> StrategyConfig:
    """Environment / .env defaults, overridden by any flags given."""
    config = StrategyConfig.from_env(args.env_file)

    overrides = {
        "ma_period": args.ma_period,
        "rsi_period": args.rsi_period,
        "rsi_overbought": args.rsi_overbought,
    }
    if args.macd:
        overrides["macd_fast"], overrides["macd_slow"], overrides["macd_signal"] = args.macd

    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        data_file = args.data
        if args.interactive:
            data_file, config = prompt_for_run(config, data_file)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nCancelled.")
        return 1

    if not data_file:
        print("❌ No data file given. Use --data or --interactive.")
        return 1

    try:
        source = HistoricalDataSource(data_file)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        return 1

    logger.info(f"Loaded {source!r}")
    result = run_backtest(source.series, config)

    if args.json:
        print(json.dumps({"config": config.to_dict(), **result.to_dict()}, indent=2))
    else:
        render_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
