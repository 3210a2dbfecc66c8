#!/usr/bin/env python3
"""
Tests for result rendering and the run_backtest CLI.

Run with:
    python -m pytest tests/test_report.py -v

Or standalone:
    python tests/test_report.py
"""

import json
import sys
from datetime import datetime, timedelta
from pathlib import Path

from rich.console import Console

# Add project root to path for standalone execution
sys.path.insert(0, str(Path(__file__).parent.parent))

import run_backtest
from backtester.backtest import calculate_performance
from backtester.simulation.models import Trade
from backtester.ui import format_profit_factor, render_result

REFERENCE_CLOSES = [10, 11, 12, 11, 10, 9, 10, 11, 13, 14]
REFERENCE_FLAGS = [
    "--ma-period", "3",
    "--rsi-period", "3",
    "--rsi-overbought", "70",
    "--macd", "2", "4", "2",
]


def make_trade(entry_price: float, exit_price: float, day: int) -> Trade:
    start = datetime(2024, 1, 1)
    return Trade(
        entry_time=start + timedelta(days=day),
        exit_time=start + timedelta(days=day + 2),
        entry_price=entry_price,
        exit_price=exit_price,
        entry_index=day,
        exit_index=day + 2,
    )


def render_to_text(result) -> str:
    console = Console(record=True, width=120)
    render_result(result, console=console)
    return console.export_text()


def empty_env_file(tmp_path: Path) -> Path:
    path = tmp_path / ".env"
    path.write_text("")
    return path


def write_reference_csv(tmp_path: Path) -> Path:
    path = tmp_path / "prices.csv"
    rows = ["date,close"]
    for i, close in enumerate(REFERENCE_CLOSES):
        rows.append(f"{(datetime(2024, 1, 1) + timedelta(days=i)).date().isoformat()},{close}")
    path.write_text("\n".join(rows) + "\n")
    return path


class TestReport:
    """Tests for the rich report."""

    def test_format_profit_factor(self):
        assert format_profit_factor(float("inf")) == "∞"
        assert format_profit_factor(2.5) == "2.50"
        assert format_profit_factor(0.0) == "0.00"

    def test_summary_and_trades(self):
        result = calculate_performance([make_trade(10.0, 14.0, 0), make_trade(12.0, 11.0, 3)])
        text = render_to_text(result)

        assert "Total Trades:" in text
        assert "50.00%" in text
        assert "4.00" in text  # profit factor
        assert "2024-01-01" in text
        assert "2024-01-06" in text
        assert "-1.00" in text

    def test_infinite_profit_factor_and_no_trades(self):
        text = render_to_text(calculate_performance([]))
        assert "∞" in text
        assert "0.00%" in text
        assert "No trades were taken." in text


class TestCli:
    """Tests for the run_backtest entry point."""

    def test_json_output(self, tmp_path, capsys):
        csv_path = write_reference_csv(tmp_path)
        env_file = empty_env_file(tmp_path)

        code = run_backtest.main(
            ["--data", str(csv_path), "--env-file", str(env_file), "--json", *REFERENCE_FLAGS]
        )

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["config"]["ma_period"] == 3
        assert output["performance"]["total_trades"] == 1
        assert output["performance"]["profit_factor"] == "inf"
        assert output["trades"]["history"][0]["pnl"] == 4.0

    def test_missing_file(self, tmp_path, capsys):
        env_file = empty_env_file(tmp_path)
        code = run_backtest.main(
            ["--data", str(tmp_path / "missing.csv"), "--env-file", str(env_file)]
        )
        assert code == 1
        assert "not found" in capsys.readouterr().out

    def test_no_data_argument(self, tmp_path, capsys):
        env_file = empty_env_file(tmp_path)
        assert run_backtest.main(["--env-file", str(env_file)]) == 1
        assert "No data file" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path, capsys):
        csv_path = write_reference_csv(tmp_path)
        env_file = empty_env_file(tmp_path)
        code = run_backtest.main(
            ["--data", str(csv_path), "--env-file", str(env_file), "--ma-period", "0"]
        )
        assert code == 1
        assert "Invalid configuration" in capsys.readouterr().out


def run_tests():
    """Run the tests that need no pytest fixtures."""
    import traceback

    test_classes = [TestReport, TestCli]
    passed = 0
    failed = 0
    skipped = 0

    for test_class in test_classes:
        print(f"\n{'='*60}")
        print(f"Running {test_class.__name__}")
        print("=" * 60)

        instance = test_class()
        for method_name in dir(instance):
            if not method_name.startswith("test_"):
                continue
            method = getattr(instance, method_name)
            if method.__code__.co_argcount > 1:
                print(f"  - {method_name}: needs pytest")
                skipped += 1
                continue
            try:
                method()
                print(f"  ✓ {method_name}")
                passed += 1
            except AssertionError as e:
                print(f"  ✗ {method_name}: {e}")
                failed += 1
            except Exception as e:
                print(f"  ✗ {method_name}: {e}")
                traceback.print_exc()
                failed += 1

    print(f"\n{'='*60}")
    print(f"Results: {passed} passed, {failed} failed, {skipped} skipped")
    print("=" * 60)

    return failed == 0


if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
