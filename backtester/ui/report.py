"""
Backtest report rendering.

Prints the summary and trade history of a BacktestResult to the terminal
with Rich tables.
"""

import math

from rich.console import Console
from rich.table import Table
from rich.text import Text

from backtester.backtest.models import BacktestResult

COLOR_UP = "#44ffaa"  # Bright green for profit
COLOR_DOWN = "#ff7777"  # Bright red for loss


def format_profit_factor(value: float) -> str:
    """Two decimals, or ∞ when there were no losses."""
    return "∞" if math.isinf(value) else f"{value:.2f}"


def build_summary_table(result: BacktestResult) -> Table:
    """Total trades, win rate and profit factor."""
    table = Table(title="📊 BACKTEST RESULTS", show_header=False, box=None)
    table.add_column("metric", style="bold")
    table.add_column("value", justify="right")

    table.add_row("Total Trades:", str(result.total_trades))
    table.add_row("Win Rate:", f"{result.win_rate:.2f}%")
    table.add_row("Profit Factor:", format_profit_factor(result.profit_factor))
    return table


def build_trades_table(result: BacktestResult) -> Table:
    """One row per closed trade, P&L colored by sign."""
    table = Table(title="🔄 TRADES")
    table.add_column("#", justify="right")
    table.add_column("Entry Date")
    table.add_column("Exit Date")
    table.add_column("Entry Price", justify="right")
    table.add_column("Exit Price", justify="right")
    table.add_column("P&L", justify="right")

    for idx, trade in enumerate(result.trades, start=1):
        color = COLOR_UP if trade.pnl >= 0 else COLOR_DOWN
        table.add_row(
            str(idx),
            trade.entry_time.strftime("%Y-%m-%d"),
            trade.exit_time.strftime("%Y-%m-%d"),
            f"{trade.entry_price:.2f}",
            f"{trade.exit_price:.2f}",
            Text(f"{trade.pnl:.2f}", style=color),
        )
    return table


def render_result(result: BacktestResult, console: Console | None = None) -> None:
    """Print the summary, then the trade table if there were trades."""
    console = console or Console()
    console.print(build_summary_table(result))
    if result.trades:
        console.print(build_trades_table(result))
    else:
        console.print("No trades were taken.")
