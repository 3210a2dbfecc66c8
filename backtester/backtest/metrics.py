"""
Performance metrics for a list of closed trades.
"""

from collections.abc import Sequence

from backtester.backtest.models import BacktestResult
from backtester.simulation.models import Trade


def calculate_performance(trades: Sequence[Trade]) -> BacktestResult:
    """
    Reduce closed trades to summary statistics.

    Win rate is the share of trades with positive P&L (0 with no trades).
    Profit factor is gross profit / gross loss, or float("inf") whenever
    gross loss is zero, including when there is no profit either.

    Args:
        trades: Closed trades in the order they were taken

    Returns:
        BacktestResult holding the trades and their metrics
    """
    total = len(trades)

    # Win rate
    winning = sum(1 for t in trades if t.pnl > 0)
    win_rate = (winning / total * 100) if total else 0.0

    # Profit factor
    gross_profit = sum(t.pnl for t in trades if t.pnl > 0)
    gross_loss = sum(abs(t.pnl) for t in trades if t.pnl < 0)
    profit_factor = gross_profit / gross_loss if gross_loss else float("inf")

    return BacktestResult(
        trades=tuple(trades),
        total_trades=total,
        win_rate=win_rate,
        profit_factor=profit_factor,
    )
