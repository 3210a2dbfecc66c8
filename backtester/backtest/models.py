"""
Data models for backtest indicators and results.
"""

import math
from dataclasses import dataclass

from backtester.indicators.macd import MACDResult
from backtester.simulation.models import Trade


@dataclass(frozen=True)
class IndicatorSet:
    """
    Every indicator series the trader needs, aligned to the price series.

    Recomputed from scratch for each run.
    """

    sma: list[float | None]
    rsi: list[float | None]
    macd: MACDResult

    def __len__(self) -> int:
        return len(self.sma)


@dataclass(frozen=True)
class BacktestResult:
    """
    Results from a completed backtest run.

    profit_factor is math.inf when there were no losing trades.
    """

    trades: tuple[Trade, ...]
    total_trades: int
    win_rate: float  # % of winning trades (0-100)
    profit_factor: float  # Gross profit / gross loss

    @property
    def has_infinite_profit_factor(self) -> bool:
        return math.isinf(self.profit_factor)

    @property
    def winning_trades(self) -> int:
        """Number of winning trades."""
        return sum(1 for t in self.trades if t.pnl > 0)

    @property
    def losing_trades(self) -> int:
        """Number of losing trades."""
        return sum(1 for t in self.trades if t.pnl < 0)

    @property
    def gross_profit(self) -> float:
        return sum(t.pnl for t in self.trades if t.pnl > 0)

    @property
    def gross_loss(self) -> float:
        return sum(abs(t.pnl) for t in self.trades if t.pnl < 0)

    @property
    def total_pnl(self) -> float:
        return sum(t.pnl for t in self.trades)

    @property
    def avg_win(self) -> float:
        """Average profit on winning trades."""
        wins = [t.pnl for t in self.trades if t.pnl > 0]
        return sum(wins) / len(wins) if wins else 0

    @property
    def avg_loss(self) -> float:
        """Average loss on losing trades."""
        losses = [t.pnl for t in self.trades if t.pnl < 0]
        return sum(losses) / len(losses) if losses else 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization.

        The infinite profit factor is written as the string "inf" so the
        output stays valid JSON.
        """
        return {
            "performance": {
                "total_trades": self.total_trades,
                "win_rate": self.win_rate,
                "profit_factor": "inf" if self.has_infinite_profit_factor else self.profit_factor,
                "total_pnl": self.total_pnl,
            },
            "trades": {
                "winning": self.winning_trades,
                "losing": self.losing_trades,
                "avg_win": self.avg_win,
                "avg_loss": self.avg_loss,
                "history": [t.to_dict() for t in self.trades],
            },
        }
