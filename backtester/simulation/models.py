"""
Data models for trade simulation.

PricePoint is what the ingestion layer produces, Trade is what the
simulator produces. Both are frozen: nothing downstream mutates them.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class PositionState(Enum):
    """Simulator state."""

    FLAT = "flat"  # No open position
    LONG = "long"  # One open long position


@dataclass(frozen=True)
class PricePoint:
    """
    A single bar of the price series.

    Only timestamp and close are used by the indicators and simulator.
    """

    timestamp: datetime
    close: float
    open: float | None = None
    high: float | None = None
    low: float | None = None
    volume: float | None = None


@dataclass(frozen=True)
class Trade:
    """
    A completed trade (for history).

    Created when a position is closed.
    """

    entry_time: datetime
    exit_time: datetime
    entry_price: float
    exit_price: float
    entry_index: int  # Position of the entry bar in the series
    exit_index: int  # Always > entry_index

    @property
    def pnl(self) -> float:
        """Realized profit/loss per unit."""
        return self.exit_price - self.entry_price

    @property
    def pnl_percent(self) -> float:
        """P&L as percentage of entry price."""
        return (self.pnl / self.entry_price) * 100 if self.entry_price > 0 else 0

    @property
    def duration_seconds(self) -> float:
        """How long the position was held."""
        return (self.exit_time - self.entry_time).total_seconds()

    @property
    def bars_held(self) -> int:
        return self.exit_index - self.entry_index

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "entry_time": self.entry_time.isoformat(),
            "exit_time": self.exit_time.isoformat(),
            "entry_price": self.entry_price,
            "exit_price": self.exit_price,
            "pnl": self.pnl,
            "pnl_percent": self.pnl_percent,
            "bars_held": self.bars_held,
        }
