"""
RSI Indicator - Relative Strength Index calculation.

Measures the speed and magnitude of recent price changes
to evaluate overbought or oversold conditions.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class WilderState:
    """Average gain and average loss, smoothed with Wilder's method."""

    period: int
    avg_gain: float = 0.0
    avg_loss: float = 0.0

    @classmethod
    def seed(cls, changes: Sequence[float], period: int) -> "WilderState":
        """Build the initial state from the simple average of the first changes."""
        gains = sum(c for c in changes if c > 0)
        losses = sum(-c for c in changes if c < 0)
        return cls(period, avg_gain=gains / period, avg_loss=losses / period)

    def step(self, change: float) -> None:
        """Wilder's smoothing: (prev_avg * (period-1) + current) / period"""
        gain = change if change > 0 else 0.0
        loss = -change if change < 0 else 0.0
        self.avg_gain = (self.avg_gain * (self.period - 1) + gain) / self.period
        self.avg_loss = (self.avg_loss * (self.period - 1) + loss) / self.period

    @property
    def value(self) -> float:
        """
        RSI = 100 - (100 / (1 + RS))
        RS = Average Gain / Average Loss

        No losses at all means RSI 100, even on a flat market.
        """
        if self.avg_loss == 0:
            return 100.0
        rs = self.avg_gain / self.avg_loss
        return 100 - (100 / (1 + rs))


def rsi(values: Sequence[float], period: int = 14) -> list[float | None]:
    """
    Calculate RSI series using Wilder's smoothing.

    The first RSI value sits at index `period` and comes from the simple
    average of the first `period` price changes. Every later index smooths
    the previous averages with that step's change.

    Args:
        values: Prices (oldest first), needs period + 1 prices minimum
        period: Lookback period (default 14)

    Returns:
        List aligned with values. Indices 0..period-1 are None, and the
        whole series is None when there are not enough prices.
    """
    result: list[float | None] = [None] * len(values)
    if len(values) <= period:
        return result

    changes = [values[i] - values[i - 1] for i in range(1, len(values))]

    state = WilderState.seed(changes[:period], period)
    result[period] = state.value

    for i in range(period + 1, len(values)):
        state.step(changes[i - 1])
        result[i] = state.value

    return result
