"""
Moving Average Indicators - SMA and EMA calculations.

Pure math functions for calculating simple and exponential moving averages.
Both return a series aligned to the input: one value per price, None while
the average is still warming up.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class RunningSum:
    """Rolling window sum, updated in O(1) per step."""

    period: int
    total: float = 0.0

    def step(self, incoming: float, outgoing: float | None = None) -> float:
        """Add the newest value and drop the one leaving the window."""
        self.total += incoming
        if outgoing is not None:
            self.total -= outgoing
        return self.total


@dataclass
class EMAState:
    """
    Running exponential average.

    The first value seeds the average directly. Every later value is blended
    in with multiplier k = 2 / (period + 1).
    """

    period: int
    value: float | None = None

    @property
    def multiplier(self) -> float:
        return 2 / (self.period + 1)

    def step(self, price: float) -> float:
        if self.value is None:
            self.value = price
        else:
            k = self.multiplier
            self.value = price * k + self.value * (1 - k)
        return self.value


def sma(values: Sequence[float], period: int) -> list[float | None]:
    """
    Calculate Simple Moving Average series.

    Args:
        values: Prices (oldest first)
        period: Number of periods to average

    Returns:
        List aligned with values. Index i holds the mean of the trailing
        `period` values, or None for i < period - 1.
    """
    result: list[float | None] = [None] * len(values)
    window = RunningSum(period)

    for i, price in enumerate(values):
        outgoing = values[i - period] if i >= period else None
        total = window.step(price, outgoing)
        if i >= period - 1:
            result[i] = total / period

    return result


def ema(values: Sequence[float], period: int) -> list[float | None]:
    """
    Calculate Exponential Moving Average series.

    The running average starts at values[0] and is updated on every index,
    but only reported from index period - 1 onward. The first reported value
    therefore already carries period - 1 smoothing steps.

    Args:
        values: Prices (oldest first)
        period: Number of periods for EMA calculation

    Returns:
        List aligned with values, None for i < period - 1
    """
    result: list[float | None] = [None] * len(values)
    state = EMAState(period)

    for i, price in enumerate(values):
        current = state.step(price)
        if i >= period - 1:
            result[i] = current

    return result


def latest(series: Sequence[float | None]) -> float | None:
    """Most recent value of an indicator series (None if empty or warming up)."""
    return series[-1] if series else None
