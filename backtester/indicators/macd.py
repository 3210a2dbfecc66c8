"""
MACD Indicator - Moving Average Convergence Divergence.

Trend-following momentum indicator showing the relationship
between two exponential moving averages of price.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .moving_averages import ema


@dataclass(frozen=True)
class MACDResult:
    """Aligned MACD series. Entries are None where not yet computable."""

    macd_line: list[float | None]  # Fast EMA - Slow EMA
    signal_line: list[float | None]  # EMA of MACD line

    @property
    def histogram(self) -> list[float | None]:
        """MACD line - Signal line, where both are defined."""
        return [
            m - s if m is not None and s is not None else None
            for m, s in zip(self.macd_line, self.signal_line, strict=True)
        ]

    def is_bullish_crossover(self, index: int) -> bool:
        """True if MACD crossed above the signal line at index."""
        return _crossed(self, index, bullish=True)

    def is_bearish_crossover(self, index: int) -> bool:
        """True if MACD crossed below the signal line at index."""
        return _crossed(self, index, bullish=False)


def _or_zero(value: float | None) -> float:
    return 0.0 if value is None else value


def _crossed(result: MACDResult, index: int, bullish: bool) -> bool:
    if index < 1:
        return False

    prev_macd = result.macd_line[index - 1]
    curr_macd = result.macd_line[index]
    if prev_macd is None or curr_macd is None:
        return False

    # Signal still warming up reads as 0, same as its zero-filled input
    prev_signal = _or_zero(result.signal_line[index - 1])
    curr_signal = _or_zero(result.signal_line[index])

    if bullish:
        return prev_macd <= prev_signal and curr_macd > curr_signal
    return prev_macd >= prev_signal and curr_macd < curr_signal


def macd(
    values: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> MACDResult:
    """
    Calculate MACD (Moving Average Convergence Divergence).

    MACD Line = Fast EMA - Slow EMA
    Signal Line = EMA of MACD Line

    While the MACD line is still undefined it is fed to the signal EMA as 0,
    so early signal values are pulled toward zero.

    Args:
        values: Prices (oldest first)
        fast: Fast EMA period (default 12)
        slow: Slow EMA period (default 26)
        signal: Signal line EMA period (default 9)

    Returns:
        MACDResult with macd_line and signal_line aligned to values
    """
    fast_ema = ema(values, fast)
    slow_ema = ema(values, slow)

    macd_line: list[float | None] = [
        f - s if f is not None and s is not None else None
        for f, s in zip(fast_ema, slow_ema, strict=True)
    ]

    zero_filled = [m if m is not None else 0.0 for m in macd_line]
    signal_line = ema(zero_filled, signal)

    return MACDResult(macd_line=macd_line, signal_line=signal_line)
