"""
Crossover Trader - single-position trade simulator.

Walks the price series and its indicators bar by bar and keeps at most
one long position open:

- Enter when price is above its SMA, MACD crosses above its signal line
  and RSI is below the overbought threshold.
- Exit on the next bearish MACD crossover, or on the final bar.
"""

import logging
from collections.abc import Sequence

from backtester.indicators.macd import MACDResult
from backtester.simulation.models import PositionState, PricePoint, Trade

logger = logging.getLogger(__name__)


class CrossoverTrader:
    """
    Signal-driven trade state machine.

    Usage:
        trader = CrossoverTrader(series, sma_values, rsi_values, macd_result, 70.0)
        trades = trader.run()
    """

    def __init__(
        self,
        series: Sequence[PricePoint],
        sma_values: Sequence[float | None],
        rsi_values: Sequence[float | None],
        macd_result: MACDResult,
        rsi_overbought: float,
    ):
        """
        Initialize the trader.

        Args:
            series: Price bars, oldest first
            sma_values: SMA series aligned with series
            rsi_values: RSI series aligned with series
            macd_result: MACD and signal lines aligned with series
            rsi_overbought: Entries are only taken while RSI is below this
        """
        self.series = series
        self.sma_values = sma_values
        self.rsi_values = rsi_values
        self.macd_result = macd_result
        self.rsi_overbought = rsi_overbought

        # State
        self.state = PositionState.FLAT
        self.trade_history: list[Trade] = []
        self._entry_index: int | None = None

    def should_enter(self, index: int) -> bool:
        """Check all entry conditions at index."""
        close = self.series[index].close
        sma_value = self.sma_values[index]
        if sma_value is None or not close > sma_value:
            return False

        if not self.macd_result.is_bullish_crossover(index):
            return False

        rsi_value = self.rsi_values[index]
        return rsi_value is not None and rsi_value < self.rsi_overbought

    def should_exit(self, index: int) -> bool:
        """Bearish crossover, or the last bar of the series."""
        if index == len(self.series) - 1:
            return True
        return self.macd_result.is_bearish_crossover(index)

    def step(self, index: int) -> Trade | None:
        """
        Evaluate one bar.

        Returns:
            The Trade closed on this bar, if any
        """
        if self.state == PositionState.FLAT:
            if self.should_enter(index):
                self._open(index)
            return None

        if self.should_exit(index):
            return self._close(index)
        return None

    def run(self) -> list[Trade]:
        """Walk bars 1..n-1 and return the closed trades."""
        for index in range(1, len(self.series)):
            self.step(index)
        return list(self.trade_history)

    def _open(self, index: int) -> None:
        point = self.series[index]
        self.state = PositionState.LONG
        self._entry_index = index
        logger.debug(f"Opened LONG at bar {index} ({point.timestamp}): {point.close:.4f}")

    def _close(self, index: int) -> Trade:
        entry = self.series[self._entry_index]
        exit_point = self.series[index]

        trade = Trade(
            entry_time=entry.timestamp,
            exit_time=exit_point.timestamp,
            entry_price=entry.close,
            exit_price=exit_point.close,
            entry_index=self._entry_index,
            exit_index=index,
        )
        self.trade_history.append(trade)

        self.state = PositionState.FLAT
        self._entry_index = None
        logger.debug(
            f"Closed LONG at bar {index} ({exit_point.timestamp}): "
            f"{exit_point.close:.4f} | P&L {trade.pnl:+.4f}"
        )
        return trade

    def reset(self) -> None:
        """Reset to FLAT with an empty trade history."""
        self.state = PositionState.FLAT
        self.trade_history.clear()
        self._entry_index = None


def simulate_trades(
    series: Sequence[PricePoint],
    sma_values: Sequence[float | None],
    rsi_values: Sequence[float | None],
    macd_result: MACDResult,
    rsi_overbought: float,
) -> list[Trade]:
    """Run a CrossoverTrader over the series and return its trades."""
    trader = CrossoverTrader(series, sma_values, rsi_values, macd_result, rsi_overbought)
    return trader.run()
