"""
Backtest Engine - runs the crossover strategy over a price series.

Flow: Price Series → Indicators → Crossover Trader → Performance Metrics

The engine takes an already loaded, chronologically ordered series and a
StrategyConfig, and returns a single BacktestResult. It does not read files
or render anything.
"""

import logging
import time
from collections.abc import Sequence

from backtester.backtest.metrics import calculate_performance
from backtester.backtest.models import BacktestResult, IndicatorSet
from backtester.core.config import StrategyConfig
from backtester.indicators import latest, macd, rsi, sma
from backtester.simulation.models import PricePoint
from backtester.simulation.trader import CrossoverTrader

logger = logging.getLogger(__name__)


def compute_indicators(closes: Sequence[float], config: StrategyConfig) -> IndicatorSet:
    """Compute every indicator the strategy uses over the close prices."""
    return IndicatorSet(
        sma=sma(closes, config.ma_period),
        rsi=rsi(closes, config.rsi_period),
        macd=macd(closes, config.macd_fast, config.macd_slow, config.macd_signal),
    )


class BacktestEngine:
    """
    Orchestrates one backtest run.

    Processes a price series through:
    1. Indicators (pure math functions)
    2. Crossover trader (single-position state machine)
    3. Performance metrics
    """

    def __init__(self, config: StrategyConfig | None = None) -> None:
        """
        Initialize the backtest engine.

        Args:
            config: Strategy parameters (defaults if None)
        """
        self.config = config or StrategyConfig()
        self.indicators: IndicatorSet | None = None

    def run(self, series: Sequence[PricePoint]) -> BacktestResult:
        """
        Run the backtest.

        Args:
            series: Price bars, oldest first

        Returns:
            BacktestResult with trades and performance metrics
        """
        start_time = time.time()
        logger.info(f"Starting backtest: {len(series)} bars, config={self.config.to_dict()}")

        closes = [point.close for point in series]
        self.indicators = compute_indicators(closes, self.config)
        logger.debug(
            f"Last values: SMA={latest(self.indicators.sma)} "
            f"RSI={latest(self.indicators.rsi)} "
            f"MACD={latest(self.indicators.macd.macd_line)} "
            f"signal={latest(self.indicators.macd.signal_line)}"
        )

        trader = CrossoverTrader(
            series,
            self.indicators.sma,
            self.indicators.rsi,
            self.indicators.macd,
            self.config.rsi_overbought,
        )
        trades = trader.run()

        result = calculate_performance(trades)
        logger.info(
            f"Backtest finished in {time.time() - start_time:.3f}s: "
            f"{result.total_trades} trades, win rate {result.win_rate:.1f}%"
        )
        return result


def run_backtest(
    series: Sequence[PricePoint],
    config: StrategyConfig | None = None,
) -> BacktestResult:
    """
    Convenience function to run a backtest with one call.

    Example:
        source = HistoricalDataSource("prices.csv")
        result = run_backtest(source.series, StrategyConfig(ma_period=50))
    """
    return BacktestEngine(config).run(series)
