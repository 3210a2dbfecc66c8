"""
Simulation Module - price data, trade models and the crossover trader.
"""

from .historical_source import HistoricalDataSource, parse_price_csv
from .models import PositionState, PricePoint, Trade
from .trader import CrossoverTrader, simulate_trades

__all__ = [
    "HistoricalDataSource",
    "parse_price_csv",
    "PositionState",
    "PricePoint",
    "Trade",
    "CrossoverTrader",
    "simulate_trades",
]
