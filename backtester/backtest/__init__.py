"""
Backtest Module - runs the crossover strategy over historical data.

Orchestrates the flow: Price Series → Indicators → Trader → Metrics
"""

from .engine import BacktestEngine, compute_indicators, run_backtest
from .metrics import calculate_performance
from .models import BacktestResult, IndicatorSet

__all__ = [
    "BacktestEngine",
    "BacktestResult",
    "IndicatorSet",
    "calculate_performance",
    "compute_indicators",
    "run_backtest",
]
