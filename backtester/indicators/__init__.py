"""
Technical Indicators Module - Pure math functions for market analysis.

Layer 1 of the backtesting pipeline.
All functions are stateless and return series aligned to their input prices.
"""

from .macd import MACDResult, macd
from .moving_averages import EMAState, RunningSum, ema, latest, sma
from .rsi import WilderState, rsi

__all__ = [
    # Moving Averages
    "sma",
    "ema",
    "latest",
    "RunningSum",
    "EMAState",
    # RSI
    "rsi",
    "WilderState",
    # MACD
    "macd",
    "MACDResult",
]
