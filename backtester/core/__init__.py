"""
Core configuration for the backtester.

Modules:
- config: Strategy parameters and their validation
"""

from backtester.core.config import StrategyConfig

__all__ = ["StrategyConfig"]
