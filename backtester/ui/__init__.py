"""
Terminal presentation for backtest results.
"""

from .report import build_summary_table, build_trades_table, format_profit_factor, render_result

__all__ = [
    "build_summary_table",
    "build_trades_table",
    "format_profit_factor",
    "render_result",
]
