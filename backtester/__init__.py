"""
Crossover backtester - SMA / MACD / RSI strategy simulation.

Packages:
- indicators: Pure indicator math (SMA, EMA, RSI, MACD)
- simulation: Price data, trade models and the crossover trader
- backtest: Engine and performance metrics
- core: Strategy configuration
- ui: Terminal report rendering
"""
